"""
Tests for the main window wiring.
"""

import json
import pytest
from core.json_import import ScenarioImporter
from core.models import WeatherCondition
from gui.main_window import MainWindow


class TestMainWindow:
    """Test that control changes reach the grounding system."""

    @pytest.fixture
    def window(self, qtbot):
        window = MainWindow()
        qtbot.addWidget(window)
        return window

    @pytest.fixture
    def out_of_range_scenario(self, tmp_path):
        """Scenario with values the importer accepts with warnings only."""
        path = tmp_path / 'scenario.json'
        path.write_text(json.dumps({
            'format_version': '1.0.0',
            'configuration': {'rod_spacing': 0.5, 'radial_length': 0.0, 'rod_count': 20},
        }), encoding='utf-8')
        return path

    def test_initial_metrics_shown(self, window):
        labels = window.metrics_panel.value_labels
        assert labels['total_resistance'].text() == "4.62 Ω"
        assert labels['status'].text() == "Excellent"

    def test_current_flow_indicator(self, window):
        flow_label = window.metrics_panel.flow_label
        assert flow_label.text() == "1.50×"
        assert '#00ff00' in flow_label.styleSheet()

        window.parameter_panel.controls['soil_type'].setCurrentIndex(
            window.parameter_panel.controls['soil_type'].findData('dry'))
        assert '#ff4400' in window.metrics_panel.flow_label.styleSheet()
        assert window.metrics_panel.flow_label.text() == "0.50×"

    def test_rod_count_control_updates_metrics(self, window):
        window.parameter_panel.controls['rod_count'].setValue(1)

        assert window.system.config.rod_count == 1
        assert window.metrics_panel.value_labels['status'].text() != "Excellent"

    def test_weather_control_syncs_humidity(self, window):
        combo = window.parameter_panel.controls['weather']
        combo.setCurrentIndex(combo.findData('storm'))

        assert window.system.config.weather == WeatherCondition.STORM
        assert window.system.config.humidity == 1.0
        assert window.parameter_panel.controls['humidity'].value() == 1.0
        assert window.weather_status_label.text() == "Storm"

    def test_reset_restores_controls(self, window):
        window.parameter_panel.controls['rod_count'].setValue(9)
        window.reset_configuration()

        assert window.system.config.rod_count == 4
        assert window.parameter_panel.controls['rod_count'].value() == 4

    def test_imported_values_outside_control_range_are_shown(self, window, out_of_range_scenario):
        """Controls show the values being calculated with, not clamped ones."""
        assert ScenarioImporter().apply_scenario(out_of_range_scenario, window.system)
        window.parameter_panel.set_configuration(window.system.config)
        controls = window.parameter_panel.controls

        assert window.system.config.rod_spacing == 0.5
        assert controls['rod_spacing'].value() == 0.5
        assert window.system.config.radial_length == 0.0
        assert controls['radial_length'].value() == 0.0
        assert controls['rod_count'].value() == 20

    def test_reset_restores_control_ranges(self, window, out_of_range_scenario):
        ScenarioImporter().apply_scenario(out_of_range_scenario, window.system)
        window.parameter_panel.set_configuration(window.system.config)
        window.reset_configuration()
        controls = window.parameter_panel.controls

        assert controls['rod_spacing'].minimum() == 1.0
        assert controls['rod_count'].maximum() == 12
        assert controls['rod_spacing'].value() == 3.0

    def test_save_plot_image(self, window, tmp_path):
        image_path = tmp_path / 'sensitivity.png'

        assert window.sensitivity_tab.save_image(str(image_path))
        assert image_path.exists()
        assert image_path.stat().st_size > 0

    def test_save_plot_image_to_missing_directory(self, window, tmp_path):
        image_path = tmp_path / 'missing' / 'sensitivity.png'
        assert not window.sensitivity_tab.save_image(str(image_path))
