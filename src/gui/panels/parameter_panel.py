"""
Parameter panel with grouped controls for the grounding configuration.

Every control emits parameter_changed(name, value) when edited; the main
window forwards these into the grounding system and recalculates.
"""

import logging
from typing import Any, Dict
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QFormLayout, QGroupBox, QSpinBox, QDoubleSpinBox,
    QComboBox, QSlider
)
from PyQt6.QtCore import Qt, pyqtSignal, pyqtSlot

from core.models import GroundingConfiguration, SoilCategory, WeatherCondition
from utils.constants import PARAMETER_RANGES

logger = logging.getLogger(__name__)


class ParameterPanel(QWidget):
    """Grouped controls for every configurable grounding parameter."""

    parameter_changed = pyqtSignal(str, object)
    time_of_day_changed = pyqtSignal(float)

    def __init__(self, config: GroundingConfiguration, parent=None):
        super().__init__(parent)
        self.controls: Dict[str, QWidget] = {}
        self._updating = False
        self._setup_ui()
        self.set_configuration(config)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(5, 5, 5, 5)

        radials = self._add_group(layout, "Antenna radials")
        self._add_spin(radials, 'radial_count', "Number of radials")
        self._add_double_spin(radials, 'radial_length', "Radial length (m)", 1)

        rods = self._add_group(layout, "Ground rods")
        self._add_spin(rods, 'rod_count', "Rod count")
        self._add_double_spin(rods, 'rod_length', "Length (m)", 1)
        self._add_double_spin(rods, 'rod_diameter', "Diameter (m)", 3)
        self._add_double_spin(rods, 'rod_spacing', "Spacing (m)", 1)

        soil = self._add_group(layout, "Soil")
        soil_combo = QComboBox()
        for category in SoilCategory:
            soil_combo.addItem(category.display_name, category.value)
        soil_combo.currentIndexChanged.connect(
            lambda _: self._emit('soil_type', soil_combo.currentData()))
        soil.addRow("Soil type", soil_combo)
        self.controls['soil_type'] = soil_combo
        self._add_double_spin(soil, 'humidity', "Humidity", 2)

        climate = self._add_group(layout, "Climate")
        weather_combo = QComboBox()
        for condition in WeatherCondition:
            weather_combo.addItem(condition.display_name, condition.value)
        weather_combo.currentIndexChanged.connect(self._on_weather_changed)
        climate.addRow("Weather", weather_combo)
        self.controls['weather'] = weather_combo

        self.time_slider = QSlider(Qt.Orientation.Horizontal)
        self.time_slider.setRange(0, 100)
        self.time_slider.setValue(50)
        self.time_slider.valueChanged.connect(
            lambda v: self.time_of_day_changed.emit(v / 100))
        climate.addRow("Time of day", self.time_slider)

        electrical = self._add_group(layout, "Electrical")
        self._add_double_spin(electrical, 'fault_voltage', "Fault voltage (V)", 0)
        self._add_double_spin(electrical, 'target_resistance', "Target resistance (Ω)", 1)

        layout.addStretch()

    def _add_group(self, layout: QVBoxLayout, title: str) -> QFormLayout:
        group = QGroupBox(title)
        form = QFormLayout(group)
        layout.addWidget(group)
        return form

    def _add_spin(self, form: QFormLayout, name: str, label: str):
        value_range = PARAMETER_RANGES[name]
        spin = QSpinBox()
        spin.setRange(value_range['min'], value_range['max'])
        spin.setSingleStep(value_range['step'])
        spin.valueChanged.connect(lambda v: self._emit(name, v))
        form.addRow(label, spin)
        self.controls[name] = spin

    def _add_double_spin(self, form: QFormLayout, name: str, label: str, decimals: int):
        value_range = PARAMETER_RANGES[name]
        spin = QDoubleSpinBox()
        spin.setDecimals(decimals)
        spin.setRange(value_range['min'], value_range['max'])
        spin.setSingleStep(value_range['step'])
        spin.valueChanged.connect(lambda v: self._emit(name, v))
        form.addRow(label, spin)
        self.controls[name] = spin

    def _emit(self, name: str, value: Any):
        if not self._updating:
            self.parameter_changed.emit(name, value)

    @pyqtSlot(int)
    def _on_weather_changed(self, index: int):
        self._emit('weather', self.controls['weather'].itemData(index))

    def set_configuration(self, config: GroundingConfiguration):
        """Show a configuration without emitting change signals."""
        self._updating = True
        try:
            for name, control in self.controls.items():
                value = getattr(config, name)
                if isinstance(control, QComboBox):
                    index = control.findData(getattr(value, 'value', value))
                    if index >= 0:
                        control.setCurrentIndex(index)
                else:
                    # Imported scenarios may hold values outside the usual control range
                    value_range = PARAMETER_RANGES[name]
                    control.setRange(min(value_range['min'], value), max(value_range['max'], value))
                    control.setValue(value)
        finally:
            self._updating = False
