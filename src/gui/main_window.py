"""
Main application window for Grounding Simulator.

This module provides the primary user interface with menu bar, status bar,
the parameter panel and a tabbed area for metrics and sensitivity plots.
"""

import logging
from typing import Any
from PyQt6.QtWidgets import (
    QMainWindow, QTabWidget, QWidget, QVBoxLayout, QSplitter, QMessageBox,
    QFileDialog, QLabel, QScrollArea
)
from PyQt6.QtCore import Qt, QSettings, pyqtSignal, pyqtSlot
from PyQt6.QtGui import QAction, QKeySequence

from core.calculations import GroundingSystem
from core.json_export import export_scenario_to_json
from core.json_import import ScenarioImporter
from core.models import GroundingMetrics
from core.validators import GroundingValidator, ValidationSeverity
from gui.panels.metrics_panel import MetricsPanel
from gui.panels.parameter_panel import ParameterPanel
from gui.tabs.sensitivity_tab import SensitivityTab
from utils.constants import (
    APP_NAME, APP_VERSION, APP_ORGANIZATION, DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT,
    MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT, JSON_EXPORT_FILTER, IMAGE_EXPORT_FILTER
)
from utils.formatting import soil_label, time_of_day_label, weather_label

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window with parameter panel and result tabs."""

    # Signals
    metrics_updated = pyqtSignal(object)  # Emitted with each new GroundingMetrics

    def __init__(self):
        """Initialize main window."""
        super().__init__()

        self.system = GroundingSystem()
        self.time_of_day = 0.5
        self.settings = QSettings(APP_ORGANIZATION, APP_NAME)

        # Setup UI
        self._setup_ui()
        self._create_menus()
        self._create_status_bar()
        self._restore_settings()

        # Connect signals
        self._connect_signals()

        self.update_calculations()
        logger.info("Main window initialized")

    def _setup_ui(self):
        """Setup the main user interface."""
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(5, 5, 5, 5)

        self.main_splitter = QSplitter(Qt.Orientation.Horizontal)
        main_layout.addWidget(self.main_splitter)

        # Parameter controls on the left
        self.parameter_panel = ParameterPanel(self.system.config)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.parameter_panel)
        scroll.setMinimumWidth(280)
        self.main_splitter.addWidget(scroll)

        # Results on the right
        self.tab_widget = QTabWidget()
        self.tab_widget.setDocumentMode(True)
        self.main_splitter.addWidget(self.tab_widget)

        self.metrics_panel = MetricsPanel()
        self.tab_widget.addTab(self.metrics_panel, "Metrics")

        self.sensitivity_tab = SensitivityTab(self.system)
        self.tab_widget.addTab(self.sensitivity_tab, "Sensitivity")

        self.main_splitter.setSizes([320, 780])

    def _create_menus(self):
        """Create application menu bar."""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("&File")

        import_action = QAction("&Import Scenario", self)
        import_action.setShortcut(QKeySequence.StandardKey.Open)
        import_action.setStatusTip("Load a grounding scenario from JSON")
        import_action.triggered.connect(self.import_scenario)
        file_menu.addAction(import_action)

        export_action = QAction("&Export Scenario", self)
        export_action.setShortcut(QKeySequence("Ctrl+E"))
        export_action.setStatusTip("Save configuration and metrics to JSON")
        export_action.triggered.connect(self.export_scenario)
        file_menu.addAction(export_action)

        save_image_action = QAction("Save Plot &Image...", self)
        save_image_action.setShortcut(QKeySequence("Ctrl+Shift+S"))
        save_image_action.setStatusTip("Save the sensitivity plot as an image")
        save_image_action.triggered.connect(self.save_plot_image)
        file_menu.addAction(save_image_action)

        file_menu.addSeparator()

        reset_action = QAction("&Reset to Defaults", self)
        reset_action.setStatusTip("Restore the default configuration")
        reset_action.triggered.connect(self.reset_configuration)
        file_menu.addAction(reset_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut(QKeySequence.StandardKey.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Tools menu
        tools_menu = menubar.addMenu("&Tools")

        validate_action = QAction("&Validate Configuration", self)
        validate_action.setStatusTip("Check configuration values against typical ranges")
        validate_action.triggered.connect(self.validate_configuration)
        tools_menu.addAction(validate_action)

        # Help menu
        help_menu = menubar.addMenu("&Help")

        about_action = QAction("&About", self)
        about_action.triggered.connect(self.show_about)
        help_menu.addAction(about_action)

    def _create_status_bar(self):
        """Create application status bar."""
        self.status_bar = self.statusBar()

        self.weather_status_label = QLabel()
        self.status_bar.addPermanentWidget(self.weather_status_label)

        self.time_status_label = QLabel()
        self.status_bar.addPermanentWidget(self.time_status_label)

        self.soil_status_label = QLabel()
        self.status_bar.addPermanentWidget(self.soil_status_label)

    def _connect_signals(self):
        """Connect application signals."""
        self.parameter_panel.parameter_changed.connect(self._on_parameter_changed)
        self.parameter_panel.time_of_day_changed.connect(self._on_time_of_day_changed)
        self.metrics_updated.connect(self.metrics_panel.update_metrics)

    def _restore_settings(self):
        """Restore application settings."""
        geometry = self.settings.value("geometry")
        if geometry:
            self.restoreGeometry(geometry)

        splitter_state = self.settings.value("splitterState")
        if splitter_state:
            self.main_splitter.restoreState(splitter_state)

    def _save_settings(self):
        """Save application settings."""
        self.settings.setValue("geometry", self.saveGeometry())
        self.settings.setValue("splitterState", self.main_splitter.saveState())

    def update_calculations(self) -> GroundingMetrics:
        """Recalculate metrics and refresh every view."""
        metrics = self.system.calculate()
        self.metrics_updated.emit(metrics)
        self.sensitivity_tab.refresh()
        self._update_status_labels()
        return metrics

    def _update_status_labels(self):
        config = self.system.config
        self.weather_status_label.setText(weather_label(config.weather))
        self.time_status_label.setText(time_of_day_label(self.time_of_day))
        self.soil_status_label.setText(soil_label(config.soil_type))

    @pyqtSlot(str, object)
    def _on_parameter_changed(self, name: str, value: Any):
        """Forward a control change into the grounding system."""
        try:
            if name == 'weather':
                self.system.set_weather(value)
                # Show the humidity the weather change settled on
                self.parameter_panel.set_configuration(self.system.config)
            else:
                self.system.set_parameter(name, value)
        except ValueError as e:
            logger.error(f"Rejected parameter change: {e}")
            return
        self.update_calculations()

    @pyqtSlot(float)
    def _on_time_of_day_changed(self, time_of_day: float):
        self.time_of_day = time_of_day
        self._update_status_labels()

    # Slots for menu actions
    @pyqtSlot()
    def import_scenario(self):
        """Import a scenario JSON file."""
        file_path, _ = QFileDialog.getOpenFileName(self, "Import Scenario", "", JSON_EXPORT_FILTER)

        if file_path:
            importer = ScenarioImporter()
            if importer.apply_scenario(file_path, self.system):
                self.parameter_panel.set_configuration(self.system.config)
                self.update_calculations()
                self.status_bar.showMessage("Scenario imported successfully", 3000)
                logger.info(f"Scenario imported: {file_path}")
            else:
                QMessageBox.warning(self, "Import Warning", "Failed to import scenario")

    @pyqtSlot()
    def export_scenario(self):
        """Export current configuration and metrics to JSON."""
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Export Scenario", "grounding_scenario.json", JSON_EXPORT_FILTER
        )

        if file_path:
            compress = file_path.endswith('.gz')
            if export_scenario_to_json(self.system, file_path, compress):
                self.status_bar.showMessage("Scenario exported successfully", 3000)
            else:
                QMessageBox.warning(self, "Export Warning",
                                    "Failed to export scenario. Run Tools > Validate Configuration for details.")

    @pyqtSlot()
    def save_plot_image(self):
        """Save the sensitivity plot to an image file."""
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save Plot Image", "grounding_sensitivity.png", IMAGE_EXPORT_FILTER
        )

        if file_path:
            if self.sensitivity_tab.save_image(file_path):
                self.status_bar.showMessage(f"Plot saved to {file_path}", 3000)
            else:
                QMessageBox.critical(self, "Save Error", f"Failed to save plot image:\n{file_path}")

    @pyqtSlot()
    def reset_configuration(self):
        """Restore default configuration."""
        self.system.reset()
        self.parameter_panel.set_configuration(self.system.config)
        self.update_calculations()
        self.status_bar.showMessage("Configuration reset", 2000)

    @pyqtSlot()
    def validate_configuration(self):
        """Validate the current configuration and show the results."""
        validator = GroundingValidator()
        validator.validate_configuration(self.system.config)
        metrics = self.system.calculate()
        validator.validate_target_met(metrics.total_resistance, self.system.config.target_resistance)

        results = validator.get_results()
        if not results:
            QMessageBox.information(self, "Validation", "Configuration is within typical ranges.")
            return

        lines = [f"[{r.severity.value.upper()}] {r.message}" for r in results]
        if validator.has_errors():
            QMessageBox.critical(self, "Validation", "\n".join(lines))
        elif any(r.severity == ValidationSeverity.WARNING for r in results):
            QMessageBox.warning(self, "Validation", "\n".join(lines))
        else:
            QMessageBox.information(self, "Validation", "\n".join(lines))

    @pyqtSlot()
    def show_about(self):
        """Show about dialog."""
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"""<h3>{APP_NAME} v{APP_VERSION}</h3>
            <p>Grounding resistance estimation for antenna installations with driven rods
            and radial conductors.</p>
            <p>Built with PyQt6 and matplotlib.</p>"""
        )

    def closeEvent(self, event):
        """Handle application close event."""
        self._save_settings()
        event.accept()
        logger.info("Application closed")
