"""
Sensitivity tab plotting total resistance against one swept parameter.
"""

import logging
import numpy as np
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QComboBox, QCheckBox
from PyQt6.QtCore import pyqtSlot
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from core.calculations import GroundingSystem
from utils.constants import DEFAULT_DPI, EXPORT_DPI, PARAMETER_RANGES, SWEEP_POINTS

logger = logging.getLogger(__name__)

SWEEP_PARAMETERS = {
    'rod_count': "Rod count",
    'rod_spacing': "Rod spacing (m)",
    'rod_length': "Rod length (m)",
    'radial_count': "Number of radials",
    'humidity': "Soil humidity",
}


class SensitivityTab(QWidget):
    """Plot of resistance sensitivity for the current configuration."""

    def __init__(self, system: GroundingSystem, parent=None):
        super().__init__(parent)
        self.system = system

        layout = QVBoxLayout(self)

        controls = QHBoxLayout()
        controls.addWidget(QLabel("Vary:"))
        self.parameter_combo = QComboBox()
        for name, label in SWEEP_PARAMETERS.items():
            self.parameter_combo.addItem(label, name)
        self.parameter_combo.currentIndexChanged.connect(lambda _: self.refresh())
        controls.addWidget(self.parameter_combo)

        self.show_grid_cb = QCheckBox("Show grid")
        self.show_grid_cb.setChecked(True)
        self.show_grid_cb.toggled.connect(lambda _: self.refresh())
        controls.addWidget(self.show_grid_cb)
        controls.addStretch()
        layout.addLayout(controls)

        self.figure = Figure(dpi=DEFAULT_DPI)
        self.canvas = FigureCanvas(self.figure)
        layout.addWidget(self.canvas)

        self.refresh()

    def sweep_values(self, parameter: str) -> np.ndarray:
        value_range = PARAMETER_RANGES[parameter]
        if isinstance(value_range['step'], int):
            return np.arange(value_range['min'], value_range['max'] + 1, value_range['step'])
        return np.linspace(value_range['min'], value_range['max'], SWEEP_POINTS)

    @pyqtSlot()
    def refresh(self):
        """Redraw the sweep for the selected parameter."""
        parameter = self.parameter_combo.currentData()
        values = self.sweep_values(parameter)
        resistances = self.system.sweep(parameter, values)
        target = self.system.config.target_resistance

        self.figure.clear()
        ax = self.figure.add_subplot(111)

        finite = np.isfinite(resistances)
        if finite.any():
            ax.plot(values[finite], resistances[finite], marker='o', markersize=3, color='#4682B4')
            ax.axhline(target, color='red', linestyle='--', alpha=0.7, label=f'Target: {target:.1f} Ω')
            current = getattr(self.system.config, parameter)
            ax.axvline(current, color='gray', linestyle=':', alpha=0.7, label='Current')
            ax.legend()
        else:
            ax.text(0.5, 0.5, 'No finite resistance in this range',
                    transform=ax.transAxes, ha='center', va='center')

        ax.set_xlabel(SWEEP_PARAMETERS[parameter])
        ax.set_ylabel('Total resistance (Ω)')
        ax.set_title('Resistance sensitivity')
        ax.grid(self.show_grid_cb.isChecked(), alpha=0.3)

        self.figure.tight_layout()
        self.canvas.draw()
        logger.debug(f"Sensitivity plot refreshed for {parameter}")

    def save_image(self, file_path: str) -> bool:
        """
        Save the current plot; the format follows the file extension.

        Returns:
            True if the image was written
        """
        try:
            self.figure.savefig(file_path, dpi=EXPORT_DPI, bbox_inches='tight')
            logger.info(f"Sensitivity plot saved to {file_path}")
            return True
        except (OSError, ValueError) as e:
            logger.error(f"Failed to save plot image: {e}")
            return False
