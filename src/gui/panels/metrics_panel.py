"""
Read-only readout of the latest grounding metrics.
"""

import logging
from PyQt6.QtWidgets import QGroupBox, QFormLayout, QLabel

from core.calculations import efficiency_rating
from core.models import GroundingMetrics
from utils.color_schemes import (
    get_efficiency_color_hex, get_flow_colors_hex, get_flow_intensity, get_status_legend
)
from utils.formatting import format_metrics

logger = logging.getLogger(__name__)

METRIC_LABELS = [
    ('total_resistance', "Total resistance"),
    ('efficiency', "Efficiency"),
    ('fault_current', "Fault current"),
    ('resistivity', "Soil resistivity"),
    ('status', "Status"),
]


class MetricsPanel(QGroupBox):
    """Metrics display colored by grounding status."""

    def __init__(self, parent=None):
        super().__init__("Grounding metrics", parent)
        self.value_labels = {}

        layout = QFormLayout(self)
        for key, title in METRIC_LABELS:
            label = QLabel("-")
            label.setStyleSheet("font-weight: bold;")
            layout.addRow(title, label)
            self.value_labels[key] = label

        # Strip shaded from high to low flow color, labelled with the flow intensity
        self.flow_label = QLabel("-")
        self.flow_label.setMinimumHeight(22)
        layout.addRow("Current flow", self.flow_label)

        for name, (description, color) in get_status_legend().items():
            legend_item = QLabel(f"● {name}: {description}")
            legend_item.setStyleSheet(f"color: {color}; margin-left: 10px;")
            layout.addRow(legend_item)

    def update_metrics(self, metrics: GroundingMetrics):
        """Refresh all labels from a metrics snapshot."""
        texts = format_metrics(metrics)
        for key, label in self.value_labels.items():
            label.setText(texts[key])

        status_color = metrics.status.color
        self.value_labels['total_resistance'].setStyleSheet(f"font-weight: bold; color: {status_color};")
        self.value_labels['status'].setStyleSheet(f"font-weight: bold; color: {status_color};")

        rating = efficiency_rating(metrics.efficiency)
        self.value_labels['efficiency'].setStyleSheet(
            f"font-weight: bold; color: {get_efficiency_color_hex(metrics.efficiency)};")
        self.value_labels['efficiency'].setToolTip(f"Efficiency rating: {rating}")

        self._update_flow(metrics)

    def _update_flow(self, metrics: GroundingMetrics):
        high, low = get_flow_colors_hex(metrics.total_resistance)
        intensity = get_flow_intensity(metrics.efficiency)
        self.flow_label.setText(f"{intensity:.2f}×")
        self.flow_label.setStyleSheet(
            "font-weight: bold; color: black; padding-left: 4px; "
            f"background: qlineargradient(x1:0, y1:0, x2:1, y2:0, stop:0 {high}, stop:1 {low});"
        )
        self.flow_label.setToolTip(f"Current flow intensity {intensity:.2f} (0.5 to 1.5)")
