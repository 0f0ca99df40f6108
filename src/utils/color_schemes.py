"""
Color coding for grounding status and current-flow display.

Implements the colors used to present calculation results:
- Greens for low resistance and high efficiency
- Yellows/oranges for marginal grounding
- Reds for dangerous grounding
"""

from typing import Dict, List, Tuple
from core.calculations import DANGER_STATUS, STATUS_THRESHOLDS
from core.models import SystemStatus

STATUS_COLORS: Dict[SystemStatus, str] = {
    status: color for _, status, color, _ in STATUS_THRESHOLDS
}
STATUS_COLORS[DANGER_STATUS.status] = DANGER_STATUS.color

# (minimum efficiency %, hex color), checked top to bottom
EFFICIENCY_COLORS: List[Tuple[float, str]] = [
    (80, '#00ff88'),
    (60, '#88ff00'),
    (40, '#ffff00'),
    (20, '#ffaa00'),
]
EFFICIENCY_FLOOR_COLOR = '#ff4444'

# (maximum resistance in ohms, (high intensity, low intensity)) for current flow
FLOW_COLORS: List[Tuple[float, Tuple[str, str]]] = [
    (5.0, ('#00ff00', '#00ff88')),
    (10.0, ('#ffff00', '#88ff00')),
    (25.0, ('#ffaa00', '#ffff00')),
]
DANGER_FLOW_COLORS = ('#ff4400', '#ff8800')


def get_efficiency_color_hex(efficiency: float) -> str:
    """Hex color along the efficiency gradient."""
    for min_efficiency, color in EFFICIENCY_COLORS:
        if efficiency >= min_efficiency:
            return color
    return EFFICIENCY_FLOOR_COLOR


def get_flow_colors_hex(resistance: float) -> Tuple[str, str]:
    """
    Get current-flow color pair for a total resistance.

    Args:
        resistance: Total grounding resistance (ohms)

    Returns:
        Tuple of (high intensity, low intensity) hex colors
    """
    for max_resistance, colors in FLOW_COLORS:
        if resistance <= max_resistance:
            return colors
    return DANGER_FLOW_COLORS


def get_flow_intensity(efficiency: float) -> float:
    """Current-flow intensity for an efficiency percentage."""
    return 0.5 + efficiency / 100


def get_status_legend() -> Dict[str, Tuple[str, str]]:
    """
    Get status legend information for display in UI.

    Returns:
        Dictionary mapping status name to (description, hex_color)
    """
    return {
        'Excellent': ('R <= 5 ohm', STATUS_COLORS[SystemStatus.EXCELLENT]),
        'Good': ('R <= 10 ohm', STATUS_COLORS[SystemStatus.GOOD]),
        'Warning': ('R <= 25 ohm', STATUS_COLORS[SystemStatus.WARNING]),
        'Danger': ('R > 25 ohm', STATUS_COLORS[SystemStatus.DANGER]),
    }
