"""
Display formatting for metrics and status-bar labels.
"""

import math
from typing import Dict

from core.models import GroundingMetrics, SoilCategory, WeatherCondition, SoilLike, WeatherLike, coerce_enum
from utils.constants import DAYLIGHT_START, DAYLIGHT_END


def format_with_unit(value: float, unit: str, decimals: int = 2) -> str:
    """Format a value with its unit; infinite values render as the infinity sign."""
    if math.isinf(value):
        return f"∞ {unit}"
    return f"{value:.{decimals}f} {unit}"


def format_metrics(metrics: GroundingMetrics) -> Dict[str, str]:
    """
    Display strings for the metrics panel.

    Args:
        metrics: Calculated metrics

    Returns:
        Dictionary of display strings keyed by metric name
    """
    return {
        'total_resistance': format_with_unit(metrics.total_resistance, "Ω"),
        'efficiency': format_with_unit(metrics.efficiency, "%", 1),
        'fault_current': format_with_unit(metrics.fault_current, "A"),
        'resistivity': format_with_unit(metrics.resistivity, "Ω·m", 1),
        'status': metrics.status.message,
    }


def weather_label(weather: WeatherLike) -> str:
    weather = coerce_enum(WeatherCondition, weather)
    if isinstance(weather, WeatherCondition):
        return weather.display_name
    return str(weather)


def soil_label(soil_type: SoilLike) -> str:
    soil_type = coerce_enum(SoilCategory, soil_type)
    name = soil_type.display_name if isinstance(soil_type, SoilCategory) else str(soil_type)
    return f"Soil: {name}"


def time_of_day_label(time_of_day: float) -> str:
    """Day or night label for a time of day in [0, 1]."""
    if DAYLIGHT_START < time_of_day < DAYLIGHT_END:
        return "Day"
    return "Night"
