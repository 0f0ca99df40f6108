"""
Grounding resistance calculation engine.

This module implements the resistance model of a grounding installation made
of vertical driven rods and horizontal radial conductors. Each step is a pure
function; GroundingSystem holds the current configuration and composes them:

    resistivity -> single rod -> coupling -> parallel rods -> radials -> metrics
"""

import logging
import math
from typing import Any, Dict, Iterable, Optional
import numpy as np

from core.models import (
    GroundingConfiguration, GroundingMetrics, SoilCategory, StatusInfo,
    SystemStatus, WeatherCondition, SoilLike, WeatherLike, clamp, coerce_enum
)

logger = logging.getLogger(__name__)

# Typical soil resistivity in ohm-m
SOIL_RESISTIVITY = {
    SoilCategory.WET: 10.0,
    SoilCategory.CLAY: 40.0,
    SoilCategory.LOAM: 100.0,
    SoilCategory.SANDY: 200.0,
    SoilCategory.GRAVEL: 400.0,
    SoilCategory.ROCKY: 1000.0,
    SoilCategory.DRY: 1500.0,
}
DEFAULT_RESISTIVITY = 100.0

WEATHER_FACTORS = {
    WeatherCondition.SUNNY: 1.0,
    WeatherCondition.RAIN: 0.5,
    WeatherCondition.STORM: 0.3,
    WeatherCondition.SNOW: 1.2,
}

# Soil humidity settled by each weather condition
WEATHER_HUMIDITY = {
    WeatherCondition.SUNNY: 0.3,
    WeatherCondition.RAIN: 0.9,
    WeatherCondition.STORM: 1.0,
    WeatherCondition.SNOW: 0.7,
}

HUMIDITY_EFFECT = 0.3

# (minimum spacing/length ratio, coupling factor), checked top to bottom
COUPLING_STEPS = [
    (2.0, 0.0),
    (1.5, 0.1),
    (1.0, 0.2),
    (0.7, 0.35),
    (0.5, 0.5),
]
MAX_COUPLING = 0.7

RADIAL_REDUCTION_PER_METER = 0.005
MAX_RADIAL_REDUCTION = 0.4

# (upper resistance bound in ohms, status, color, message), checked in order
STATUS_THRESHOLDS = [
    (5.0, SystemStatus.EXCELLENT, '#00ff88', "Excellent"),
    (10.0, SystemStatus.GOOD, '#88ff00', "Good"),
    (25.0, SystemStatus.WARNING, '#ffaa00', "Warning"),
]
DANGER_STATUS = StatusInfo(SystemStatus.DANGER, '#ff4444', "Danger")

INTEGER_PARAMETERS = {'rod_count', 'radial_count'}
CATEGORICAL_PARAMETERS = {'soil_type', 'weather'}


def base_resistivity(soil_type: SoilLike) -> float:
    """Base resistivity of a soil category; unknown categories give 100 ohm-m."""
    return SOIL_RESISTIVITY.get(coerce_enum(SoilCategory, soil_type), DEFAULT_RESISTIVITY)


def weather_factor(weather: WeatherLike) -> float:
    """Multiplicative resistivity factor for a weather condition."""
    return WEATHER_FACTORS.get(coerce_enum(WeatherCondition, weather), 1.0)


def weather_humidity(weather: WeatherLike) -> float:
    """Typical soil humidity under a weather condition (sunny for unknown)."""
    return WEATHER_HUMIDITY.get(coerce_enum(WeatherCondition, weather),
                                WEATHER_HUMIDITY[WeatherCondition.SUNNY])


def adjusted_resistivity(base: float, weather: WeatherLike, humidity: float = 0.5) -> float:
    """
    Adjust base resistivity for weather and soil humidity.

    Humidity is expected to be clamped to [0, 1] already, which keeps the
    humidity term within [0.7, 1.0].

    Args:
        base: Base soil resistivity (ohm-m)
        weather: Weather condition
        humidity: Soil humidity fraction

    Returns:
        Adjusted resistivity (ohm-m)
    """
    return base * weather_factor(weather) * (1 - humidity * HUMIDITY_EFFECT)


def single_rod_resistance(resistivity: float, length: float, diameter: float) -> float:
    """
    Resistance of one vertical driven rod.

    R = (rho / (2*pi*L)) * ln(4L / d)

    Args:
        resistivity: Soil resistivity (ohm-m)
        length: Rod length (m)
        diameter: Rod diameter (m)

    Returns:
        Resistance in ohms, or infinity for non-positive geometry
    """
    if length <= 0 or diameter <= 0:
        return math.inf
    return (resistivity / (2 * math.pi * length)) * math.log(4 * length / diameter)


def coupling_factor(spacing: float, length: float) -> float:
    """Mutual interference coefficient from the spacing/length ratio."""
    ratio = spacing / length if length > 0 else math.inf
    for min_ratio, factor in COUPLING_STEPS:
        if ratio >= min_ratio:
            return factor
    return MAX_COUPLING


def parallel_resistance(single_resistance: float, rod_count: int, coupling: float) -> float:
    """
    Combined resistance of rods in parallel.

    Rt = R / n * (1 + coupling * (n - 1))

    Args:
        single_resistance: Resistance of one rod (ohms)
        rod_count: Number of rods
        coupling: Coupling factor between rods

    Returns:
        Combined resistance in ohms, infinity when there are no rods
    """
    if rod_count <= 0:
        return math.inf
    if rod_count == 1:
        return single_resistance
    return (single_resistance / rod_count) * (1 + coupling * (rod_count - 1))


def radial_reduction_factor(radial_count: int, radial_length: float) -> float:
    """Multiplicative factor applied by radials, capped at a 40% reduction."""
    if radial_count <= 0 or radial_length <= 0:
        return 1.0
    reduction = min(MAX_RADIAL_REDUCTION, radial_count * radial_length * RADIAL_REDUCTION_PER_METER)
    return 1.0 - reduction


def efficiency(resistance: float, target_resistance: float = 5.0) -> float:
    """
    Grounding efficiency as a percentage.

    100% at or below the target resistance, falling linearly to 0% at ten
    times the target.
    """
    if resistance <= 0:
        return 100.0
    if resistance >= target_resistance * 10:
        return 0.0
    fraction = 1 - (resistance - target_resistance) / (target_resistance * 9)
    return 100.0 * clamp(fraction, 0.0, 1.0)


def fault_current(voltage: float, resistance: float) -> float:
    """Fault current by Ohm's law; zero for non-positive resistance."""
    # resistance <= 0 maps to 0 A, matching the behaviour users already see
    if resistance <= 0:
        return 0.0
    return voltage / resistance


def system_status(resistance: float) -> StatusInfo:
    """Classify total resistance into a status with color and message."""
    for upper_bound, status, color, message in STATUS_THRESHOLDS:
        if resistance <= upper_bound:
            return StatusInfo(status, color, message)
    return DANGER_STATUS


def efficiency_rating(efficiency_percent: float) -> str:
    """Display class of an efficiency value: normal, warning or danger."""
    if efficiency_percent >= 80:
        return "normal"
    if efficiency_percent >= 50:
        return "warning"
    return "danger"


def calculate(config: GroundingConfiguration) -> GroundingMetrics:
    """
    Calculate all grounding metrics for a configuration.

    Args:
        config: Grounding configuration (not modified)

    Returns:
        Metrics snapshot
    """
    resistivity = adjusted_resistivity(
        base_resistivity(config.soil_type), config.weather, config.humidity
    )
    single_r = single_rod_resistance(resistivity, config.rod_length, config.rod_diameter)
    coupling = coupling_factor(config.rod_spacing, config.rod_length)
    parallel_r = parallel_resistance(single_r, config.rod_count, coupling)
    radial = radial_reduction_factor(config.radial_count, config.radial_length)
    total_r = parallel_r * radial

    return GroundingMetrics(
        resistivity=resistivity,
        single_rod_resistance=single_r,
        coupling_factor=coupling,
        parallel_resistance=parallel_r,
        radial_factor=radial,
        total_resistance=total_r,
        efficiency=efficiency(total_r, config.target_resistance),
        fault_current=fault_current(config.fault_voltage, total_r),
        status=system_status(total_r),
    )


class GroundingSystem:
    """Holds the current grounding configuration and computes its metrics."""

    def __init__(self, config: Optional[GroundingConfiguration] = None):
        """
        Initialize grounding system.

        Args:
            config: Initial configuration, defaults when omitted
        """
        self.config = config or GroundingConfiguration()

    def calculate(self) -> GroundingMetrics:
        """Recompute metrics from the current configuration."""
        metrics = calculate(self.config)
        logger.debug(
            f"Calculated R={metrics.total_resistance:.3f} ohm, "
            f"efficiency={metrics.efficiency:.1f}%, status={metrics.status.status.value}"
        )
        return metrics

    def set_parameter(self, name: str, value: Any):
        """
        Set one configuration field by name.

        Args:
            name: Configuration field name
            value: New value

        Raises:
            ValueError: If the field name is unknown
        """
        if name not in GroundingConfiguration.field_names():
            raise ValueError(f"Unknown parameter: {name}")

        if name in INTEGER_PARAMETERS:
            value = int(value)

        setattr(self.config, name, value)
        logger.info(f"Parameter {name} set to {getattr(self.config, name)}")

    def set_weather(self, weather: WeatherLike, sync_humidity: bool = True):
        """
        Change weather, optionally moving humidity to the weather's typical value.

        Args:
            weather: New weather condition
            sync_humidity: Whether to update soil humidity as well
        """
        self.set_parameter('weather', weather)
        if sync_humidity:
            self.set_parameter('humidity', weather_humidity(weather))

    def update(self, values: Dict[str, Any]):
        """Set several configuration fields at once."""
        for name, value in values.items():
            self.set_parameter(name, value)

    def reset(self):
        """Restore the default configuration."""
        self.config = GroundingConfiguration()
        logger.info("Grounding configuration reset to defaults")

    def sweep(self, parameter: str, values: Iterable[float]) -> np.ndarray:
        """
        Total resistance for each value of one parameter.

        The current configuration is left untouched.

        Args:
            parameter: Configuration field to vary
            values: Values to evaluate

        Returns:
            Array of total resistance values (ohms)
        """
        if parameter not in GroundingConfiguration.field_names():
            raise ValueError(f"Unknown parameter: {parameter}")
        if parameter in CATEGORICAL_PARAMETERS:
            raise ValueError(f"Parameter {parameter} is not numeric and cannot be swept")

        values = np.asarray(list(values), dtype=float)
        resistances = np.empty_like(values)

        trial = self.config.copy()
        for i, value in enumerate(values):
            setattr(trial, parameter, int(round(value)) if parameter in INTEGER_PARAMETERS else float(value))
            resistances[i] = calculate(trial).total_resistance

        return resistances
