"""
Data models for antenna grounding analysis.

This module defines the core data structures used throughout the application:
soil and weather categories, the mutable grounding configuration edited by the
user, and the immutable metrics snapshot produced by each calculation.
"""

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Union
from enum import Enum

from utils.constants import (
    DEFAULT_ROD_COUNT, DEFAULT_ROD_LENGTH, DEFAULT_ROD_DIAMETER, DEFAULT_ROD_SPACING,
    DEFAULT_RADIAL_COUNT, DEFAULT_RADIAL_LENGTH, DEFAULT_SOIL_TYPE, DEFAULT_WEATHER, DEFAULT_HUMIDITY,
    DEFAULT_FAULT_VOLTAGE, DEFAULT_TARGET_RESISTANCE
)


class SoilCategory(Enum):
    """Soil categories with a tabulated base resistivity."""
    WET = "wet"
    CLAY = "clay"
    LOAM = "loam"
    SANDY = "sandy"
    GRAVEL = "gravel"
    ROCKY = "rocky"
    DRY = "dry"

    @property
    def display_name(self) -> str:
        return SOIL_DISPLAY_NAMES[self]


class WeatherCondition(Enum):
    """Weather conditions affecting soil resistivity."""
    SUNNY = "sunny"
    RAIN = "rain"
    STORM = "storm"
    SNOW = "snow"

    @property
    def display_name(self) -> str:
        return WEATHER_DISPLAY_NAMES[self]


class SystemStatus(Enum):
    """Grounding quality classification."""
    EXCELLENT = "excellent"
    GOOD = "good"
    WARNING = "warning"
    DANGER = "danger"


SOIL_DISPLAY_NAMES = {
    SoilCategory.WET: "Wet / marshy",
    SoilCategory.CLAY: "Clay",
    SoilCategory.LOAM: "Loam",
    SoilCategory.SANDY: "Sandy",
    SoilCategory.GRAVEL: "Gravel",
    SoilCategory.ROCKY: "Rocky",
    SoilCategory.DRY: "Very dry",
}

WEATHER_DISPLAY_NAMES = {
    WeatherCondition.SUNNY: "Sunny",
    WeatherCondition.RAIN: "Rain",
    WeatherCondition.STORM: "Storm",
    WeatherCondition.SNOW: "Snow",
}

SoilLike = Union[SoilCategory, str]
WeatherLike = Union[WeatherCondition, str]


def coerce_enum(enum_cls, value):
    """
    Convert a raw tag to its enum member when recognised.

    Unrecognised tags are returned unchanged so that lookups further down
    fall back to their default values instead of failing.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Limit value to the closed interval [min_value, max_value]."""
    return max(min_value, min(max_value, value))


@dataclass
class GroundingConfiguration:
    """Current input parameters of the grounding installation."""
    rod_count: int = DEFAULT_ROD_COUNT
    rod_length: float = DEFAULT_ROD_LENGTH  # m
    rod_diameter: float = DEFAULT_ROD_DIAMETER  # m
    rod_spacing: float = DEFAULT_ROD_SPACING  # m
    radial_count: int = DEFAULT_RADIAL_COUNT
    radial_length: float = DEFAULT_RADIAL_LENGTH  # m
    soil_type: SoilLike = SoilCategory(DEFAULT_SOIL_TYPE)
    weather: WeatherLike = WeatherCondition(DEFAULT_WEATHER)
    humidity: float = DEFAULT_HUMIDITY  # fraction 0-1
    fault_voltage: float = DEFAULT_FAULT_VOLTAGE  # V
    target_resistance: float = DEFAULT_TARGET_RESISTANCE  # ohms

    def __setattr__(self, name: str, value: Any):
        # Assignment goes through here for both __init__ and later edits
        if name == 'humidity':
            value = clamp(float(value), 0.0, 1.0)
        elif name == 'soil_type':
            value = coerce_enum(SoilCategory, value)
        elif name == 'weather':
            value = coerce_enum(WeatherCondition, value)
        super().__setattr__(name, value)

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    def copy(self) -> 'GroundingConfiguration':
        return GroundingConfiguration(**{name: getattr(self, name) for name in self.field_names()})

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration with enum members as their string tags."""
        data = {}
        for name in self.field_names():
            value = getattr(self, name)
            if isinstance(value, Enum):
                value = value.value
            data[name] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GroundingConfiguration':
        """Build a configuration from a dictionary, ignoring unknown keys."""
        known = set(cls.field_names())
        return cls(**{key: value for key, value in data.items() if key in known})


@dataclass(frozen=True)
class StatusInfo:
    """Status classification with its display color and message."""
    status: SystemStatus
    color: str
    message: str


@dataclass(frozen=True)
class GroundingMetrics:
    """Snapshot of engineering metrics for one configuration."""
    resistivity: float  # ohm-m, after weather/humidity adjustment
    single_rod_resistance: float  # ohms
    coupling_factor: float
    parallel_resistance: float  # ohms, before radial reduction
    radial_factor: float
    total_resistance: float  # ohms
    efficiency: float  # percent
    fault_current: float  # A
    status: StatusInfo

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation; infinite values become None."""
        def finite_or_none(value: float) -> Optional[float]:
            return value if math.isfinite(value) else None

        return {
            'resistivity': finite_or_none(self.resistivity),
            'single_rod_resistance': finite_or_none(self.single_rod_resistance),
            'coupling_factor': self.coupling_factor,
            'parallel_resistance': finite_or_none(self.parallel_resistance),
            'radial_factor': self.radial_factor,
            'total_resistance': finite_or_none(self.total_resistance),
            'efficiency': self.efficiency,
            'fault_current': self.fault_current,
            'status': {
                'status': self.status.status.value,
                'color': self.status.color,
                'message': self.status.message,
            },
        }
