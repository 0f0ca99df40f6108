"""
Data validation functions for grounding configurations.

This module checks configuration values against the ranges the model is
meant for, flagging values that make the model degenerate as errors and
values outside the usual control ranges as warnings.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass
from enum import Enum

from core.models import GroundingConfiguration, SoilCategory, WeatherCondition
from utils.constants import PARAMETER_RANGES

logger = logging.getLogger(__name__)

# Fields that must be strictly positive for a finite resistance
POSITIVE_FIELDS = ['rod_count', 'rod_length', 'rod_diameter', 'fault_voltage', 'target_resistance']
NON_NEGATIVE_FIELDS = ['rod_spacing', 'radial_count', 'radial_length']


class ValidationSeverity(Enum):
    """Validation result severity levels."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationResult:
    """Result of a validation check."""
    is_valid: bool
    severity: ValidationSeverity
    message: str
    field_name: Optional[str] = None
    suggested_value: Optional[Any] = None


class GroundingValidator:
    """Validation of grounding configuration values."""

    def __init__(self):
        """Initialize validator with standard ranges."""
        self.parameter_ranges = PARAMETER_RANGES
        self.validation_results: List[ValidationResult] = []

    def clear_results(self):
        """Clear previous validation results."""
        self.validation_results.clear()

    def add_result(self, result: ValidationResult):
        """Add validation result to the list."""
        self.validation_results.append(result)

    def get_results(self) -> List[ValidationResult]:
        """Get all validation results."""
        return self.validation_results.copy()

    def has_errors(self) -> bool:
        """Check if any validation errors exist."""
        return any(r.severity == ValidationSeverity.ERROR
                   for r in self.validation_results)

    def has_warnings(self) -> bool:
        """Check if any validation warnings exist."""
        return any(r.severity == ValidationSeverity.WARNING
                   for r in self.validation_results)

    def validate_numeric_value(self, field_name: str, value: Any) -> bool:
        """
        Validate a numeric configuration value.

        Args:
            field_name: Configuration field name
            value: Value to check

        Returns:
            True if the value can be used by the model
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            self.add_result(ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.ERROR,
                message=f"{field_name} must be a number: {value!r}",
                field_name=field_name
            ))
            return False

        if field_name in POSITIVE_FIELDS and value <= 0:
            self.add_result(ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.ERROR,
                message=f"{field_name} must be greater than zero: {value}",
                field_name=field_name,
                suggested_value=self.parameter_ranges[field_name]['min']
            ))
            return False

        if field_name in NON_NEGATIVE_FIELDS and value < 0:
            self.add_result(ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.ERROR,
                message=f"{field_name} cannot be negative: {value}",
                field_name=field_name,
                suggested_value=0
            ))
            return False

        return self.validate_range(field_name, value)

    def validate_range(self, field_name: str, value: float) -> bool:
        """Warn when a value lies outside its usual control range."""
        value_range = self.parameter_ranges.get(field_name)
        if value_range is None:
            return True

        if not (value_range['min'] <= value <= value_range['max']):
            suggested = min(max(value, value_range['min']), value_range['max'])
            self.add_result(ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.WARNING,
                message=(f"{field_name} {value} {value_range['units']} is outside typical range "
                         f"({value_range['min']} to {value_range['max']})"),
                field_name=field_name,
                suggested_value=suggested
            ))
            return False

        return True

    def validate_humidity(self, humidity: Any) -> bool:
        """
        Validate soil humidity fraction.

        Values outside [0, 1] are clamped by the configuration, so they only
        produce a warning.
        """
        if isinstance(humidity, bool) or not isinstance(humidity, (int, float)):
            self.add_result(ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.ERROR,
                message=f"humidity must be a number: {humidity!r}",
                field_name="humidity"
            ))
            return False

        if not (0 <= humidity <= 1):
            self.add_result(ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.WARNING,
                message=f"Humidity {humidity} will be clamped to the range 0 to 1",
                field_name="humidity",
                suggested_value=min(max(humidity, 0.0), 1.0)
            ))
            return False

        return True

    def validate_soil_type(self, soil_type: Any) -> bool:
        """Warn about soil types without a tabulated resistivity."""
        if isinstance(soil_type, SoilCategory):
            return True
        try:
            SoilCategory(soil_type)
            return True
        except ValueError:
            self.add_result(ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.WARNING,
                message=f"Unknown soil type '{soil_type}', default resistivity of 100 ohm-m will be used",
                field_name="soil_type",
                suggested_value=SoilCategory.LOAM.value
            ))
            return False

    def validate_weather(self, weather: Any) -> bool:
        """Warn about weather conditions without a resistivity factor."""
        if isinstance(weather, WeatherCondition):
            return True
        try:
            WeatherCondition(weather)
            return True
        except ValueError:
            self.add_result(ValidationResult(
                is_valid=False,
                severity=ValidationSeverity.WARNING,
                message=f"Unknown weather condition '{weather}', no weather adjustment will be applied",
                field_name="weather",
                suggested_value=WeatherCondition.SUNNY.value
            ))
            return False

    def validate_target_met(self, total_resistance: float, target_resistance: float) -> bool:
        """Add an informational note when the target resistance is not met."""
        if total_resistance > target_resistance:
            self.add_result(ValidationResult(
                is_valid=True,
                severity=ValidationSeverity.INFO,
                message=(f"Total resistance {total_resistance:.2f} ohm exceeds target "
                         f"{target_resistance:.2f} ohm"),
                field_name="target_resistance"
            ))
            return False
        return True

    def validate_configuration(self, config: GroundingConfiguration) -> bool:
        """
        Validate every field of a configuration.

        Args:
            config: Configuration to validate

        Returns:
            True if no errors were found
        """
        return self.validate_data(config.to_dict())

    def validate_data(self, data: Dict[str, Any]) -> bool:
        """
        Validate a configuration dictionary.

        Missing fields are not reported; they take their default values.

        Args:
            data: Configuration dictionary

        Returns:
            True if no errors were found
        """
        for field_name in POSITIVE_FIELDS + NON_NEGATIVE_FIELDS:
            if field_name in data:
                self.validate_numeric_value(field_name, data[field_name])

        if 'humidity' in data:
            self.validate_humidity(data['humidity'])
        if 'soil_type' in data:
            self.validate_soil_type(data['soil_type'])
        if 'weather' in data:
            self.validate_weather(data['weather'])

        return not self.has_errors()


# Convenience functions
def validate_configuration_data(data: Dict[str, Any]) -> Tuple[bool, List[ValidationResult]]:
    """
    Validate configuration data.

    Args:
        data: Configuration dictionary

    Returns:
        Tuple of (is_valid, validation_results)
    """
    validator = GroundingValidator()
    validator.validate_data(data)
    return not validator.has_errors(), validator.get_results()
