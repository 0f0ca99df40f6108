"""
JSON import engine for grounding scenarios.

This module loads grounding scenarios from JSON format with version, schema
and range validation before they are applied to a grounding system.
"""

import json
import logging
import gzip
from typing import Any, Dict, List, Optional, Tuple, Union
from pathlib import Path
import jsonschema

from core.calculations import GroundingSystem
from core.models import GroundingConfiguration
from core.validators import ValidationResult, ValidationSeverity, validate_configuration_data
from utils.constants import SUPPORTED_JSON_VERSIONS, SCENARIO_SCHEMA_PATH

logger = logging.getLogger(__name__)


class ScenarioImporter:
    """Handles importing grounding scenarios from JSON format."""

    def __init__(self, schema_path: Union[str, Path] = SCENARIO_SCHEMA_PATH):
        """
        Initialize importer.

        Args:
            schema_path: Path of the scenario JSON schema
        """
        self.schema_path = Path(schema_path)
        self.schema = self._load_json_schema()

    def import_scenario(self, input_path: Union[str, Path],
                        validate_schema: bool = True) -> Optional[GroundingConfiguration]:
        """
        Import a scenario configuration from a JSON file.

        Args:
            input_path: Input JSON file path
            validate_schema: Whether to validate against the JSON schema

        Returns:
            Configuration if successful, None otherwise
        """
        try:
            json_data = self._load_json_file(input_path)
            if not json_data:
                return None

            if not self._check_version_compatibility(json_data):
                return None

            if validate_schema and not self._validate_json_schema(json_data):
                return None

            configuration_data = json_data.get('configuration', {})
            is_valid, validation_results = validate_configuration_data(configuration_data)
            self._log_validation_results(validation_results)
            if not is_valid:
                logger.error("Scenario configuration validation failed")
                return None

            config = GroundingConfiguration.from_dict(configuration_data)
            logger.info(f"Scenario imported from {input_path}")
            return config

        except Exception as e:
            logger.error(f"Scenario import failed: {e}")
            return None

    def apply_scenario(self, input_path: Union[str, Path], system: GroundingSystem,
                       validate_schema: bool = True) -> bool:
        """
        Import a scenario and make it the system's configuration.

        Returns:
            True if the scenario was applied
        """
        config = self.import_scenario(input_path, validate_schema)
        if config is None:
            return False
        system.config = config
        return True

    def validate_import_schema(self, input_path: Union[str, Path]) -> Tuple[bool, List[str]]:
        """
        Validate JSON file against schema without importing.

        Args:
            input_path: Input JSON file path

        Returns:
            Tuple of (is_valid, error_messages)
        """
        try:
            json_data = self._load_json_file(input_path)
            if not json_data:
                return False, ["Failed to load JSON file"]

            if not self.schema:
                return False, ["JSON schema not available"]

            try:
                jsonschema.validate(json_data, self.schema)
            except jsonschema.ValidationError as e:
                return False, [f"Schema validation error: {e.message}"]
            except jsonschema.SchemaError as e:
                return False, [f"Schema error: {e.message}"]

            is_valid, results = validate_configuration_data(json_data.get('configuration', {}))
            messages = [r.message for r in results if r.severity == ValidationSeverity.ERROR]
            return is_valid, messages

        except Exception as e:
            return False, [f"Validation failed: {str(e)}"]

    def _load_json_file(self, input_path: Union[str, Path]) -> Optional[Dict[str, Any]]:
        """Load JSON data from a plain or gzip-compressed file."""
        try:
            input_path = Path(input_path)

            if input_path.suffix == '.gz':
                with gzip.open(input_path, 'rt', encoding='utf-8') as f:
                    return json.load(f)
            else:
                with open(input_path, 'r', encoding='utf-8') as f:
                    return json.load(f)

        except Exception as e:
            logger.error(f"Failed to load JSON file {input_path}: {e}")
            return None

    def _load_json_schema(self) -> Optional[Dict[str, Any]]:
        """Load JSON schema for validation."""
        try:
            if self.schema_path.exists():
                with open(self.schema_path, 'r', encoding='utf-8') as f:
                    return json.load(f)
            else:
                logger.warning(f"JSON schema not found: {self.schema_path}")
                return None
        except Exception as e:
            logger.error(f"Failed to load JSON schema: {e}")
            return None

    def _check_version_compatibility(self, json_data: Dict[str, Any]) -> bool:
        """Check if the file format version is supported."""
        version = json_data.get('format_version')
        if version not in SUPPORTED_JSON_VERSIONS:
            logger.error(f"Unsupported scenario format version: {version}")
            return False
        return True

    def _validate_json_schema(self, json_data: Dict[str, Any]) -> bool:
        """Validate JSON data against schema."""
        if not self.schema:
            logger.warning("No schema available for validation")
            return True

        try:
            jsonschema.validate(json_data, self.schema)
            return True
        except jsonschema.ValidationError as e:
            logger.error(f"Schema validation failed: {e.message}")
            return False
        except jsonschema.SchemaError as e:
            logger.error(f"Invalid schema: {e.message}")
            return False

    def _log_validation_results(self, results: List[ValidationResult]):
        """Log validation results by severity."""
        for result in results:
            if result.severity == ValidationSeverity.ERROR:
                logger.error(f"Validation error: {result.message}")
            elif result.severity == ValidationSeverity.WARNING:
                logger.warning(f"Validation warning: {result.message}")
            else:
                logger.info(f"Validation info: {result.message}")


def import_scenario_from_json(input_path: Union[str, Path],
                              validate_schema: bool = True) -> Optional[GroundingConfiguration]:
    """
    Convenience function to import a scenario.

    Args:
        input_path: Input JSON file path
        validate_schema: Whether to validate against schema

    Returns:
        Configuration if successful, None otherwise
    """
    importer = ScenarioImporter()
    return importer.import_scenario(input_path, validate_schema)


def validate_json_file(input_path: Union[str, Path]) -> Tuple[bool, List[str]]:
    """
    Validate JSON file against schema.

    Args:
        input_path: Input JSON file path

    Returns:
        Tuple of (is_valid, error_messages)
    """
    importer = ScenarioImporter()
    return importer.validate_import_schema(input_path)
