"""
JSON export engine for grounding scenarios.

This module writes the current grounding configuration together with its
calculated metrics to a JSON document, optionally gzip-compressed.
"""

import json
import logging
from typing import Any, Dict, Union
from datetime import datetime
from pathlib import Path
import gzip

from core.calculations import GroundingSystem
from core.validators import GroundingValidator
from utils.constants import CURRENT_JSON_VERSION

logger = logging.getLogger(__name__)


class ScenarioExporter:
    """Handles exporting grounding scenarios to JSON format."""

    def __init__(self, system: GroundingSystem):
        """
        Initialize exporter.

        Args:
            system: Grounding system whose configuration is exported
        """
        self.system = system
        self.validator = GroundingValidator()

    def build_scenario_data(self, include_metrics: bool = True) -> Dict[str, Any]:
        """
        Build the scenario document.

        Args:
            include_metrics: Whether to include calculated metrics

        Returns:
            Scenario dictionary
        """
        scenario = {
            'format_version': CURRENT_JSON_VERSION,
            'configuration': self.system.config.to_dict(),
        }
        if include_metrics:
            scenario['metrics'] = self.system.calculate().to_dict()
        return scenario

    def export_scenario(self, output_path: Union[str, Path],
                        compress: bool = False,
                        validate: bool = True,
                        include_metrics: bool = True) -> bool:
        """
        Export the current scenario.

        Args:
            output_path: Output file path
            compress: Whether to gzip the output
            validate: Whether to validate the configuration before export
            include_metrics: Whether to include calculated metrics

        Returns:
            True if export successful, False otherwise
        """
        try:
            if validate:
                self.validator.clear_results()
                if not self.validator.validate_configuration(self.system.config):
                    logger.error("Export validation failed")
                    for result in self.validator.get_results():
                        logger.error(f"  {result.field_name}: {result.message}")
                    return False

            scenario = self.build_scenario_data(include_metrics)
            scenario['export_metadata'] = {
                'export_date': datetime.now().isoformat(),
                'exporter_version': CURRENT_JSON_VERSION,
                'export_type': 'scenario',
                'compression': compress
            }

            output_path = Path(output_path)
            if compress:
                if not output_path.name.endswith('.gz'):
                    output_path = output_path.with_name(output_path.name + '.gz')
                with gzip.open(output_path, 'wt', encoding='utf-8') as f:
                    json.dump(scenario, f, indent=2, default=self._json_serializer)
            else:
                with open(output_path, 'w', encoding='utf-8') as f:
                    json.dump(scenario, f, indent=2, default=self._json_serializer)

            logger.info(f"Scenario exported to {output_path}")
            return True

        except Exception as e:
            logger.error(f"Export failed: {e}")
            return False

    def _json_serializer(self, obj):
        """Custom JSON serializer for non-standard types."""
        if isinstance(obj, datetime):
            return obj.isoformat()
        if hasattr(obj, 'value'):
            return obj.value
        raise TypeError(f"Object of type {type(obj)} is not JSON serializable")


def export_scenario_to_json(system: GroundingSystem,
                            output_path: Union[str, Path],
                            compress: bool = False,
                            validate: bool = True) -> bool:
    """
    Convenience function to export a scenario.

    Args:
        system: Grounding system to export
        output_path: Output file path
        compress: Whether to gzip the output
        validate: Whether to validate before export

    Returns:
        True if export successful
    """
    exporter = ScenarioExporter(system)
    return exporter.export_scenario(output_path, compress, validate)
