"""
Tests for scenario JSON export.
"""

import pytest
import json
import gzip
import tempfile
from pathlib import Path
from core.calculations import GroundingSystem
from core.json_export import ScenarioExporter, export_scenario_to_json
from utils.constants import CURRENT_JSON_VERSION


class TestScenarioExporter:
    """Test JSON export functionality."""

    @pytest.fixture
    def temp_dir(self):
        """Create temporary output directory."""
        with tempfile.TemporaryDirectory() as directory:
            yield Path(directory)

    def test_build_scenario_data(self):
        system = GroundingSystem()
        data = ScenarioExporter(system).build_scenario_data()

        assert data['format_version'] == CURRENT_JSON_VERSION
        assert data['configuration']['soil_type'] == 'clay'
        assert data['metrics']['status']['status'] == 'excellent'
        assert abs(data['metrics']['total_resistance'] - 4.615) < 0.001

    def test_build_without_metrics(self):
        data = ScenarioExporter(GroundingSystem()).build_scenario_data(include_metrics=False)
        assert 'metrics' not in data

    def test_export_scenario(self, temp_dir):
        """Test exported file contents."""
        system = GroundingSystem()
        system.set_parameter('rod_count', 6)
        output_path = temp_dir / 'scenario.json'

        assert export_scenario_to_json(system, output_path)

        with open(output_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        assert data['configuration']['rod_count'] == 6
        assert data['export_metadata']['export_type'] == 'scenario'
        assert data['export_metadata']['compression'] is False
        assert 'export_date' in data['export_metadata']

    def test_export_compressed(self, temp_dir):
        """Test gzip output gets a .gz suffix."""
        output_path = temp_dir / 'scenario.json'

        assert export_scenario_to_json(GroundingSystem(), output_path, compress=True)

        compressed_path = temp_dir / 'scenario.json.gz'
        assert compressed_path.exists()
        with gzip.open(compressed_path, 'rt', encoding='utf-8') as f:
            data = json.load(f)
        assert data['export_metadata']['compression'] is True

    def test_export_degenerate_configuration(self, temp_dir):
        """Validation blocks export of configurations with no rods."""
        system = GroundingSystem()
        system.config.rod_count = 0
        output_path = temp_dir / 'scenario.json'

        assert not export_scenario_to_json(system, output_path)
        assert not output_path.exists()

        # Without validation the infinite resistance is written as null
        exporter = ScenarioExporter(system)
        assert exporter.export_scenario(output_path, validate=False)
        with open(output_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        assert data['metrics']['total_resistance'] is None
        assert data['metrics']['status']['status'] == 'danger'

    def test_export_to_missing_directory(self, temp_dir):
        output_path = temp_dir / 'missing' / 'scenario.json'
        assert not export_scenario_to_json(GroundingSystem(), output_path)


if __name__ == "__main__":
    pytest.main([__file__])
