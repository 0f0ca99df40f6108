"""
Application constants and configuration values.
"""

from pathlib import Path

# Application information
APP_NAME = "Grounding Simulator"
APP_VERSION = "0.1.0"
APP_ORGANIZATION = "Antenna Grounding Engineering"

# File paths
APP_DIR = Path(__file__).parent.parent
RESOURCES_DIR = APP_DIR / "resources"
SCHEMA_DIR = RESOURCES_DIR / "schema"

# Schema files
SCENARIO_SCHEMA_PATH = SCHEMA_DIR / "scenario_schema.json"

# Export/Import settings
JSON_EXPORT_FILTER = "JSON Files (*.json);;Compressed JSON (*.json.gz);;All Files (*)"
IMAGE_EXPORT_FILTER = "PNG Images (*.png);;SVG Images (*.svg);;PDF Files (*.pdf)"

# UI Constants
DEFAULT_WINDOW_WIDTH = 1100
DEFAULT_WINDOW_HEIGHT = 720
MIN_WINDOW_WIDTH = 800
MIN_WINDOW_HEIGHT = 560

# Plot settings
DEFAULT_DPI = 100
EXPORT_DPI = 160
SWEEP_POINTS = 60

# Logging settings
LOG_FILE_NAME = "grounding_simulator.log"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Default grounding configuration
DEFAULT_ROD_COUNT = 4
DEFAULT_ROD_LENGTH = 2.4  # m
DEFAULT_ROD_DIAMETER = 0.016  # m, 16 mm rod
DEFAULT_ROD_SPACING = 3.0  # m
DEFAULT_RADIAL_COUNT = 8
DEFAULT_RADIAL_LENGTH = 5.0  # m
DEFAULT_SOIL_TYPE = "clay"
DEFAULT_WEATHER = "sunny"
DEFAULT_HUMIDITY = 0.5
DEFAULT_FAULT_VOLTAGE = 220.0  # V
DEFAULT_TARGET_RESISTANCE = 5.0  # ohms

# Control ranges for each configurable parameter
PARAMETER_RANGES = {
    'rod_count': {'min': 1, 'max': 12, 'step': 1, 'units': 'rods'},
    'rod_length': {'min': 1.0, 'max': 5.0, 'step': 0.1, 'units': 'm'},
    'rod_diameter': {'min': 0.008, 'max': 0.03, 'step': 0.001, 'units': 'm'},
    'rod_spacing': {'min': 1.0, 'max': 10.0, 'step': 0.5, 'units': 'm'},
    'radial_count': {'min': 0, 'max': 16, 'step': 1, 'units': 'radials'},
    'radial_length': {'min': 1.0, 'max': 15.0, 'step': 0.5, 'units': 'm'},
    'humidity': {'min': 0.0, 'max': 1.0, 'step': 0.05, 'units': 'fraction'},
    'fault_voltage': {'min': 1.0, 'max': 1000.0, 'step': 10.0, 'units': 'V'},
    'target_resistance': {'min': 0.5, 'max': 100.0, 'step': 0.5, 'units': 'ohm'},
}

# Time of day (0-1) counted as daylight in the status bar
DAYLIGHT_START = 0.2
DAYLIGHT_END = 0.8

# File format versions
CURRENT_JSON_VERSION = "1.0.0"
SUPPORTED_JSON_VERSIONS = ["1.0.0"]
