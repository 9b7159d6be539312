"""Configuration settings for the ASCE reference ET package."""

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ..utils.exceptions import ConfigurationError

# ============================================================================
# PHYSICAL CONSTANTS (from core/constants.py)
# ============================================================================

from ..core.constants import (
    REFERENCE_ALBEDO,
    HARGREAVES_COEFFICIENT
)

# ============================================================================
# CALCULATOR PARAMETERS
# ============================================================================

# Defaults for CalculatorConfig; a config file may override any of them
CALCULATOR = {
    "clamp_negative": True,
    "estimate_missing_radiation": False,
    "hargreaves_coefficient": HARGREAVES_COEFFICIENT,
    "albedo": REFERENCE_ALBEDO
}

# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

LOGGING = {
    # Console level of the CLI, raised by --verbose
    "level": "WARNING",
    "verbose_level": "DEBUG"
}

# ============================================================================
# VALIDATION RANGES
# ============================================================================

# Plausible daily reference ET (mm/day); record limits live in utils/validation.py
VALIDATION_RANGES = {
    "et_daily": (0.0, 15.0)
}

# ============================================================================
# WEATHER TABLE COLUMNS
# ============================================================================

# Canonical column names of weather tables and batch output
COLUMNS = {
    "required": [
        "temperature_max",
        "temperature_min",
        "latitude"
    ],
    # At least one of these identifies the day
    "day": [
        "day_of_year",
        "date"
    ],
    "optional": [
        "temperature_mean",
        "elevation",
        "solar_radiation",
        "wind_speed",
        "wind_height",
        "relative_humidity_max",
        "relative_humidity_min",
        "dew_point",
        "actual_vapor_pressure"
    ],
    "output": [
        "et_short",
        "et_tall",
        "method",
        "humidity_method",
        "radiation_estimated",
        "error"
    ]
}


def read_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a YAML or JSON configuration file.

    A file may hold the calculator options at the top level or under a
    ``calculator`` section.

    Args:
        config_path: Path to a .yaml, .yml or .json file

    Returns:
        Dictionary of calculator options

    Raises:
        ConfigurationError: If the file is missing, malformed or of an
            unsupported format
    """
    path = Path(config_path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}", config_param="config_path")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix in ('.yaml', '.yml'):
                data = yaml.safe_load(f)
            elif path.suffix == '.json':
                data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported config format: {path.suffix}",
                    config_param="config_path"
                )
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Error parsing config file {path}: {e}", config_param="config_path") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping", config_param="config_path")

    if "calculator" in data:
        section = data["calculator"] or {}
        if not isinstance(section, dict):
            raise ConfigurationError("'calculator' section must be a mapping", config_param="calculator")
        return dict(section)
    return data


def load_config(config_path: Union[str, Path]):
    """
    Load a CalculatorConfig from a YAML or JSON file.

    Args:
        config_path: Path to configuration file

    Returns:
        CalculatorConfig with file values over the CALCULATOR defaults

    Raises:
        ConfigurationError: For unreadable files and unknown or invalid keys
    """
    from ..et.calculator import CalculatorConfig

    return CalculatorConfig.from_mapping(read_config_file(config_path))
