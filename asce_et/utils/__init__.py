"""
Utility modules for the ASCE reference ET package.

Provides exceptions, validation, unit conversions and logging.
"""

from .exceptions import (
    RefETError,
    InputError,
    InvalidTemperatureRange,
    InvalidLatitude,
    InvalidDayOfYear,
    MissingRequiredField,
    InsufficientDataForTallReference,
    DataInputError,
    ConfigurationError,
    ComputationError,
    create_error_context
)
from .logger import Logger, log_step
from .conversions import (
    fahrenheit_to_celsius,
    celsius_to_fahrenheit,
    pa_to_kpa,
    langley_to_mj,
    watts_to_mj_per_day,
    mph_to_mps,
    feet_to_meters,
    degrees_to_radians,
    radians_to_degrees,
    day_of_year
)
from .validation import (
    validate_weather_input,
    available_humidity_method,
    check_et_range
)

__all__ = [
    # Exceptions
    "RefETError",
    "InputError",
    "InvalidTemperatureRange",
    "InvalidLatitude",
    "InvalidDayOfYear",
    "MissingRequiredField",
    "InsufficientDataForTallReference",
    "DataInputError",
    "ConfigurationError",
    "ComputationError",
    "create_error_context",

    # Logger
    "Logger",
    "log_step",

    # Conversions
    "fahrenheit_to_celsius",
    "celsius_to_fahrenheit",
    "pa_to_kpa",
    "langley_to_mj",
    "watts_to_mj_per_day",
    "mph_to_mps",
    "feet_to_meters",
    "degrees_to_radians",
    "radians_to_degrees",
    "day_of_year",

    # Validation
    "validate_weather_input",
    "available_humidity_method",
    "check_et_range",
]
