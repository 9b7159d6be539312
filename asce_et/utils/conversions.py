"""
Unit conversion helpers for callers of the reference ET calculator.

The calculator works in fixed units (°C, m/s, MJ/m²/day, kPa, m).
These helpers convert station data into those units before a
WeatherInput is built; the calculator itself never calls them.
"""

from datetime import date, datetime
from typing import Union

from ..core.constants import (
    DEG_TO_RAD,
    RAD_TO_DEG,
    LANGLEY_TO_MJ_M2,
    W_M2_TO_MJ_M2_DAY,
    MPH_TO_MPS,
    FEET_TO_METERS,
    PA_TO_KPA,
)


def fahrenheit_to_celsius(value):
    """Convert °F to °C."""
    return (value - 32.0) * 5.0 / 9.0


def celsius_to_fahrenheit(value):
    """Convert °C to °F."""
    return value * 9.0 / 5.0 + 32.0


def pa_to_kpa(value):
    """Convert pascals to kilopascals."""
    return value * PA_TO_KPA


def langley_to_mj(value):
    """Convert langleys (cal/cm²) to MJ/m²."""
    return value * LANGLEY_TO_MJ_M2


def watts_to_mj_per_day(value):
    """Convert a mean flux in W/m² to a daily total in MJ/m²/day."""
    return value * W_M2_TO_MJ_M2_DAY


def mph_to_mps(value):
    """Convert miles per hour to metres per second."""
    return value * MPH_TO_MPS


def feet_to_meters(value):
    """Convert feet to metres."""
    return value * FEET_TO_METERS


def degrees_to_radians(degrees):
    return degrees * DEG_TO_RAD


def radians_to_degrees(radians):
    return radians * RAD_TO_DEG


def day_of_year(value: Union[date, datetime, str]) -> int:
    """
    Day of the year (1-366) for a calendar date.

    Args:
        value: date, datetime or ISO string ``YYYY-MM-DD``

    Returns:
        Ordinal day within the year, honouring leap years

    Raises:
        ValueError: If a string is not a valid ISO date
        TypeError: If the value is neither a string nor a date
    """
    if isinstance(value, str):
        value = datetime.strptime(value, "%Y-%m-%d")
    elif not isinstance(value, date):
        raise TypeError(f"Expected a date or YYYY-MM-DD string, got {type(value).__name__}")
    return value.timetuple().tm_yday


__all__ = [
    'fahrenheit_to_celsius', 'celsius_to_fahrenheit', 'pa_to_kpa',
    'langley_to_mj', 'watts_to_mj_per_day', 'mph_to_mps', 'feet_to_meters',
    'degrees_to_radians', 'radians_to_degrees', 'day_of_year',
]
