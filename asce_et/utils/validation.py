"""
Validation utilities for the ASCE reference ET package.

Record validation raises typed InputError subclasses. The data
availability helpers decide which optional inputs are usable, and the
ET range check returns an ``(is_valid, message)`` tuple for the batch runner.
"""

import math
from numbers import Number
from typing import Optional, Tuple

import numpy as np

from ..core.models import HumidityMethod, WeatherInput
from ..atmosphere.wind import MIN_WIND_HEIGHT
from .exceptions import (
    InvalidTemperatureRange,
    InvalidLatitude,
    InvalidDayOfYear,
    MissingRequiredField,
)


REQUIRED_FIELDS = ("temperature_max", "temperature_min", "latitude", "day_of_year")

LATITUDE_RANGE = (-90.0, 90.0)  # decimal degrees
DAY_OF_YEAR_RANGE = (1, 366)
RELATIVE_HUMIDITY_RANGE = (0.0, 100.0)  # %

# Plausible station elevations (m)
ELEVATION_RANGE = (-500.0, 9000.0)


def is_observed(value) -> bool:
    """True if a value is present and finite."""
    if value is None or isinstance(value, bool) or not isinstance(value, Number):
        return False
    return math.isfinite(value)


def is_usable(value, minimum: Optional[float] = None, maximum: Optional[float] = None) -> bool:
    """True if a value is present, finite and within the given bounds."""
    if not is_observed(value):
        return False
    if minimum is not None and value < minimum:
        return False
    if maximum is not None and value > maximum:
        return False
    return True


def validate_weather_input(weather: WeatherInput) -> None:
    """
    Check that a record meets the minimum requirements of either method.

    Checks run in order: required fields, temperature range, latitude,
    day of year.

    Args:
        weather: Weather record

    Raises:
        MissingRequiredField: If Tmax, Tmin, latitude or day of year is absent
        InvalidTemperatureRange: If temperature_max < temperature_min
        InvalidLatitude: If latitude is outside [-90, 90]
        InvalidDayOfYear: If day_of_year is not an integer in [1, 366]
    """
    missing = [name for name in REQUIRED_FIELDS if not is_observed(getattr(weather, name))]
    if missing:
        raise MissingRequiredField(missing)

    if weather.temperature_max < weather.temperature_min:
        raise InvalidTemperatureRange(weather.temperature_max, weather.temperature_min)

    min_lat, max_lat = LATITUDE_RANGE
    if not min_lat <= weather.latitude <= max_lat:
        raise InvalidLatitude(weather.latitude)

    doy = weather.day_of_year
    first_day, last_day = DAY_OF_YEAR_RANGE
    if not float(doy).is_integer() or not first_day <= doy <= last_day:
        raise InvalidDayOfYear(doy)


def has_solar_radiation(weather: WeatherInput) -> bool:
    return is_usable(weather.solar_radiation, minimum=0.0)


def has_wind(weather: WeatherInput) -> bool:
    return (
        is_usable(weather.wind_speed, minimum=0.0)
        and is_observed(weather.wind_height)
        and weather.wind_height > MIN_WIND_HEIGHT
    )


def has_elevation(weather: WeatherInput) -> bool:
    return is_usable(weather.elevation, minimum=ELEVATION_RANGE[0], maximum=ELEVATION_RANGE[1])


def available_humidity_method(weather: WeatherInput) -> Optional[HumidityMethod]:
    """
    Preferred usable humidity measure of a record, or None.

    Preference: measured ea, dew point, RHmax and RHmin, RHmax, RHmin.
    """
    if is_usable(weather.actual_vapor_pressure, minimum=0.0):
        return HumidityMethod.ACTUAL_VAPOR_PRESSURE
    if is_observed(weather.dew_point):
        return HumidityMethod.DEW_POINT

    rh_low, rh_high = RELATIVE_HUMIDITY_RANGE
    rh_max = is_usable(weather.relative_humidity_max, minimum=rh_low, maximum=rh_high)
    rh_min = is_usable(weather.relative_humidity_min, minimum=rh_low, maximum=rh_high)
    if rh_max and rh_min:
        return HumidityMethod.RH_MAX_MIN
    if rh_max:
        return HumidityMethod.RH_MAX
    if rh_min:
        return HumidityMethod.RH_MIN
    return None


def check_et_range(ET: np.ndarray, max_et: float = 15) -> Tuple[bool, str]:
    """
    Check ET values are within expected range [0, max_et] mm/day.

    NaN entries (failed rows) are ignored.

    Args:
        ET: ET array in mm/day
        max_et: Maximum expected ET value

    Returns:
        Tuple of (is_valid, message)
    """
    if ET is None:
        return False, "ET array is None"

    ET = np.asarray(ET, dtype=np.float64)
    ET = ET[np.isfinite(ET)]

    if ET.size == 0:
        return False, "ET array is empty"

    valid_mask = (ET >= 0) & (ET <= max_et)

    if not np.all(valid_mask):
        invalid_count = int(np.sum(~valid_mask))
        invalid_percent = (invalid_count / ET.size) * 100
        return False, f"ET values out of range [0, {max_et}] mm/day: {invalid_count} records ({invalid_percent:.2f}%)"

    return True, f"ET values are valid (range: {ET.min():.2f} - {ET.max():.2f} mm/day)"


__all__ = [
    'REQUIRED_FIELDS', 'LATITUDE_RANGE', 'DAY_OF_YEAR_RANGE',
    'RELATIVE_HUMIDITY_RANGE', 'ELEVATION_RANGE', 'is_observed', 'is_usable',
    'validate_weather_input', 'has_solar_radiation', 'has_wind',
    'has_elevation', 'available_humidity_method',
    'check_et_range',
]
