"""
Vapor pressure terms for the ASCE Standardized equation.

Saturation vapor pressure uses the Tetens form (Eq. 7):
    e°(T) = 0.6108 * exp(17.27 T / (T + 237.3))

Daily saturation vapor pressure averages e° at Tmax and Tmin (Eq. 6),
never e° at the mean temperature, since e° is non-linear.

Actual vapor pressure (ea) methods, in order of preference (Table 3):
    1. Measured ea
    2. Dew point temperature:   ea = e°(Tdew)                         (Eq. 8)
    3. RHmax and RHmin:         ea = [e°(Tmin) RHmax + e°(Tmax) RHmin] / 200  (Eq. 11)
    4. RHmax only:              ea = e°(Tmin) RHmax / 100             (Eq. 12)
    5. RHmin only:              ea = e°(Tmax) RHmin / 100             (Eq. 13)

Relative humidity is always in percent.
"""

import numpy as np

from ..core.constants import TETENS_A, TETENS_B, TETENS_C, SLOPE_NUMERATOR
from ..core.models import HumidityMethod, WeatherInput


def saturation_vapor_pressure(temperature):
    """
    Saturation vapor pressure at a temperature (Eq. 7).

    Args:
        temperature: Air temperature (°C)

    Returns:
        Saturation vapor pressure (kPa)
    """
    return TETENS_A * np.exp(TETENS_B * temperature / (temperature + TETENS_C))


def mean_saturation_vapor_pressure(temperature_max, temperature_min):
    """Daily saturation vapor pressure es (Eq. 6), in kPa."""
    return (saturation_vapor_pressure(temperature_max) + saturation_vapor_pressure(temperature_min)) / 2.0


def slope_vapor_pressure_curve(temperature_mean):
    """
    Slope of the saturation vapor pressure curve (Eq. 5).

        Δ = 2503 exp(17.27 T / (T + 237.3)) / (T + 237.3)²

    Args:
        temperature_mean: Mean daily air temperature (°C)

    Returns:
        Slope Δ (kPa/°C)
    """
    shifted = temperature_mean + TETENS_C
    return SLOPE_NUMERATOR * np.exp(TETENS_B * temperature_mean / shifted) / shifted ** 2


def ea_from_dew_point(dew_point):
    """Actual vapor pressure from dew point temperature (Eq. 8)."""
    return saturation_vapor_pressure(dew_point)


def ea_from_rh_max_min(temperature_max, temperature_min, rh_max, rh_min):
    """Actual vapor pressure from daily RHmax and RHmin (Eq. 11)."""
    return (
        saturation_vapor_pressure(temperature_min) * rh_max / 100.0
        + saturation_vapor_pressure(temperature_max) * rh_min / 100.0
    ) / 2.0


def ea_from_rh_max(temperature_min, rh_max):
    """Actual vapor pressure from RHmax alone (Eq. 12)."""
    return saturation_vapor_pressure(temperature_min) * rh_max / 100.0


def ea_from_rh_min(temperature_max, rh_min):
    """Actual vapor pressure from RHmin alone (Eq. 13)."""
    return saturation_vapor_pressure(temperature_max) * rh_min / 100.0


def actual_vapor_pressure(weather: WeatherInput, method: HumidityMethod) -> float:
    """
    Actual vapor pressure of a record using the given humidity method.

    Args:
        weather: Weather record holding the fields the method needs
        method: Which humidity measure to use

    Returns:
        Actual vapor pressure ea (kPa)

    Raises:
        ValueError: If the method is unknown
    """
    method = HumidityMethod(method)
    if method is HumidityMethod.ACTUAL_VAPOR_PRESSURE:
        return weather.actual_vapor_pressure
    if method is HumidityMethod.DEW_POINT:
        return ea_from_dew_point(weather.dew_point)
    if method is HumidityMethod.RH_MAX_MIN:
        return ea_from_rh_max_min(
            weather.temperature_max,
            weather.temperature_min,
            weather.relative_humidity_max,
            weather.relative_humidity_min,
        )
    if method is HumidityMethod.RH_MAX:
        return ea_from_rh_max(weather.temperature_min, weather.relative_humidity_max)
    return ea_from_rh_min(weather.temperature_max, weather.relative_humidity_min)
