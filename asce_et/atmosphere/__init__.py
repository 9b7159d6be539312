"""Atmospheric terms of the ASCE Standardized equation.

- Atmospheric pressure and psychrometric constant (Eqs. 3-4)
- Saturation and actual vapor pressure, slope of the curve (Eqs. 5-13)
- Wind speed adjustment to the 2 m reference height (Eq. 33)
"""

from .pressure import atmospheric_pressure, psychrometric_constant
from .vapor_pressure import (
    saturation_vapor_pressure,
    mean_saturation_vapor_pressure,
    slope_vapor_pressure_curve,
    ea_from_dew_point,
    ea_from_rh_max_min,
    ea_from_rh_max,
    ea_from_rh_min,
    actual_vapor_pressure,
)
from .wind import adjust_wind_speed

__all__ = [
    'atmospheric_pressure',
    'psychrometric_constant',
    'saturation_vapor_pressure',
    'mean_saturation_vapor_pressure',
    'slope_vapor_pressure_curve',
    'ea_from_dew_point',
    'ea_from_rh_max_min',
    'ea_from_rh_max',
    'ea_from_rh_min',
    'actual_vapor_pressure',
    'adjust_wind_speed',
]
