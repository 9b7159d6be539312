"""Radiation balance module for the ASCE reference ET package."""

from .extraterrestrial import (
    inverse_relative_distance,
    solar_declination,
    sunset_hour_angle,
    extraterrestrial_radiation,
)
from .shortwave import ShortwaveRadiation
from .longwave import LongwaveRadiation
from .net_radiation import NetRadiation, RadiationBalance

__all__ = [
    'inverse_relative_distance',
    'solar_declination',
    'sunset_hour_angle',
    'extraterrestrial_radiation',
    'ShortwaveRadiation',
    'LongwaveRadiation',
    'NetRadiation',
    'RadiationBalance',
]
