"""Extraterrestrial radiation for 24-hour periods.

    dr = 1 + 0.033 cos(2π J / 365)                               (Eq. 23)
    δ  = 0.409 sin(2π J / 365 - 1.39)                           (Eq. 24)
    ωs = arccos(-tan φ tan δ)                                   (Eq. 27)
    Ra = 24/π Gsc dr [ωs sin φ sin δ + cos φ cos δ sin ωs]      (Eq. 21)

Above the polar circles -tan φ tan δ leaves [-1, 1] on polar days and
nights; it is clipped so that ωs becomes π (sun never sets) or 0 (sun
never rises).
"""

import numpy as np

from ..core.constants import (
    SOLAR_CONSTANT,
    EARTH_ORBIT_ECCENTRICITY,
    SOLAR_DECLINATION_AMPLITUDE,
    SOLAR_DECLINATION_PHASE,
    DAYS_PER_YEAR,
    DEG_TO_RAD,
)


def inverse_relative_distance(day_of_year):
    """Inverse relative Earth-Sun distance factor dr (Eq. 23)."""
    return 1.0 + EARTH_ORBIT_ECCENTRICITY * np.cos(2.0 * np.pi / DAYS_PER_YEAR * day_of_year)


def solar_declination(day_of_year):
    """Solar declination δ in radians (Eq. 24)."""
    return SOLAR_DECLINATION_AMPLITUDE * np.sin(
        2.0 * np.pi / DAYS_PER_YEAR * day_of_year - SOLAR_DECLINATION_PHASE
    )


def sunset_hour_angle(latitude_rad, declination):
    """
    Sunset hour angle ωs in radians (Eq. 27).

    Args:
        latitude_rad: Latitude (radians)
        declination: Solar declination (radians)
    """
    return np.arccos(np.clip(-np.tan(latitude_rad) * np.tan(declination), -1.0, 1.0))


def extraterrestrial_radiation(latitude, day_of_year):
    """
    Daily extraterrestrial radiation Ra (Eq. 21).

    Args:
        latitude: Latitude in decimal degrees (south negative)
        day_of_year: Day of the year (1-366)

    Returns:
        Extraterrestrial radiation (MJ/m²/day)
    """
    phi = latitude * DEG_TO_RAD
    dr = inverse_relative_distance(day_of_year)
    delta = solar_declination(day_of_year)
    omega = sunset_hour_angle(phi, delta)

    return (
        24.0 / np.pi * SOLAR_CONSTANT * dr
        * (omega * np.sin(phi) * np.sin(delta) + np.cos(phi) * np.cos(delta) * np.sin(omega))
    )
