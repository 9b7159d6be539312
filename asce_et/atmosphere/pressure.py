"""Atmospheric pressure and psychrometric constant."""

from ..core.constants import (
    STANDARD_PRESSURE,
    STANDARD_TEMPERATURE,
    ENVIRONMENTAL_LAPSE_RATE,
    PRESSURE_EXPONENT,
    PSYCHROMETRIC_COEF,
)


def atmospheric_pressure(elevation):
    """
    Mean atmospheric pressure at station elevation (Eq. 3).

        P = 101.3 * ((293 - 0.0065 z) / 293)^5.26

    Args:
        elevation: Station elevation above sea level (m)

    Returns:
        Atmospheric pressure (kPa)
    """
    ratio = (STANDARD_TEMPERATURE - ENVIRONMENTAL_LAPSE_RATE * elevation) / STANDARD_TEMPERATURE
    return STANDARD_PRESSURE * ratio ** PRESSURE_EXPONENT


def psychrometric_constant(pressure):
    """
    Psychrometric constant (Eq. 4): gamma = 0.000665 * P.

    Args:
        pressure: Atmospheric pressure (kPa)

    Returns:
        Psychrometric constant (kPa/°C)
    """
    return PSYCHROMETRIC_COEF * pressure
