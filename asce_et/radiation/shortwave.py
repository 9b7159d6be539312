"""Shortwave radiation calculations for the ASCE reference ET package."""

import numpy as np

from ..core.constants import (
    REFERENCE_ALBEDO,
    CLEAR_SKY_COEF,
    CLEAR_SKY_ALTITUDE_FACTOR,
    HARGREAVES_RADIATION_COEF,
)


class ShortwaveRadiation:
    """
    Compute shortwave radiation components for the reference surface.

    This class calculates clear-sky solar radiation (Rso), net shortwave
    radiation (Rns) absorbed by the reference crop, and a temperature
    based estimate of incoming solar radiation (Rs) for stations that do
    not measure it.

    All methods accept scalars or numpy arrays in MJ/m²/day.

    Attributes:
        albedo: Reference surface albedo (0.23 for both reference crops)
    """

    def __init__(self, albedo: float = REFERENCE_ALBEDO):
        """
        Initialize ShortwaveRadiation calculator.

        Args:
            albedo: Reference surface albedo (dimensionless)
        """
        self.albedo = albedo

    def compute_clear_sky(self, ra, elevation):
        """
        Compute clear-sky solar radiation (Eq. 19).

            Rso = (0.75 + 2e-5 z) * Ra

        Args:
            ra: Extraterrestrial radiation (MJ/m²/day)
            elevation: Station elevation (m)

        Returns:
            Clear-sky solar radiation (MJ/m²/day)
        """
        return (CLEAR_SKY_COEF + CLEAR_SKY_ALTITUDE_FACTOR * elevation) * ra

    def compute_net_shortwave(self, rs):
        """
        Compute net shortwave radiation absorbed by the surface (Eq. 16).

            Rns = (1 - α) * Rs

        Args:
            rs: Incoming solar radiation (MJ/m²/day)

        Returns:
            Net shortwave radiation (MJ/m²/day)
        """
        return (1.0 - self.albedo) * rs

    def estimate_from_temperature(
        self,
        temperature_max,
        temperature_min,
        ra,
        rso=None,
        krs: float = HARGREAVES_RADIATION_COEF
    ):
        """
        Estimate incoming solar radiation from the diurnal temperature range.

        Uses the Hargreaves radiation formula:
            Rs = krs * Ra * sqrt(Tmax - Tmin)

        The estimate is capped at clear-sky radiation when Rso is given.

        Args:
            temperature_max: Daily maximum temperature (°C)
            temperature_min: Daily minimum temperature (°C)
            ra: Extraterrestrial radiation (MJ/m²/day)
            rso: Clear-sky solar radiation (MJ/m²/day), optional cap
            krs: Adjustment coefficient, 0.16 interior / 0.19 coastal

        Returns:
            Estimated solar radiation (MJ/m²/day)
        """
        rs = krs * ra * np.sqrt(temperature_max - temperature_min)
        if rso is not None:
            rs = np.minimum(rs, rso)
        return rs


__all__ = ['ShortwaveRadiation']
