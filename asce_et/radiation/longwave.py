"""Net longwave radiation for the ASCE reference ET package."""

import numpy as np

from ..core.constants import (
    STEFAN_BOLTZMANN,
    FCD_SLOPE,
    FCD_OFFSET,
    RS_RSO_MIN,
    RS_RSO_MAX,
    NET_EMISSIVITY_A,
    NET_EMISSIVITY_B,
    LONGWAVE_KELVIN_OFFSET,
)


class LongwaveRadiation:
    """
    Compute net outgoing longwave radiation (Rnl) for daily periods.

    The Stefan-Boltzmann law is applied to the average of the fourth
    powers of the daily maximum and minimum air temperatures, corrected
    for air humidity (net emissivity) and cloudiness (fcd):

        Rnl = σ fcd (0.34 - 0.14 sqrt(ea)) [(Tmax,K⁴ + Tmin,K⁴) / 2]   (Eq. 17)

    Where:
        σ = 4.901e-9 MJ/K⁴/m²/day
        fcd = 1.35 Rs/Rso - 0.35, with Rs/Rso limited to [0.3, 1.0]  (Eq. 18)
    """

    def compute_cloudiness_factor(self, rs, rso):
        """
        Compute the cloudiness function fcd (Eq. 18).

        Where Rso is not positive (polar night) the relative shortwave
        radiation is taken as 1.0.

        Args:
            rs: Incoming solar radiation (MJ/m²/day)
            rso: Clear-sky solar radiation (MJ/m²/day)

        Returns:
            Cloudiness factor fcd (dimensionless, 0.055-1.0)
        """
        rs = np.asarray(rs, dtype=np.float64)
        rso = np.asarray(rso, dtype=np.float64)
        ratio = np.divide(rs, rso, out=np.ones(np.broadcast(rs, rso).shape), where=rso > 0)
        ratio = np.clip(ratio, RS_RSO_MIN, RS_RSO_MAX)
        fcd = FCD_SLOPE * ratio - FCD_OFFSET
        return fcd[()]

    def compute_net_emissivity(self, ea):
        """Net emissivity of the surface-atmosphere pair (dimensionless)."""
        return NET_EMISSIVITY_A - NET_EMISSIVITY_B * np.sqrt(ea)

    def compute_net_longwave(self, fcd, ea, temperature_max, temperature_min):
        """
        Compute net outgoing longwave radiation (Eq. 17).

        Args:
            fcd: Cloudiness factor
            ea: Actual vapor pressure (kPa)
            temperature_max: Daily maximum temperature (°C)
            temperature_min: Daily minimum temperature (°C)

        Returns:
            Net longwave radiation (MJ/m²/day), positive upward
        """
        tmax_k4 = (temperature_max + LONGWAVE_KELVIN_OFFSET) ** 4
        tmin_k4 = (temperature_min + LONGWAVE_KELVIN_OFFSET) ** 4
        return STEFAN_BOLTZMANN * fcd * self.compute_net_emissivity(ea) * (tmax_k4 + tmin_k4) / 2.0


__all__ = ['LongwaveRadiation']
