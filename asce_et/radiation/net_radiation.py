"""Net radiation calculations for the ASCE reference ET package."""

from dataclasses import dataclass
from typing import Any, Optional

from ..core.constants import REFERENCE_ALBEDO
from .extraterrestrial import extraterrestrial_radiation
from .shortwave import ShortwaveRadiation
from .longwave import LongwaveRadiation


@dataclass(frozen=True)
class RadiationBalance:
    """Radiation terms of one daily calculation (MJ/m²/day unless noted)."""

    ra: Any            # Extraterrestrial radiation
    rs: Any            # Incoming solar radiation (measured or estimated)
    rso: Any           # Clear-sky solar radiation
    rns: Any           # Net shortwave radiation
    fcd: Any           # Cloudiness factor (dimensionless)
    rnl: Any           # Net longwave radiation
    rn: Any            # Net radiation
    rs_estimated: bool = False


class NetRadiation:
    """
    Compute net radiation at the reference surface.

    Net radiation (Rn) is the balance between absorbed shortwave and
    net outgoing longwave radiation (Eq. 15):

        Rn = Rns - Rnl

    Unlike instantaneous energy-balance models, negative daily Rn is kept
    as is; it occurs in winter and at high latitudes and enters the
    combination equation unchanged.

    Attributes:
        shortwave: Shortwave radiation calculator
        longwave: Longwave radiation calculator
    """

    def __init__(self, albedo: float = REFERENCE_ALBEDO):
        """
        Initialize NetRadiation calculator.

        Args:
            albedo: Reference surface albedo
        """
        self.shortwave = ShortwaveRadiation(albedo=albedo)
        self.longwave = LongwaveRadiation()

    def compute_net_radiation_from_components(self, rns, rnl):
        """Rn = Rns - Rnl (Eq. 15)."""
        return rns - rnl

    def compute(
        self,
        latitude,
        day_of_year,
        elevation,
        temperature_max,
        temperature_min,
        ea,
        rs: Optional[Any] = None
    ) -> RadiationBalance:
        """
        Compute the full daily radiation balance.

        When ``rs`` is None, incoming solar radiation is estimated from
        the diurnal temperature range and capped at Rso.

        Args:
            latitude: Latitude (decimal degrees)
            day_of_year: Day of the year (1-366)
            elevation: Station elevation (m)
            temperature_max: Daily maximum temperature (°C)
            temperature_min: Daily minimum temperature (°C)
            ea: Actual vapor pressure (kPa)
            rs: Measured solar radiation (MJ/m²/day), optional

        Returns:
            RadiationBalance with every intermediate term
        """
        ra = extraterrestrial_radiation(latitude, day_of_year)
        rso = self.shortwave.compute_clear_sky(ra, elevation)

        rs_estimated = rs is None
        if rs_estimated:
            rs = self.shortwave.estimate_from_temperature(
                temperature_max, temperature_min, ra, rso=rso
            )

        rns = self.shortwave.compute_net_shortwave(rs)
        fcd = self.longwave.compute_cloudiness_factor(rs, rso)
        rnl = self.longwave.compute_net_longwave(fcd, ea, temperature_max, temperature_min)
        rn = self.compute_net_radiation_from_components(rns, rnl)

        return RadiationBalance(
            ra=ra,
            rs=rs,
            rso=rso,
            rns=rns,
            fcd=fcd,
            rnl=rnl,
            rn=rn,
            rs_estimated=rs_estimated,
        )


__all__ = ['NetRadiation', 'RadiationBalance']
