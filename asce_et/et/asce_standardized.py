"""
ASCE Standardized Reference Evapotranspiration for daily time steps.

This module implements the standardized combination equation (Eq. 1)
for the short (clipped grass) and tall (alfalfa) reference surfaces.

Formula:
    ET = [0.408 Δ (Rn - G) + γ (Cn / (T + 273)) u2 (es - ea)]
         / [Δ + γ (1 + Cd u2)]

Where:
    - Δ = slope of the saturation vapor pressure curve (kPa/°C)
    - Rn = net radiation, G = soil heat flux (MJ/m²/day)
    - γ = psychrometric constant (kPa/°C)
    - T = mean daily air temperature (°C)
    - u2 = wind speed at 2 m (m/s)
    - es - ea = vapor pressure deficit (kPa)

Daily Surface Constants:
    | Surface | Cn   | Cd   | G |
    |---------|------|------|---|
    | Short   | 900  | 0.34 | 0 |
    | Tall    | 1600 | 0.38 | 0 |

Physical Constraints:
    - Negative results (strong advection of cold, humid air with
      negative Rn) are clamped to 0 mm/day when clamp_negative is set
"""

import numpy as np
from typing import Any, Optional
from dataclasses import dataclass

from ..core.constants import (
    INVERSE_LATENT_HEAT,
    COMBINATION_KELVIN_OFFSET,
    REFERENCE_ALBEDO,
    REFERENCE_WIND_HEIGHT,
)
from ..core.models import SurfaceCoefficients, SHORT_REFERENCE, TALL_REFERENCE
from ..atmosphere import (
    atmospheric_pressure,
    psychrometric_constant,
    mean_saturation_vapor_pressure,
    slope_vapor_pressure_curve,
    adjust_wind_speed,
)
from ..radiation import NetRadiation, RadiationBalance


@dataclass(frozen=True)
class AsceComponents:
    """Results and intermediate values of one ASCE Standardized calculation."""

    et_short: Any          # mm/day
    et_tall: Any           # mm/day
    temperature_mean: Any  # °C
    pressure: Any          # kPa
    gamma: Any             # kPa/°C
    delta: Any             # kPa/°C
    es: Any                # kPa
    ea: Any                # kPa
    u2: Any                # m/s
    radiation: RadiationBalance

    @property
    def vapor_pressure_deficit(self):
        return self.es - self.ea


def combination_equation(delta, gamma, rn, temperature_mean, u2, es, ea, coefficients: SurfaceCoefficients):
    """
    Evaluate the standardized combination equation (Eq. 1).

    Args:
        delta: Slope of the saturation vapor pressure curve (kPa/°C)
        gamma: Psychrometric constant (kPa/°C)
        rn: Net radiation (MJ/m²/day)
        temperature_mean: Mean daily air temperature (°C)
        u2: Wind speed at 2 m (m/s)
        es: Saturation vapor pressure (kPa)
        ea: Actual vapor pressure (kPa)
        coefficients: Surface constants Cn, Cd and G

    Returns:
        Reference ET (mm/day), unclamped
    """
    radiation_term = INVERSE_LATENT_HEAT * delta * (rn - coefficients.g)
    aerodynamic_term = (
        gamma * (coefficients.cn / (temperature_mean + COMBINATION_KELVIN_OFFSET)) * u2 * (es - ea)
    )
    denominator = delta + gamma * (1.0 + coefficients.cd * u2)
    return (radiation_term + aerodynamic_term) / denominator


class AsceStandardized:
    """
    Daily ASCE Standardized reference ET for both reference surfaces.

    Inputs may be scalars or numpy arrays of matching shape. Units are
    fixed: °C, MJ/m²/day, m/s, kPa, m, decimal degrees.

    Attributes:
        net_radiation: Radiation balance calculator
        clamp_negative: Clamp negative ET to zero
    """

    def __init__(self, albedo: float = REFERENCE_ALBEDO, clamp_negative: bool = True):
        """
        Initialize AsceStandardized calculator.

        Args:
            albedo: Reference surface albedo
            clamp_negative: Clamp negative ET to zero
        """
        self.net_radiation = NetRadiation(albedo=albedo)
        self.clamp_negative = clamp_negative

    def _clamp(self, et):
        if self.clamp_negative:
            return np.maximum(et, 0.0)
        return et

    def calculate(
        self,
        temperature_max,
        temperature_min,
        actual_vapor_pressure,
        wind_speed,
        elevation,
        latitude,
        day_of_year,
        solar_radiation: Optional[Any] = None,
        temperature_mean: Optional[Any] = None,
        wind_height=REFERENCE_WIND_HEIGHT
    ) -> AsceComponents:
        """
        Calculate short and tall reference ET with all intermediate terms.

        When ``solar_radiation`` is None it is estimated from the diurnal
        temperature range (see ShortwaveRadiation.estimate_from_temperature).

        Args:
            temperature_max: Daily maximum temperature (°C)
            temperature_min: Daily minimum temperature (°C)
            actual_vapor_pressure: Actual vapor pressure ea (kPa)
            wind_speed: Wind speed at ``wind_height`` (m/s)
            elevation: Station elevation (m)
            latitude: Latitude (decimal degrees)
            day_of_year: Day of the year (1-366)
            solar_radiation: Incoming solar radiation Rs (MJ/m²/day)
            temperature_mean: Mean temperature (°C), defaults to (Tmax + Tmin) / 2
            wind_height: Wind measurement height (m)

        Returns:
            AsceComponents with ET for both surfaces
        """
        if temperature_mean is None:
            temperature_mean = (temperature_max + temperature_min) / 2.0

        pressure = atmospheric_pressure(elevation)
        gamma = psychrometric_constant(pressure)
        delta = slope_vapor_pressure_curve(temperature_mean)
        es = mean_saturation_vapor_pressure(temperature_max, temperature_min)
        u2 = adjust_wind_speed(wind_speed, wind_height)

        radiation = self.net_radiation.compute(
            latitude=latitude,
            day_of_year=day_of_year,
            elevation=elevation,
            temperature_max=temperature_max,
            temperature_min=temperature_min,
            ea=actual_vapor_pressure,
            rs=solar_radiation,
        )

        et_short = combination_equation(
            delta, gamma, radiation.rn, temperature_mean, u2, es, actual_vapor_pressure, SHORT_REFERENCE
        )
        et_tall = combination_equation(
            delta, gamma, radiation.rn, temperature_mean, u2, es, actual_vapor_pressure, TALL_REFERENCE
        )

        return AsceComponents(
            et_short=self._clamp(et_short),
            et_tall=self._clamp(et_tall),
            temperature_mean=temperature_mean,
            pressure=pressure,
            gamma=gamma,
            delta=delta,
            es=es,
            ea=actual_vapor_pressure,
            u2=u2,
            radiation=radiation,
        )

    def __call__(self, *args, **kwargs) -> AsceComponents:
        """
        Convenience method to calculate reference ET.
        """
        return self.calculate(*args, **kwargs)


def create_asce_standardized(
    albedo: float = REFERENCE_ALBEDO,
    clamp_negative: bool = True
) -> AsceStandardized:
    """
    Factory function to create AsceStandardized instance.

    Args:
        albedo: Reference surface albedo
        clamp_negative: Clamp negative ET to zero

    Returns:
        Configured AsceStandardized instance
    """
    return AsceStandardized(albedo=albedo, clamp_negative=clamp_negative)
