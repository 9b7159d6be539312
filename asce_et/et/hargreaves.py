"""
Hargreaves-Samani reference ET for temperature-only records.

Formula:
    ET0 = 0.0023 × 0.408 Ra × (Tmean + 17.8) × sqrt(Tmax - Tmin)

Where:
    - Ra = extraterrestrial radiation (MJ/m²/day), converted to
      equivalent evaporation with 0.408 mm per MJ/m²
    - Tmean = mean daily air temperature (°C)

The method estimates the short (grass) reference only. A zero diurnal
range gives sqrt(0) = 0 and therefore 0 mm/day.
"""

import numpy as np

from ..core.constants import (
    HARGREAVES_COEFFICIENT,
    HARGREAVES_TEMPERATURE_OFFSET,
    INVERSE_LATENT_HEAT,
)
from ..radiation import extraterrestrial_radiation


class HargreavesSamani:
    """
    Temperature-based short reference ET.

    Attributes:
        coefficient: Empirical coefficient (0.0023)
        clamp_negative: Clamp negative ET (Tmean below -17.8 °C) to zero
    """

    def __init__(self, coefficient: float = HARGREAVES_COEFFICIENT, clamp_negative: bool = True):
        self.coefficient = coefficient
        self.clamp_negative = clamp_negative

    def calculate(self, temperature_max, temperature_min, latitude, day_of_year, temperature_mean=None):
        """
        Calculate short reference ET.

        Args:
            temperature_max: Daily maximum temperature (°C)
            temperature_min: Daily minimum temperature (°C)
            latitude: Latitude (decimal degrees)
            day_of_year: Day of the year (1-366)
            temperature_mean: Mean temperature (°C), defaults to (Tmax + Tmin) / 2

        Returns:
            Short reference ET (mm/day)
        """
        if temperature_mean is None:
            temperature_mean = (temperature_max + temperature_min) / 2.0

        ra = extraterrestrial_radiation(latitude, day_of_year)
        et = (
            self.coefficient
            * INVERSE_LATENT_HEAT * ra
            * (temperature_mean + HARGREAVES_TEMPERATURE_OFFSET)
            * np.sqrt(temperature_max - temperature_min)
        )
        if self.clamp_negative:
            et = np.maximum(et, 0.0)
        return et

    def __call__(self, *args, **kwargs):
        return self.calculate(*args, **kwargs)
