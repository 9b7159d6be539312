"""Core module for the ASCE reference ET package."""

from .constants import (
    STEFAN_BOLTZMANN,
    SOLAR_CONSTANT,
    REFERENCE_ALBEDO,
    PSYCHROMETRIC_COEF,
    INVERSE_LATENT_HEAT,
    REFERENCE_WIND_HEIGHT,
    DEG_TO_RAD,
    RAD_TO_DEG,
)
from .models import (
    Method,
    ReferenceSurface,
    HumidityMethod,
    SurfaceCoefficients,
    SHORT_REFERENCE,
    TALL_REFERENCE,
    coefficients_for,
    WeatherInput,
    ETResult,
)

__all__ = [
    'STEFAN_BOLTZMANN',
    'SOLAR_CONSTANT',
    'REFERENCE_ALBEDO',
    'PSYCHROMETRIC_COEF',
    'INVERSE_LATENT_HEAT',
    'REFERENCE_WIND_HEIGHT',
    'DEG_TO_RAD',
    'RAD_TO_DEG',
    'Method',
    'ReferenceSurface',
    'HumidityMethod',
    'SurfaceCoefficients',
    'SHORT_REFERENCE',
    'TALL_REFERENCE',
    'coefficients_for',
    'WeatherInput',
    'ETResult',
]
