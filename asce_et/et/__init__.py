"""
Reference Evapotranspiration (ET) Module.

This module computes daily reference ET for the short (grass, ETos) and
tall (alfalfa, ETrs) reference surfaces.

Classes:
    - AsceStandardized: ASCE-EWRI (2005) Standardized equation
    - HargreavesSamani: Temperature-only short reference
    - ReferenceETCalculator: Method selection and validation per record
    - CalculatorConfig: Calculator options

Method Selection:
    | Available data                          | Method            |
    |-----------------------------------------|-------------------|
    | Rs, wind, elevation and humidity usable | ASCE Standardized |
    | Temperature, latitude, day of year only | Hargreaves-Samani |
"""

from .asce_standardized import (
    AsceStandardized,
    AsceComponents,
    combination_equation,
    create_asce_standardized
)
from .hargreaves import HargreavesSamani
from .calculator import (
    CalculatorConfig,
    ReferenceETCalculator,
    calculate_evapotranspiration,
    calculate_reference_et
)
from .batch import calculate_frame

__all__ = [
    'AsceStandardized',
    'AsceComponents',
    'combination_equation',
    'create_asce_standardized',
    'HargreavesSamani',
    'CalculatorConfig',
    'ReferenceETCalculator',
    'calculate_evapotranspiration',
    'calculate_reference_et',
    'calculate_frame',
]
