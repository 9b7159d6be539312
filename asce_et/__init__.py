"""
ASCE Reference ET - daily reference evapotranspiration.

Implements the ASCE-EWRI (2005) Standardized Reference
Evapotranspiration Equation for the short (clipped grass, ETos) and
tall (alfalfa, ETrs) reference surfaces, with a Hargreaves-Samani
fallback for records that carry only temperatures.

This package provides tools for:
- Computing reference ET for a single daily weather record
- Atmospheric and radiation terms of the combination equation
- Running the calculator over weather tables (CSV / pandas)
- A command-line interface (``asce-et``)

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "ASCE ET Development Team"

# Core modules
from asce_et.core import (
    constants,
    WeatherInput,
    ETResult,
    Method,
    ReferenceSurface,
    HumidityMethod
)

# Radiation balance
from asce_et.radiation import (
    ShortwaveRadiation,
    LongwaveRadiation,
    NetRadiation
)

# Reference ET
from asce_et.et import (
    AsceStandardized,
    HargreavesSamani,
    CalculatorConfig,
    ReferenceETCalculator,
    calculate_evapotranspiration,
    calculate_reference_et,
    calculate_frame
)

# IO modules
from asce_et.io import WeatherTable

__all__ = [
    # Version
    '__version__',
    '__author__',

    # Core
    'constants',
    'WeatherInput',
    'ETResult',
    'Method',
    'ReferenceSurface',
    'HumidityMethod',

    # Radiation
    'ShortwaveRadiation',
    'LongwaveRadiation',
    'NetRadiation',

    # Reference ET
    'AsceStandardized',
    'HargreavesSamani',
    'CalculatorConfig',
    'ReferenceETCalculator',
    'calculate_evapotranspiration',
    'calculate_reference_et',
    'calculate_frame',

    # IO
    'WeatherTable',
]
