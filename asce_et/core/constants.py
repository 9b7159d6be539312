"""Physical constants for the ASCE Standardized reference ET equation.

Values and equation numbers follow ASCE-EWRI (2005), "The ASCE
Standardized Reference Evapotranspiration Equation", daily time step.
"""

import numpy as np

# ============================================================================
# RADIATION CONSTANTS
# ============================================================================

# Stefan-Boltzmann constant for daily sums (MJ/K⁴/m²/day)
STEFAN_BOLTZMANN = 4.901e-9

# Solar constant (MJ/m²/h), Eq. 21
SOLAR_CONSTANT = 4.92

# Albedo of the reference surfaces (dimensionless), Eq. 16
REFERENCE_ALBEDO = 0.23

# Clear-sky radiation: Rso = (0.75 + 2e-5 z) Ra, Eq. 19
CLEAR_SKY_COEF = 0.75
CLEAR_SKY_ALTITUDE_FACTOR = 2e-5

# Cloudiness function: fcd = 1.35 Rs/Rso - 0.35, Eq. 18
FCD_SLOPE = 1.35
FCD_OFFSET = 0.35
RS_RSO_MIN = 0.3
RS_RSO_MAX = 1.0

# Net emissivity: 0.34 - 0.14 sqrt(ea), Eq. 17
NET_EMISSIVITY_A = 0.34
NET_EMISSIVITY_B = 0.14

# Kelvin offset used in the longwave term
LONGWAVE_KELVIN_OFFSET = 273.16

# ============================================================================
# SOLAR GEOMETRY
# ============================================================================

EARTH_ORBIT_ECCENTRICITY = 0.033          # Eq. 23
SOLAR_DECLINATION_AMPLITUDE = 0.409       # Eq. 24
SOLAR_DECLINATION_PHASE = 1.39            # radians, Eq. 24
DAYS_PER_YEAR = 365.0

# ============================================================================
# ATMOSPHERIC CONSTANTS
# ============================================================================

# Pressure profile, Eq. 3
STANDARD_PRESSURE = 101.3                 # kPa
STANDARD_TEMPERATURE = 293.0              # K
ENVIRONMENTAL_LAPSE_RATE = 0.0065         # K/m
PRESSURE_EXPONENT = 5.26

# Psychrometric constant coefficient, Eq. 4 (kPa/°C per kPa)
PSYCHROMETRIC_COEF = 0.000665

# Saturation vapor pressure (Tetens), Eq. 7
TETENS_A = 0.6108                         # kPa
TETENS_B = 17.27
TETENS_C = 237.3                          # °C

# Slope of the saturation vapor pressure curve numerator, Eq. 5
SLOPE_NUMERATOR = 2503.0

# ============================================================================
# COMBINATION EQUATION
# ============================================================================

# Inverse latent heat of vaporization (mm per MJ/m²)
INVERSE_LATENT_HEAT = 0.408

# Kelvin offset used in the aerodynamic term, Eq. 1
COMBINATION_KELVIN_OFFSET = 273.0

# ============================================================================
# WIND PROFILE
# ============================================================================

REFERENCE_WIND_HEIGHT = 2.0               # m
WIND_PROFILE_NUMERATOR = 4.87             # Eq. 33
WIND_PROFILE_SCALE = 67.8
WIND_PROFILE_OFFSET = 5.42

# ============================================================================
# HARGREAVES-SAMANI
# ============================================================================

HARGREAVES_COEFFICIENT = 0.0023
HARGREAVES_TEMPERATURE_OFFSET = 17.8      # °C

# Radiation adjustment coefficient for interior locations (°C^-0.5)
HARGREAVES_RADIATION_COEF = 0.16

# ============================================================================
# ANGLE CONVERSIONS
# ============================================================================

DEG_TO_RAD = np.pi / 180.0
RAD_TO_DEG = 180.0 / np.pi

# ============================================================================
# UNIT CONVERSION FACTORS
# ============================================================================

LANGLEY_TO_MJ_M2 = 0.04184
W_M2_TO_MJ_M2_DAY = 0.0864
MPH_TO_MPS = 0.44704
FEET_TO_METERS = 0.3048
PA_TO_KPA = 0.001

__all__ = [
    'STEFAN_BOLTZMANN', 'SOLAR_CONSTANT', 'REFERENCE_ALBEDO', 'CLEAR_SKY_COEF',
    'CLEAR_SKY_ALTITUDE_FACTOR', 'FCD_SLOPE', 'FCD_OFFSET', 'RS_RSO_MIN',
    'RS_RSO_MAX', 'NET_EMISSIVITY_A', 'NET_EMISSIVITY_B',
    'LONGWAVE_KELVIN_OFFSET', 'EARTH_ORBIT_ECCENTRICITY',
    'SOLAR_DECLINATION_AMPLITUDE', 'SOLAR_DECLINATION_PHASE', 'DAYS_PER_YEAR',
    'STANDARD_PRESSURE', 'STANDARD_TEMPERATURE', 'ENVIRONMENTAL_LAPSE_RATE',
    'PRESSURE_EXPONENT', 'PSYCHROMETRIC_COEF', 'TETENS_A', 'TETENS_B',
    'TETENS_C', 'SLOPE_NUMERATOR', 'INVERSE_LATENT_HEAT',
    'COMBINATION_KELVIN_OFFSET', 'REFERENCE_WIND_HEIGHT',
    'WIND_PROFILE_NUMERATOR', 'WIND_PROFILE_SCALE', 'WIND_PROFILE_OFFSET',
    'HARGREAVES_COEFFICIENT', 'HARGREAVES_TEMPERATURE_OFFSET',
    'HARGREAVES_RADIATION_COEF', 'DEG_TO_RAD', 'RAD_TO_DEG',
    'LANGLEY_TO_MJ_M2', 'W_M2_TO_MJ_M2_DAY', 'MPH_TO_MPS', 'FEET_TO_METERS',
    'PA_TO_KPA',
]
