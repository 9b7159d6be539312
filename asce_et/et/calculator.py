"""
Daily reference ET calculator.

Chooses between the two computation paths for one weather record:

    | Method            | Needs                                              | Surfaces    |
    |-------------------|----------------------------------------------------|-------------|
    | ASCE Standardized | Tmax, Tmin, lat, DOY, z, Rs, wind, one humidity    | short, tall |
    | Hargreaves-Samani | Tmax, Tmin, lat, DOY                               | short       |

Optional inputs that are present but not usable (NaN, negative Rs or
wind, RH outside 0-100 %) count as absent and lead to the Hargreaves
fallback. Missing or invalid required inputs raise an InputError.

The calculator performs no I/O and holds no mutable state.
"""

import math
from dataclasses import dataclass, fields
from typing import Any, Mapping, NamedTuple, Optional

from ..config.settings import CALCULATOR
from ..core.models import (
    ETResult,
    HumidityMethod,
    Method,
    ReferenceSurface,
    WeatherInput,
)
from ..atmosphere import actual_vapor_pressure
from ..utils.exceptions import ComputationError, ConfigurationError
from ..utils.validation import (
    validate_weather_input,
    available_humidity_method,
    has_solar_radiation,
    has_wind,
    has_elevation,
)
from .asce_standardized import AsceStandardized
from .hargreaves import HargreavesSamani


@dataclass
class CalculatorConfig:
    """Configuration for the reference ET calculator."""

    # Clamp negative ET to 0 mm/day
    clamp_negative: bool = CALCULATOR["clamp_negative"]

    # Estimate Rs from the temperature range when it is the only missing ASCE input
    estimate_missing_radiation: bool = CALCULATOR["estimate_missing_radiation"]

    # Hargreaves-Samani coefficient
    hargreaves_coefficient: float = CALCULATOR["hargreaves_coefficient"]

    # Reference surface albedo
    albedo: float = CALCULATOR["albedo"]

    def __post_init__(self):
        for name in ("clamp_negative", "estimate_missing_radiation"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be true or false", config_param=name)

        coefficient = self.hargreaves_coefficient
        if isinstance(coefficient, bool) or not isinstance(coefficient, (int, float)) or coefficient <= 0:
            raise ConfigurationError(
                f"hargreaves_coefficient must be a positive number, got {coefficient!r}",
                config_param="hargreaves_coefficient"
            )

        albedo = self.albedo
        if isinstance(albedo, bool) or not isinstance(albedo, (int, float)) or not 0.0 <= albedo < 1.0:
            raise ConfigurationError(
                f"albedo must be a number in [0, 1), got {albedo!r}",
                config_param="albedo"
            )

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> 'CalculatorConfig':
        """
        Build a config from a dictionary of options.

        Raises:
            ConfigurationError: If the mapping holds unknown keys or invalid values
        """
        mapping = dict(mapping or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {unknown}",
                config_param=unknown[0]
            )
        return cls(**mapping)


class _Plan(NamedTuple):
    method: Method
    humidity_method: Optional[HumidityMethod] = None
    estimate_radiation: bool = False


class ReferenceETCalculator:
    """
    Daily reference ET for a single weather record.

    Attributes:
        config: Calculator configuration
        asce: ASCE Standardized equation
        hargreaves: Hargreaves-Samani equation

    Example:
        >>> calculator = ReferenceETCalculator()
        >>> weather = WeatherInput(temperature_max=30.0, temperature_min=15.0,
        ...                        latitude=36.0, day_of_year=180)
        >>> result = calculator.calculate(weather)
        >>> result.method_used
        <Method.HARGREAVES: 'hargreaves'>
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or CalculatorConfig()
        self.asce = AsceStandardized(
            albedo=self.config.albedo,
            clamp_negative=self.config.clamp_negative
        )
        self.hargreaves = HargreavesSamani(
            coefficient=self.config.hargreaves_coefficient,
            clamp_negative=self.config.clamp_negative
        )

    def _plan(self, weather: WeatherInput) -> _Plan:
        humidity = available_humidity_method(weather)
        if humidity is None or not has_wind(weather) or not has_elevation(weather):
            return _Plan(Method.HARGREAVES)
        if has_solar_radiation(weather):
            return _Plan(Method.ASCE_STANDARDIZED, humidity)
        if self.config.estimate_missing_radiation:
            return _Plan(Method.ASCE_STANDARDIZED, humidity, estimate_radiation=True)
        return _Plan(Method.HARGREAVES)

    def select_method(self, weather: WeatherInput) -> Method:
        """
        Method that calculate() would use for a record.

        Raises:
            InputError: If the record fails validation
        """
        validate_weather_input(weather)
        return self._plan(weather).method

    def calculate(self, weather: WeatherInput) -> ETResult:
        """
        Calculate reference ET for one record.

        Args:
            weather: Daily weather record

        Returns:
            ETResult with the short and, on the ASCE path, tall reference

        Raises:
            MissingRequiredField: If Tmax, Tmin, latitude or day of year is absent
            InvalidTemperatureRange: If temperature_max < temperature_min
            InvalidLatitude: If latitude is outside [-90, 90]
            InvalidDayOfYear: If day_of_year is outside [1, 366]
            ComputationError: If the result is not finite
        """
        validate_weather_input(weather)
        plan = self._plan(weather)

        if plan.method is Method.ASCE_STANDARDIZED:
            ea = actual_vapor_pressure(weather, plan.humidity_method)
            components = self.asce.calculate(
                temperature_max=weather.temperature_max,
                temperature_min=weather.temperature_min,
                actual_vapor_pressure=ea,
                wind_speed=weather.wind_speed,
                elevation=weather.elevation,
                latitude=weather.latitude,
                day_of_year=weather.day_of_year,
                solar_radiation=None if plan.estimate_radiation else weather.solar_radiation,
                temperature_mean=weather.mean_temperature,
                wind_height=weather.wind_height,
            )
            et_short = float(components.et_short)
            et_tall = float(components.et_tall)
        else:
            et_short = float(self.hargreaves.calculate(
                weather.temperature_max,
                weather.temperature_min,
                weather.latitude,
                weather.day_of_year,
                temperature_mean=weather.mean_temperature,
            ))
            et_tall = None

        for surface, value in (("short", et_short), ("tall", et_tall)):
            if value is not None and not math.isfinite(value):
                raise ComputationError(
                    f"Non-finite {surface} reference ET ({value}) from valid inputs",
                    computation_step=plan.method.value
                )

        return ETResult(
            et_short=et_short,
            et_tall=et_tall,
            method_used=plan.method,
            humidity_method=plan.humidity_method,
            radiation_estimated=plan.estimate_radiation,
        )

    def calculate_surface(self, weather: WeatherInput, surface: ReferenceSurface) -> float:
        """
        Reference ET for a single surface.

        Raises:
            InsufficientDataForTallReference: If the tall surface is requested
                and only the Hargreaves method can run
        """
        return self.calculate(weather).get(surface)

    def __call__(self, weather: WeatherInput) -> ETResult:
        return self.calculate(weather)


def calculate_evapotranspiration(
    weather: WeatherInput,
    config: Optional[CalculatorConfig] = None
) -> ETResult:
    """
    Calculate daily reference ET for one weather record.

    Args:
        weather: Daily weather record
        config: Optional calculator configuration

    Returns:
        ETResult
    """
    return ReferenceETCalculator(config).calculate(weather)


def calculate_reference_et(
    weather: WeatherInput,
    surface: ReferenceSurface = ReferenceSurface.SHORT,
    config: Optional[CalculatorConfig] = None
) -> float:
    """
    Calculate daily reference ET (mm/day) for one surface.

    Args:
        weather: Daily weather record
        surface: Reference surface, short or tall
        config: Optional calculator configuration

    Returns:
        Reference ET in mm/day
    """
    return ReferenceETCalculator(config).calculate_surface(weather, surface)
