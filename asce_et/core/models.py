"""Data model for reference ET calculations.

WeatherInput is one daily weather record for one location; ETResult is
what the calculator returns for it. Both are immutable.
"""

import math
from dataclasses import dataclass, fields, asdict
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union


class Method(str, Enum):
    """Computation path used for a result."""

    ASCE_STANDARDIZED = "asce_standardized"
    HARGREAVES = "hargreaves"


class ReferenceSurface(str, Enum):
    """Reference crop surface."""

    SHORT = "short"  # clipped grass, ETos
    TALL = "tall"    # alfalfa, ETrs


class HumidityMethod(str, Enum):
    """Source of actual vapor pressure, in order of preference."""

    ACTUAL_VAPOR_PRESSURE = "actual_vapor_pressure"
    DEW_POINT = "dew_point"
    RH_MAX_MIN = "rh_max_min"
    RH_MAX = "rh_max"
    RH_MIN = "rh_min"


@dataclass(frozen=True)
class SurfaceCoefficients:
    """
    Daily constants of the standardized combination equation.

    Attributes:
        cn: Numerator constant (K mm s³ Mg⁻¹ day⁻¹)
        cd: Denominator constant (s/m)
        g: Soil heat flux density (MJ/m²/day), zero for daily steps
    """

    cn: float
    cd: float
    g: float = 0.0


SHORT_REFERENCE = SurfaceCoefficients(cn=900.0, cd=0.34)
TALL_REFERENCE = SurfaceCoefficients(cn=1600.0, cd=0.38)


def coefficients_for(surface: ReferenceSurface) -> SurfaceCoefficients:
    """Return the daily coefficients for a reference surface."""
    surface = ReferenceSurface(surface)
    if surface is ReferenceSurface.TALL:
        return TALL_REFERENCE
    return SHORT_REFERENCE


def _clean(value):
    # None and NaN both mean "not observed"
    if value is None:
        return None
    try:
        if math.isnan(value):
            return None
    except TypeError:
        return value
    return value


@dataclass(frozen=True)
class WeatherInput:
    """
    Daily weather record for one location.

    Units are fixed: temperatures in °C, radiation in MJ/m²/day, wind
    speed in m/s, vapor pressure in kPa, relative humidity in percent,
    elevation in m and latitude in decimal degrees.

    Only temperature_max, temperature_min, latitude and day_of_year are
    needed for the Hargreaves estimate. The ASCE Standardized method
    additionally needs elevation, solar_radiation, wind_speed and one
    humidity measure.
    """

    temperature_max: Optional[float] = None
    temperature_min: Optional[float] = None
    latitude: Optional[float] = None
    day_of_year: Optional[int] = None
    elevation: Optional[float] = None
    temperature_mean: Optional[float] = None
    solar_radiation: Optional[float] = None
    wind_speed: Optional[float] = None
    wind_height: float = 2.0
    relative_humidity_max: Optional[float] = None
    relative_humidity_min: Optional[float] = None
    dew_point: Optional[float] = None
    actual_vapor_pressure: Optional[float] = None

    @property
    def mean_temperature(self) -> float:
        """Supplied finite mean temperature, or the Tmax/Tmin average."""
        from ..utils.validation import is_observed

        if is_observed(self.temperature_mean):
            return self.temperature_mean
        return (self.temperature_max + self.temperature_min) / 2.0

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_date(cls, value: Union[date, datetime, str], **kwargs) -> 'WeatherInput':
        """
        Build a record whose day_of_year is taken from a calendar date.

        Args:
            value: date, datetime or ``YYYY-MM-DD`` string
            **kwargs: Remaining WeatherInput fields

        Returns:
            WeatherInput instance
        """
        from ..utils.conversions import day_of_year

        kwargs["day_of_year"] = day_of_year(value)
        return cls(**kwargs)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> 'WeatherInput':
        """
        Build a record from a dict or pandas row with canonical names.

        Unknown keys are ignored and NaN values are treated as missing.
        A ``date`` entry fills day_of_year when that field is absent.

        Raises:
            InputError: If ``date`` is used and cannot be parsed
        """
        values = {}
        for name in cls.field_names():
            if name in mapping:
                value = _clean(mapping[name])
                if value is not None:
                    values[name] = value

        doy = values.get("day_of_year")
        if doy is None and _clean(mapping.get("date")) is not None:
            from ..utils.conversions import day_of_year
            from ..utils.exceptions import InputError

            try:
                doy = day_of_year(mapping["date"])
            except (TypeError, ValueError) as e:
                raise InputError(
                    f"Invalid date {mapping['date']!r}, expected YYYY-MM-DD",
                    field="date",
                    value=mapping["date"]
                ) from e
        if isinstance(doy, float) and doy.is_integer():
            doy = int(doy)
        if doy is not None:
            values["day_of_year"] = doy

        return cls(**values)


@dataclass(frozen=True)
class ETResult:
    """
    Reference ET for one weather record.

    Attributes:
        et_short: Short (grass) reference ET (mm/day)
        et_tall: Tall (alfalfa) reference ET (mm/day), None when only
            the Hargreaves estimate was possible
        method_used: Computation path that produced the values
        humidity_method: Vapor pressure source on the ASCE path
        radiation_estimated: True when Rs was estimated from temperature
    """

    et_short: float
    et_tall: Optional[float]
    method_used: Method
    humidity_method: Optional[HumidityMethod] = None
    radiation_estimated: bool = False

    def get(self, surface: ReferenceSurface) -> float:
        """
        Reference ET for the requested surface.

        Raises:
            InsufficientDataForTallReference: If the tall surface is
                requested from a Hargreaves result
        """
        from ..utils.exceptions import InsufficientDataForTallReference

        surface = ReferenceSurface(surface)
        if surface is ReferenceSurface.SHORT:
            return self.et_short
        if self.et_tall is None:
            raise InsufficientDataForTallReference()
        return self.et_tall

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["method_used"] = self.method_used.value
        data["humidity_method"] = self.humidity_method.value if self.humidity_method else None
        return data


__all__ = [
    'Method', 'ReferenceSurface', 'HumidityMethod', 'SurfaceCoefficients',
    'SHORT_REFERENCE', 'TALL_REFERENCE', 'coefficients_for', 'WeatherInput',
    'ETResult',
]
