"""
Unit tests for reference ET calculations.

Tests the ASCE Standardized equation, the Hargreaves-Samani fallback,
method selection, validation and the calculator configuration.
"""

import pytest
import numpy as np
import sys
from dataclasses import replace
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


class TestAsceStandardized:
    """Test the ASCE Standardized combination equation."""

    def test_greeley_reference(self):
        """Appendix C example: ETos 5.71, ETrs 7.34 mm/day."""
        from asce_et.et import AsceStandardized

        components = AsceStandardized()(
            temperature_max=32.4,
            temperature_min=10.9,
            actual_vapor_pressure=1.27,
            wind_speed=1.94,
            elevation=1462.4,
            latitude=40.41,
            day_of_year=183,
            solar_radiation=22.4,
            wind_height=3.0
        )

        assert components.et_short == pytest.approx(5.71, abs=0.1)
        assert components.et_tall == pytest.approx(7.34, abs=0.1)
        assert components.pressure == pytest.approx(85.17, abs=0.01)
        assert components.u2 == pytest.approx(1.786, abs=0.01)
        assert components.radiation.ra == pytest.approx(41.63, abs=0.05)
        assert components.radiation.rso == pytest.approx(32.44, abs=0.05)
        assert components.radiation.fcd == pytest.approx(0.582, abs=0.01)
        assert components.radiation.rnl == pytest.approx(3.96, abs=0.05)
        assert components.radiation.rn == pytest.approx(13.29, abs=0.05)
        assert components.vapor_pressure_deficit == pytest.approx(1.814, abs=0.01)

    def test_tall_exceeds_short(self):
        from asce_et.et import create_asce_standardized

        components = create_asce_standardized().calculate(
            temperature_max=30.0,
            temperature_min=15.0,
            actual_vapor_pressure=1.2,
            wind_speed=3.0,
            elevation=500.0,
            latitude=36.0,
            day_of_year=180,
            solar_radiation=28.0
        )

        assert components.et_tall > components.et_short > 0

    def test_combination_equation_radiation_only(self):
        """With no wind and no deficit only the radiation term remains."""
        from asce_et.et import combination_equation
        from asce_et.core.models import SHORT_REFERENCE

        et = combination_equation(
            delta=0.15, gamma=0.06, rn=10.0, temperature_mean=20.0,
            u2=0.0, es=2.0, ea=2.0, coefficients=SHORT_REFERENCE
        )

        assert et == pytest.approx(0.408 * 0.15 * 10.0 / (0.15 + 0.06))

    def test_vectorized(self):
        from asce_et.et import AsceStandardized

        components = AsceStandardized().calculate(
            temperature_max=np.array([32.4, 30.0]),
            temperature_min=np.array([10.9, 15.0]),
            actual_vapor_pressure=np.array([1.27, 1.2]),
            wind_speed=np.array([1.94, 3.0]),
            elevation=np.array([1462.4, 500.0]),
            latitude=np.array([40.41, 36.0]),
            day_of_year=np.array([183, 180]),
            solar_radiation=np.array([22.4, 28.0]),
            wind_height=np.array([3.0, 2.0])
        )

        assert components.et_short.shape == (2,)
        assert components.et_short[0] == pytest.approx(5.71, abs=0.1)


class TestHargreavesSamani:
    """Test the temperature-only method."""

    def test_typical_summer_day(self):
        from asce_et.et import HargreavesSamani

        et = HargreavesSamani()(30.0, 15.0, 36.0, 180)

        assert np.isfinite(et)
        assert et == pytest.approx(6.1, abs=0.2)

    def test_zero_temperature_range(self):
        from asce_et.et import HargreavesSamani

        assert HargreavesSamani().calculate(20.0, 20.0, 36.0, 180) == 0.0

    def test_very_cold_day_clamped(self):
        from asce_et.et import HargreavesSamani

        assert HargreavesSamani().calculate(-20.0, -30.0, 60.0, 15) == 0.0
        assert HargreavesSamani(clamp_negative=False).calculate(-20.0, -30.0, 60.0, 15) < 0.0


class TestMethodSelection:
    """Test choice between the two computation paths."""

    def test_full_data_uses_asce(self, greeley_weather):
        from asce_et.et import ReferenceETCalculator
        from asce_et.core.models import Method, HumidityMethod

        calculator = ReferenceETCalculator()
        result = calculator.calculate(greeley_weather)

        assert calculator.select_method(greeley_weather) is Method.ASCE_STANDARDIZED
        assert result.method_used is Method.ASCE_STANDARDIZED
        assert result.humidity_method is HumidityMethod.ACTUAL_VAPOR_PRESSURE
        assert result.radiation_estimated is False

    def test_temperature_only_uses_hargreaves(self, temperature_only_weather):
        from asce_et.et import calculate_evapotranspiration
        from asce_et.core.models import Method

        result = calculate_evapotranspiration(temperature_only_weather)

        assert result.method_used is Method.HARGREAVES
        assert result.et_tall is None
        assert result.humidity_method is None
        assert 0 < result.et_short < 10

    def test_missing_radiation_falls_back(self, greeley_weather):
        from asce_et.et import calculate_evapotranspiration
        from asce_et.core.models import Method

        result = calculate_evapotranspiration(replace(greeley_weather, solar_radiation=None))

        assert result.method_used is Method.HARGREAVES

    @pytest.mark.parametrize("changes", [
        {"solar_radiation": -1.0},
        {"wind_speed": float("nan")},
        {"elevation": 20000.0},
        {"actual_vapor_pressure": None, "relative_humidity_max": 150.0},
    ])
    def test_invalid_optional_fields_fall_back(self, greeley_weather, changes):
        from asce_et.et import ReferenceETCalculator
        from asce_et.core.models import Method

        weather = replace(greeley_weather, **changes)

        assert ReferenceETCalculator().select_method(weather) is Method.HARGREAVES

    @pytest.mark.parametrize("fixture_name", ["greeley_weather", "temperature_only_weather"])
    def test_non_finite_mean_temperature_treated_as_absent(self, fixture_name, request):
        from asce_et.et import calculate_evapotranspiration

        weather = request.getfixturevalue(fixture_name)

        expected = calculate_evapotranspiration(weather)
        result = calculate_evapotranspiration(replace(weather, temperature_mean=float("inf")))

        assert result == expected

    def test_humidity_priority(self, greeley_weather):
        from asce_et.utils.validation import available_humidity_method
        from asce_et.core.models import HumidityMethod

        weather = replace(
            greeley_weather,
            actual_vapor_pressure=None,
            dew_point=10.0,
            relative_humidity_max=80.0,
            relative_humidity_min=30.0
        )
        assert available_humidity_method(weather) is HumidityMethod.DEW_POINT

        weather = replace(weather, dew_point=None)
        assert available_humidity_method(weather) is HumidityMethod.RH_MAX_MIN

        assert available_humidity_method(replace(weather, relative_humidity_min=None)) is HumidityMethod.RH_MAX
        assert available_humidity_method(replace(weather, relative_humidity_max=None)) is HumidityMethod.RH_MIN

    def test_estimate_missing_radiation(self, greeley_weather):
        from asce_et.et import CalculatorConfig, calculate_evapotranspiration
        from asce_et.core.models import Method

        config = CalculatorConfig(estimate_missing_radiation=True)
        result = calculate_evapotranspiration(replace(greeley_weather, solar_radiation=None), config)

        assert result.method_used is Method.ASCE_STANDARDIZED
        assert result.radiation_estimated is True
        assert result.et_tall > result.et_short > 0


class TestReferenceScenarios:
    """Test published and fallback scenarios end to end."""

    def test_greeley(self, greeley_weather):
        from asce_et.et import calculate_evapotranspiration

        result = calculate_evapotranspiration(greeley_weather)

        assert result.et_short == pytest.approx(5.71, abs=0.1)
        assert result.et_tall == pytest.approx(7.34, abs=0.1)
        assert isinstance(result.et_short, float)

    def test_greeley_from_dew_point(self, greeley_weather):
        """A dew point with e°(Tdew) = 1.27 kPa gives the same ET."""
        from asce_et.et import calculate_evapotranspiration
        from asce_et.core.models import HumidityMethod

        weather = replace(greeley_weather, actual_vapor_pressure=None, dew_point=10.5)
        result = calculate_evapotranspiration(weather)

        assert result.humidity_method is HumidityMethod.DEW_POINT
        assert result.et_short == pytest.approx(5.71, abs=0.15)

    def test_calculate_reference_et(self, greeley_weather):
        from asce_et.et import calculate_reference_et
        from asce_et.core.models import ReferenceSurface

        et_short = calculate_reference_et(greeley_weather, ReferenceSurface.SHORT)
        et_tall = calculate_reference_et(greeley_weather, "tall")

        assert et_short == pytest.approx(5.71, abs=0.1)
        assert et_tall == pytest.approx(7.34, abs=0.1)

    def test_tall_reference_requires_full_data(self, temperature_only_weather):
        from asce_et.et import calculate_reference_et
        from asce_et.core.models import ReferenceSurface
        from asce_et.utils.exceptions import InsufficientDataForTallReference

        with pytest.raises(InsufficientDataForTallReference):
            calculate_reference_et(temperature_only_weather, ReferenceSurface.TALL)

    def test_idempotent(self, greeley_weather):
        from asce_et.et import calculate_evapotranspiration

        assert calculate_evapotranspiration(greeley_weather) == calculate_evapotranspiration(greeley_weather)

    def test_more_radiation_more_et(self, greeley_weather):
        """Holds on a mid-latitude summer day with Rs/Rso inside the fcd clip range."""
        from asce_et.et import ReferenceETCalculator

        calculator = ReferenceETCalculator()
        values = [
            calculator.calculate(replace(greeley_weather, solar_radiation=rs)).et_short
            for rs in (10.0, 15.0, 22.4, 30.0)
        ]

        assert values == sorted(values)

    def test_equal_temperatures_valid(self, temperature_only_weather):
        from asce_et.et import calculate_evapotranspiration

        weather = replace(temperature_only_weather, temperature_max=20.0, temperature_min=20.0)

        assert calculate_evapotranspiration(weather).et_short == 0.0

    def test_non_negative_results(self):
        from asce_et.et import calculate_evapotranspiration
        from asce_et.core.models import WeatherInput

        rng = np.random.default_rng(42)
        for _ in range(50):
            tmin = rng.uniform(-30.0, 30.0)
            weather = WeatherInput(
                temperature_max=tmin + rng.uniform(0.0, 25.0),
                temperature_min=tmin,
                latitude=rng.uniform(-90.0, 90.0),
                day_of_year=int(rng.integers(1, 367)),
                elevation=rng.uniform(0.0, 3000.0),
                solar_radiation=rng.uniform(0.0, 35.0),
                wind_speed=rng.uniform(0.0, 10.0),
                relative_humidity_max=rng.uniform(50.0, 100.0),
                relative_humidity_min=rng.uniform(5.0, 50.0),
            )
            result = calculate_evapotranspiration(weather)

            assert result.et_short >= 0.0
            assert result.et_tall >= 0.0

    def test_negative_et_clamping(self):
        """Cold, supersaturated winter day gives negative unclamped ET."""
        from asce_et.et import CalculatorConfig, calculate_evapotranspiration
        from asce_et.core.models import WeatherInput

        weather = WeatherInput(
            temperature_max=2.0,
            temperature_min=-5.0,
            latitude=60.0,
            day_of_year=355,
            elevation=0.0,
            solar_radiation=0.5,
            wind_speed=0.5,
            actual_vapor_pressure=0.7
        )

        clamped = calculate_evapotranspiration(weather)
        raw = calculate_evapotranspiration(weather, CalculatorConfig(clamp_negative=False))

        assert clamped.et_short == 0.0
        assert raw.et_short < 0.0


class TestValidation:
    """Test input validation and its order."""

    def test_inverted_temperatures(self, temperature_only_weather):
        from asce_et.et import calculate_evapotranspiration
        from asce_et.utils.exceptions import InvalidTemperatureRange

        weather = replace(temperature_only_weather, temperature_max=10.0, temperature_min=20.0)

        with pytest.raises(InvalidTemperatureRange):
            calculate_evapotranspiration(weather)

    def test_invalid_latitude(self, temperature_only_weather):
        from asce_et.et import calculate_evapotranspiration
        from asce_et.utils.exceptions import InvalidLatitude

        with pytest.raises(InvalidLatitude):
            calculate_evapotranspiration(replace(temperature_only_weather, latitude=95.0))

    @pytest.mark.parametrize("doy", [0, 367, 180.5])
    def test_invalid_day_of_year(self, temperature_only_weather, doy):
        from asce_et.et import calculate_evapotranspiration
        from asce_et.utils.exceptions import InvalidDayOfYear

        with pytest.raises(InvalidDayOfYear):
            calculate_evapotranspiration(replace(temperature_only_weather, day_of_year=doy))

    def test_missing_fields(self):
        from asce_et.et import calculate_evapotranspiration
        from asce_et.core.models import WeatherInput
        from asce_et.utils.exceptions import MissingRequiredField

        with pytest.raises(MissingRequiredField) as exc_info:
            calculate_evapotranspiration(WeatherInput(temperature_max=30.0, temperature_min=15.0))

        assert exc_info.value.details["missing"] == ["latitude", "day_of_year"]

    def test_validation_order(self, temperature_only_weather):
        from asce_et.et import calculate_evapotranspiration
        from asce_et.utils.exceptions import InvalidTemperatureRange, MissingRequiredField

        with pytest.raises(MissingRequiredField):
            calculate_evapotranspiration(replace(
                temperature_only_weather, temperature_max=10.0, temperature_min=20.0, day_of_year=None
            ))

        with pytest.raises(InvalidTemperatureRange):
            calculate_evapotranspiration(replace(
                temperature_only_weather, temperature_max=10.0, temperature_min=20.0, latitude=95.0
            ))

    def test_input_errors_share_base(self):
        from asce_et.utils.exceptions import (
            InputError,
            InvalidTemperatureRange,
            InvalidLatitude,
            InvalidDayOfYear,
            MissingRequiredField,
            InsufficientDataForTallReference,
        )

        for error_type in (InvalidTemperatureRange, InvalidLatitude, InvalidDayOfYear,
                           MissingRequiredField, InsufficientDataForTallReference):
            assert issubclass(error_type, InputError)


class TestCalculatorConfig:
    """Test calculator configuration."""

    def test_defaults(self):
        from asce_et.et import CalculatorConfig

        config = CalculatorConfig()

        assert config.clamp_negative is True
        assert config.estimate_missing_radiation is False
        assert config.hargreaves_coefficient == pytest.approx(0.0023)
        assert config.albedo == pytest.approx(0.23)

    def test_from_mapping(self):
        from asce_et.et import CalculatorConfig

        config = CalculatorConfig.from_mapping({"estimate_missing_radiation": True})

        assert config.estimate_missing_radiation is True
        assert CalculatorConfig.from_mapping(None) == CalculatorConfig()

    def test_unknown_key(self):
        from asce_et.et import CalculatorConfig
        from asce_et.utils.exceptions import ConfigurationError

        with pytest.raises(ConfigurationError):
            CalculatorConfig.from_mapping({"crop_coefficient": 1.1})

    @pytest.mark.parametrize("changes", [
        {"albedo": 1.5},
        {"hargreaves_coefficient": -0.0023},
        {"clamp_negative": "yes"},
    ])
    def test_invalid_values(self, changes):
        from asce_et.et import CalculatorConfig
        from asce_et.utils.exceptions import ConfigurationError

        with pytest.raises(ConfigurationError):
            CalculatorConfig(**changes)
