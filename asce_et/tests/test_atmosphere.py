"""
Unit tests for atmospheric terms.

Tests pressure, psychrometric constant, vapor pressure and wind
adjustment against the Greeley example and published table values.
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


class TestPressure:
    """Test atmospheric pressure and psychrometric constant."""

    def test_sea_level_pressure(self):
        from asce_et.atmosphere import atmospheric_pressure

        assert atmospheric_pressure(0.0) == pytest.approx(101.3)

    def test_greeley_pressure(self):
        from asce_et.atmosphere import atmospheric_pressure

        assert atmospheric_pressure(1462.4) == pytest.approx(85.17, abs=0.01)

    def test_greeley_psychrometric_constant(self):
        from asce_et.atmosphere import atmospheric_pressure, psychrometric_constant

        gamma = psychrometric_constant(atmospheric_pressure(1462.4))
        assert gamma == pytest.approx(0.0566, abs=0.0001)

    def test_pressure_decreases_with_elevation(self):
        from asce_et.atmosphere import atmospheric_pressure

        pressures = atmospheric_pressure(np.array([0.0, 500.0, 1500.0, 3000.0]))
        assert np.all(np.diff(pressures) < 0)


class TestVaporPressure:
    """Test saturation and actual vapor pressure."""

    def test_saturation_vapor_pressure_greeley(self):
        from asce_et.atmosphere import saturation_vapor_pressure

        assert saturation_vapor_pressure(32.4) == pytest.approx(4.863, abs=0.01)
        assert saturation_vapor_pressure(10.9) == pytest.approx(1.304, abs=0.01)

    def test_mean_saturation_uses_extremes(self):
        from asce_et.atmosphere import saturation_vapor_pressure, mean_saturation_vapor_pressure

        es = mean_saturation_vapor_pressure(32.4, 10.9)
        assert es == pytest.approx(3.084, abs=0.01)
        # e° is convex, so averaging the extremes exceeds e° of the mean
        assert es > saturation_vapor_pressure(21.65)

    def test_slope_vapor_pressure_curve(self):
        from asce_et.atmosphere import slope_vapor_pressure_curve

        assert slope_vapor_pressure_curve(21.65) == pytest.approx(0.1582, abs=0.001)
        assert slope_vapor_pressure_curve(21.7) == pytest.approx(0.1585, abs=0.001)

    def test_ea_from_dew_point(self):
        from asce_et.atmosphere import ea_from_dew_point

        assert ea_from_dew_point(10.0) == pytest.approx(1.228, abs=0.001)

    def test_ea_from_dew_point_fahrenheit(self):
        from asce_et.atmosphere import ea_from_dew_point
        from asce_et.utils.conversions import fahrenheit_to_celsius

        assert ea_from_dew_point(fahrenheit_to_celsius(65.0)) == pytest.approx(2.1076, abs=0.005)

    @pytest.mark.parametrize("tmax,tmin,rh_max,rh_min,expected", [
        (32.0, 25.0, 75.0, 45.0, 2.2577),
        (29.0, 20.0, 85.0, 65.0, 2.2956),
    ])
    def test_ea_from_rh_max_min(self, tmax, tmin, rh_max, rh_min, expected):
        from asce_et.atmosphere import ea_from_rh_max_min

        assert ea_from_rh_max_min(tmax, tmin, rh_max, rh_min) == pytest.approx(expected, abs=0.01)

    @pytest.mark.parametrize("tmin,rh_max,expected", [
        (25.0, 75.0, 2.3758),
        (20.0, 85.0, 1.9875),
    ])
    def test_ea_from_rh_max(self, tmin, rh_max, expected):
        from asce_et.atmosphere import ea_from_rh_max

        assert ea_from_rh_max(tmin, rh_max) == pytest.approx(expected, abs=0.01)

    @pytest.mark.parametrize("tmax,rh_min,expected", [
        (32.0, 45.0, 2.1396),
        (29.0, 65.0, 2.6036),
    ])
    def test_ea_from_rh_min(self, tmax, rh_min, expected):
        from asce_et.atmosphere import ea_from_rh_min

        assert ea_from_rh_min(tmax, rh_min) == pytest.approx(expected, abs=0.01)

    def test_actual_vapor_pressure_dispatch(self):
        from asce_et.atmosphere import actual_vapor_pressure, ea_from_rh_max_min
        from asce_et.core.models import WeatherInput, HumidityMethod

        weather = WeatherInput(
            temperature_max=32.0,
            temperature_min=25.0,
            relative_humidity_max=75.0,
            relative_humidity_min=45.0,
            actual_vapor_pressure=1.5
        )

        assert actual_vapor_pressure(weather, HumidityMethod.ACTUAL_VAPOR_PRESSURE) == 1.5
        assert actual_vapor_pressure(weather, HumidityMethod.RH_MAX_MIN) == pytest.approx(
            ea_from_rh_max_min(32.0, 25.0, 75.0, 45.0)
        )


class TestWindAdjustment:
    """Test wind speed adjustment to 2 m."""

    def test_two_meter_wind_unchanged(self):
        from asce_et.atmosphere import adjust_wind_speed

        assert adjust_wind_speed(3.2, 2.0) == 3.2

    def test_greeley_wind(self):
        from asce_et.atmosphere import adjust_wind_speed

        assert adjust_wind_speed(1.94, 3.0) == pytest.approx(1.786, abs=0.01)

    def test_ten_meter_wind_reduced(self):
        from asce_et.atmosphere import adjust_wind_speed

        assert adjust_wind_speed(5.0, 10.0) == pytest.approx(5.0 * 0.748, abs=0.01)

    def test_array_heights(self):
        from asce_et.atmosphere import adjust_wind_speed

        u2 = adjust_wind_speed(np.array([2.0, 2.0]), np.array([2.0, 10.0]))
        assert u2[0] == pytest.approx(2.0)
        assert u2[1] < 2.0
