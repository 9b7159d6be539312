"""
Pytest configuration and fixtures for ASCE reference ET tests.

Provides common fixtures for testing.
"""

import pytest
import numpy as np
import pandas as pd
from pathlib import Path
import sys

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


# ASCE-EWRI (2005) Appendix C, Greeley, Colorado, 1 July 2000
GREELEY = {
    "temperature_max": 32.4,
    "temperature_min": 10.9,
    "latitude": 40.41,
    "day_of_year": 183,
    "elevation": 1462.4,
    "solar_radiation": 22.4,
    "wind_speed": 1.94,
    "wind_height": 3.0,
    "actual_vapor_pressure": 1.27,
}


@pytest.fixture
def greeley_values():
    """Greeley record as a plain dictionary."""
    return dict(GREELEY)


@pytest.fixture
def greeley_weather():
    """Complete daily record for the ASCE Standardized method."""
    from asce_et.core.models import WeatherInput

    return WeatherInput(**GREELEY)


@pytest.fixture
def temperature_only_weather():
    """Record carrying only the Hargreaves-Samani inputs."""
    from asce_et.core.models import WeatherInput

    return WeatherInput(
        temperature_max=30.0,
        temperature_min=15.0,
        latitude=36.0,
        day_of_year=180
    )


@pytest.fixture
def sample_weather_dataframe():
    """Weather table with a complete, a temperature-only and an invalid row."""
    return pd.DataFrame({
        "temperature_max": [32.4, 30.0, 10.0],
        "temperature_min": [10.9, 15.0, 20.0],
        "latitude": [40.41, 36.0, 36.0],
        "day_of_year": [183, 180, 180],
        "elevation": [1462.4, np.nan, np.nan],
        "solar_radiation": [22.4, np.nan, np.nan],
        "wind_speed": [1.94, np.nan, np.nan],
        "wind_height": [3.0, np.nan, np.nan],
        "actual_vapor_pressure": [1.27, np.nan, np.nan],
    })


@pytest.fixture
def sample_weather_csv(tmp_path, sample_weather_dataframe):
    """Create sample weather CSV file."""
    csv_path = tmp_path / "weather.csv"
    sample_weather_dataframe.to_csv(csv_path, index=False)
    return csv_path


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Setup logging for tests."""
    from asce_et.utils.logger import Logger
    Logger.configure_for_testing()
    yield
