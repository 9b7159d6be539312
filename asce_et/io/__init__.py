"""Input/Output module for the ASCE reference ET package."""

from .weather_table import WeatherTable, read_weather_table

__all__ = [
    'WeatherTable',
    'read_weather_table',
]
