"""OpenWeatherMap integration module."""

from openweathermap.client import FORECAST_MAX_ENTRIES, OpenWeatherMapClient

__all__ = ["FORECAST_MAX_ENTRIES", "OpenWeatherMapClient"]
