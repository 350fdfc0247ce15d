#!/usr/bin/env python3
"""Weather tools backed by OpenWeatherMap.

CLI:
    uv run weather --city London --country-code UK
    uv run forecast --city Paris
    uv run weather-alerts --city Miami --country-code US

Tool: Registered as GetCurrentWeather, GetWeatherForecast, GetWeatherAlerts
"""

from pydantic import BaseModel, Field

from openweathermap import FORECAST_MAX_ENTRIES
from tools.base import run, tool
from weather.dispatch import Dispatcher
from weather.formatting import format_response

# One Call sections left out of alert lookups
ALERTS_EXCLUDE = frozenset({"current", "minutely", "hourly", "daily"})


class LocationParams(BaseModel):
    city: str = Field(description="The city name to get weather for")
    country_code: str | None = Field(default=None, description="Optional: Country code (e.g., 'US', 'UK')")


class GetCurrentWeather(LocationParams):
    """Gets current weather conditions for the specified city."""


class GetWeatherForecast(LocationParams):
    """Gets weather forecast for the specified city."""


class GetWeatherAlerts(LocationParams):
    """Gets weather alerts for the specified city."""


@tool(GetCurrentWeather)
async def get_current_weather(params: GetCurrentWeather, dispatcher: Dispatcher) -> str:
    return await dispatcher.run(
        params.city,
        params.country_code,
        dispatcher.provider.current_weather,
        format_response,
    )


@tool(GetWeatherForecast)
async def get_weather_forecast(params: GetWeatherForecast, dispatcher: Dispatcher) -> str:
    async def call(query: str):
        return await dispatcher.provider.forecast(query, FORECAST_MAX_ENTRIES)

    return await dispatcher.run(params.city, params.country_code, call, format_response)


@tool(GetWeatherAlerts)
async def get_weather_alerts(params: GetWeatherAlerts, dispatcher: Dispatcher) -> str:
    async def call(query: str):
        return await dispatcher.provider.alerts(query, ALERTS_EXCLUDE)

    return await dispatcher.run(params.city, params.country_code, call, format_response)


# ─── CLI ───────────────────────────────────────────────────────────────────

def main() -> None:
    """CLI entry point for current weather."""
    run(GetCurrentWeather, get_current_weather)


def forecast_main() -> None:
    run(GetWeatherForecast, get_weather_forecast)


def alerts_main() -> None:
    run(GetWeatherAlerts, get_weather_alerts)


if __name__ == "__main__":
    main()
