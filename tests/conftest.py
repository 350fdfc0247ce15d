"""Shared fixtures: sample payloads and a scriptable fake provider."""

from datetime import datetime, timedelta, timezone

import pytest

from weather.dispatch import Dispatcher
from weather.models import (
    Alert,
    CurrentWeather,
    Forecast,
    ForecastEntry,
    Precipitation,
    WeatherAlerts,
)

UTC = timezone.utc


def make_current_weather(city: str = "London", **overrides) -> CurrentWeather:
    fields = dict(
        city_name=city,
        temperature=20.5,
        humidity=65,
        pressure=1013,
        wind_speed=5.5,
        wind_direction=180,
        cloudiness=50,
        visibility=10000,
        rain_last_3h=Precipitation(millimeters=2.5),
        snow_last_3h=None,
        sunrise=datetime(2025, 7, 28, 6, 0, tzinfo=UTC),
        sunset=datetime(2025, 7, 28, 20, 0, tzinfo=UTC),
        condition_id=802,
        condition="Cloudy",
        description="Scattered clouds",
    )
    fields.update(overrides)
    return CurrentWeather(**fields)


def make_forecast_entry(timestamp: datetime, **overrides) -> ForecastEntry:
    fields = dict(
        timestamp=timestamp,
        temperature=22.0,
        humidity=70,
        pressure=1010,
        wind_speed=6.0,
        wind_direction=190,
        cloudiness=60,
        visibility=9000,
        condition_id=500,
        condition="Rain",
        description="Light rain",
    )
    fields.update(overrides)
    return ForecastEntry(**fields)


def make_forecast(city: str = "London", steps: int = 1) -> Forecast:
    start = datetime(2025, 7, 28, 12, 0, tzinfo=UTC)
    entries = tuple(make_forecast_entry(start + timedelta(hours=3 * i)) for i in range(steps))
    return Forecast(city_name=city, entries=entries)


def make_alerts() -> WeatherAlerts:
    return WeatherAlerts(
        alerts=(
            Alert(
                start=datetime(2025, 7, 28, 10, 0, tzinfo=UTC),
                end=datetime(2025, 7, 28, 14, 0, tzinfo=UTC),
                event="Storm Warning",
                description="Severe thunderstorm expected",
                sender="National Weather Service",
            ),
        )
    )


class FakeProvider:
    """Provider double. Each result is a value, an exception to raise, or a callable of the query."""

    def __init__(self, current=None, forecast=None, alerts=None) -> None:
        self.results = {"current": current, "forecast": forecast, "alerts": alerts}
        self.calls: list[tuple] = []

    async def _resolve(self, kind: str, query: str):
        result = self.results[kind]
        if callable(result) and not isinstance(result, type):
            result = result(query)
            if hasattr(result, "__await__"):
                result = await result
        if isinstance(result, BaseException):
            raise result
        return result

    async def current_weather(self, query: str):
        self.calls.append(("current", query))
        return await self._resolve("current", query)

    async def forecast(self, query: str, max_entries: int):
        self.calls.append(("forecast", query, max_entries))
        return await self._resolve("forecast", query)

    async def alerts(self, query: str, exclude):
        self.calls.append(("alerts", query, frozenset(exclude)))
        return await self._resolve("alerts", query)


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider(
        current=lambda query: make_current_weather(query.split(",")[0]),
        forecast=lambda query: make_forecast(query.split(",")[0]),
        alerts=make_alerts(),
    )


@pytest.fixture
def dispatcher(provider: FakeProvider) -> Dispatcher:
    return Dispatcher(provider)
