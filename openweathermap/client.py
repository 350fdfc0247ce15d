"""OpenWeatherMap API client."""

from datetime import datetime, timedelta, timezone
from typing import Any, Iterable

import httpx

from weather.models import (
    Alert,
    CurrentWeather,
    Forecast,
    ForecastEntry,
    Precipitation,
    WeatherAlerts,
)
from weather.provider import LocationNotFoundError, ProviderError

API_BASE = "https://api.openweathermap.org"

# The 5 day / 3 hour forecast never returns more than this many steps
FORECAST_MAX_ENTRIES = 40


def _local_time(timestamp: int, offset_seconds: int) -> datetime:
    """Convert a unix timestamp to an aware datetime at the location's UTC offset."""
    tz = timezone(timedelta(seconds=offset_seconds))
    return datetime.fromtimestamp(timestamp, tz)


def _precipitation(data: dict[str, Any], key: str) -> Precipitation | None:
    if key not in data:
        return None
    volume = data[key] or {}
    return Precipitation(millimeters=volume.get("3h"))


def _conditions(data: dict[str, Any]) -> dict[str, Any]:
    """Fields shared by /weather and /forecast list items."""
    main = data.get("main", {})
    wind = data.get("wind", {})
    weather = (data.get("weather") or [{}])[0]
    return {
        "temperature": main.get("temp", 0),
        "humidity": main.get("humidity", 0),
        "pressure": main.get("pressure", 0),
        "wind_speed": wind.get("speed", 0),
        "wind_direction": wind.get("deg", 0),
        "cloudiness": data.get("clouds", {}).get("all", 0),
        "visibility": data.get("visibility", 0),
        "rain_last_3h": _precipitation(data, "rain"),
        "snow_last_3h": _precipitation(data, "snow"),
        "condition_id": weather.get("id", 0),
        "condition": weather.get("main", ""),
        "description": weather.get("description", ""),
    }


def parse_current_weather(data: dict[str, Any]) -> CurrentWeather:
    offset = data.get("timezone", 0)
    sun = data.get("sys", {})
    return CurrentWeather(
        city_name=data.get("name", ""),
        sunrise=_local_time(sun.get("sunrise", 0), offset),
        sunset=_local_time(sun.get("sunset", 0), offset),
        **_conditions(data),
    )


def parse_forecast(data: dict[str, Any]) -> Forecast:
    city = data.get("city", {})
    offset = city.get("timezone", 0)
    entries = tuple(
        ForecastEntry(timestamp=_local_time(item["dt"], offset), **_conditions(item))
        for item in data.get("list", [])
    )
    return Forecast(city_name=city.get("name", ""), entries=entries)


def parse_alerts(data: dict[str, Any]) -> WeatherAlerts:
    offset = data.get("timezone_offset", 0)
    alerts = tuple(
        Alert(
            start=_local_time(item["start"], offset),
            end=_local_time(item["end"], offset),
            event=item.get("event", ""),
            description=item.get("description", ""),
            sender=item.get("sender_name", ""),
        )
        for item in data.get("alerts", [])
    )
    return WeatherAlerts(alerts=alerts)


class OpenWeatherMapClient:
    """Async OpenWeatherMap client returning metric weather payloads.

    One instance shares a single connection pool and is safe to use from
    concurrent tasks. Use as an async context manager or call :meth:`aclose`.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = API_BASE,
        timeout: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "OpenWeatherMapClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, endpoint: str, params: dict[str, Any]) -> Any:
        """GET an endpoint and return its decoded JSON body, or None if empty."""
        response = await self._http.get(
            endpoint,
            params={**params, "appid": self.api_key},
        )

        if response.is_error:
            message = response.reason_phrase
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                message = body.get("message") or message
            if response.status_code == 404:
                raise LocationNotFoundError(404, message)
            raise ProviderError(response.status_code, message)

        return response.json() if response.content else None

    async def current_weather(self, query: str) -> CurrentWeather | None:
        """Current conditions for a ``city`` or ``city,CC`` query."""
        data = await self._request("/data/2.5/weather", {"q": query, "units": "metric"})
        return parse_current_weather(data) if data else None

    async def forecast(self, query: str, max_entries: int = FORECAST_MAX_ENTRIES) -> Forecast | None:
        """3-hourly forecast, capped at what the API offers."""
        data = await self._request(
            "/data/2.5/forecast",
            {"q": query, "units": "metric", "cnt": min(max_entries, FORECAST_MAX_ENTRIES)},
        )
        return parse_forecast(data) if data else None

    async def geocode(self, query: str) -> tuple[float, float]:
        """Resolve a query to (lat, lon) using the first geocoding match."""
        results = await self._request("/geo/1.0/direct", {"q": query, "limit": 1})
        if not results:
            raise LocationNotFoundError(404, "city not found")
        return results[0]["lat"], results[0]["lon"]

    async def alerts(self, query: str, exclude: Iterable[str] = ()) -> WeatherAlerts | None:
        """Active alerts from the One Call API, skipping the excluded sections."""
        lat, lon = await self.geocode(query)
        params: dict[str, Any] = {"lat": lat, "lon": lon, "units": "metric"}
        excluded = sorted(exclude)
        if excluded:
            params["exclude"] = ",".join(excluded)
        data = await self._request("/data/3.0/onecall", params)
        return parse_alerts(data) if data else None
