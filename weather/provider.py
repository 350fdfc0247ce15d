"""Weather provider interface and its error types."""

from typing import Iterable, Protocol

from weather.models import CurrentWeather, Forecast, WeatherAlerts


class ProviderError(Exception):
    """Provider was reached but rejected or failed the request."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class LocationNotFoundError(ProviderError):
    """Raised when the provider knows no such location."""

    pass


class WeatherProvider(Protocol):
    """Async weather data source. Implementations must tolerate concurrent calls."""

    async def current_weather(self, query: str) -> CurrentWeather | None: ...

    async def forecast(self, query: str, max_entries: int) -> Forecast | None: ...

    async def alerts(self, query: str, exclude: Iterable[str]) -> WeatherAlerts | None: ...
