"""Weather payloads returned by a provider."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Precipitation(_Frozen):
    """Rain or snow volume. ``millimeters`` is None when reported without an amount."""

    millimeters: float | None = None


class Conditions(_Frozen):
    """Measurements shared by current readings and forecast entries."""

    temperature: float
    humidity: float
    pressure: float
    wind_speed: float
    wind_direction: float
    cloudiness: float
    visibility: float
    rain_last_3h: Precipitation | None = None
    snow_last_3h: Precipitation | None = None
    condition_id: int
    condition: str
    description: str


class CurrentWeather(Conditions):
    """Current conditions for a city."""

    city_name: str
    sunrise: datetime
    sunset: datetime


class ForecastEntry(Conditions):
    """One forecast step."""

    timestamp: datetime


class Forecast(_Frozen):
    """Forecast entries for a city, in provider order."""

    city_name: str
    entries: tuple[ForecastEntry, ...] = ()


class Alert(_Frozen):
    start: datetime
    end: datetime
    event: str
    description: str
    sender: str


class WeatherAlerts(_Frozen):
    """Active alerts for a location, in provider order."""

    alerts: tuple[Alert, ...] = ()


WeatherPayload = CurrentWeather | Forecast | WeatherAlerts
