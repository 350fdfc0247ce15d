"""Plain-text rendering of weather payloads."""

from weather.models import Conditions, CurrentWeather, Forecast, WeatherAlerts, WeatherPayload

SEPARATOR = "-" * 40
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
TIME_OF_DAY_FORMAT = "%H:%M:%S"


def _num(value: float) -> str:
    """Render a measurement without rounding; integral values drop the ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _condition_lines(conditions: Conditions) -> list[str]:
    lines = [
        f"Temperature: {_num(conditions.temperature)}°C",
        f"Humidity: {_num(conditions.humidity)}%",
        f"Pressure: {_num(conditions.pressure)} hPa",
        f"Wind Speed: {_num(conditions.wind_speed)} m/s",
        f"Wind Direction: {_num(conditions.wind_direction)}°",
        f"Cloudiness: {_num(conditions.cloudiness)}%",
        f"Visibility: {_num(conditions.visibility)} m",
    ]

    # Present-but-empty volumes still get a line, shown as 0
    if conditions.rain_last_3h is not None:
        lines.append(f"Rain: {_num(conditions.rain_last_3h.millimeters or 0)} mm (last 3 hours)")
    if conditions.snow_last_3h is not None:
        lines.append(f"Snow: {_num(conditions.snow_last_3h.millimeters or 0)} mm (last 3 hours)")

    return lines


def _format_current(weather: CurrentWeather) -> list[str]:
    lines = [f"Current weather in {weather.city_name}:"]
    lines.extend(_condition_lines(weather))
    lines.append(f"Sunrise: {weather.sunrise.strftime(TIME_OF_DAY_FORMAT)}")
    lines.append(f"Sunset: {weather.sunset.strftime(TIME_OF_DAY_FORMAT)}")
    lines.append(f"Condition: {weather.condition}")
    lines.append(f"Description: {weather.description}")
    return lines


def _format_forecast(forecast: Forecast) -> list[str]:
    lines = [f"5-Day Weather Forecast for {forecast.city_name}:"]
    for entry in forecast.entries:
        lines.append(SEPARATOR)
        lines.append(f"Time: {entry.timestamp.strftime(TIMESTAMP_FORMAT)}")
        lines.extend(_condition_lines(entry))
        lines.append(f"Condition: {entry.condition}")
        lines.append(f"Description: {entry.description}")
    return lines


def _format_alerts(alerts: WeatherAlerts) -> list[str]:
    lines = ["Weather Alerts:"]
    for alert in alerts.alerts:
        lines.append(SEPARATOR)
        lines.append(f"Start: {alert.start.strftime(TIMESTAMP_FORMAT)}")
        lines.append(f"End: {alert.end.strftime(TIMESTAMP_FORMAT)}")
        lines.append(f"Event: {alert.event}")
        lines.append(f"Description: {alert.description}")
        lines.append(f"Sender: {alert.sender}")
    return lines


def format_response(payload: WeatherPayload) -> str:
    """Render a provider payload as multi-line text.

    Raises:
        TypeError: If the payload is not a supported weather shape.
    """
    match payload:
        case CurrentWeather():
            lines = _format_current(payload)
        case Forecast():
            lines = _format_forecast(payload)
        case WeatherAlerts():
            lines = _format_alerts(payload)
        case _:
            raise TypeError(f"Response type {type(payload).__name__} is not supported.")

    return "".join(f"{line}\n" for line in lines)
