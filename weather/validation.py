"""Location input validation and provider query construction."""

import re
from dataclasses import dataclass

from weather.outcome import InputError

COUNTRY_CODE_PATTERN = re.compile(r"[A-Z]{2}", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class LocationQuery:
    """A validated location. Only built by :func:`validate`."""

    city: str
    country_code: str | None = None

    @property
    def query(self) -> str:
        return build_query(self.city, self.country_code)


def build_query(city: str, country_code: str | None = None) -> str:
    """Compose the provider query string, e.g. ``London`` or ``London,UK``."""
    return city if country_code is None else f"{city},{country_code}"


def _is_city_char(ch: str) -> bool:
    return ch.isalpha() or ch.isspace() or ch == "-"


def validate(city: str, country_code: str | None = None) -> LocationQuery | InputError:
    """Check a city and optional country code.

    Rules are applied in order and the first failure is returned, so input
    violating several rules always reports the earliest one.
    """
    if not city or city.isspace():
        return InputError("city", "City name cannot be empty or whitespace.")

    if not all(_is_city_char(ch) for ch in city):
        return InputError("city", "City name can only contain letters, spaces, and hyphens.")

    if country_code is not None:
        if not country_code or country_code.isspace():
            return InputError("countryCode", "Country code cannot be empty or whitespace.")

        if not COUNTRY_CODE_PATTERN.fullmatch(country_code):
            return InputError(
                "countryCode",
                "Country code must be a 2-letter uppercase code (e.g., 'US', 'UK').",
            )
        country_code = country_code.upper()

    return LocationQuery(city=city.strip(), country_code=country_code)
