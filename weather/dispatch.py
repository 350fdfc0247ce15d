"""Runs one weather lookup from raw user input to text."""

import logging
from typing import Awaitable, Callable, TypeVar

from weather.outcome import (
    InputError,
    NotFound,
    NullResponse,
    Outcome,
    ProviderFailure,
    Success,
    Unexpected,
    error_text,
    log_level,
)
from weather.provider import LocationNotFoundError, ProviderError, WeatherProvider
from weather.validation import LocationQuery, validate

T = TypeVar("T")

ProviderCall = Callable[[str], Awaitable[T | None]]


class Dispatcher:
    """Validates input, calls the provider and turns the result into text.

    Holds no per-call state, so one instance serves concurrent lookups.
    """

    def __init__(self, provider: WeatherProvider, logger: logging.Logger | None = None) -> None:
        self.provider = provider
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    async def classify(location: LocationQuery, provider_call: ProviderCall[T]) -> Outcome:
        """Call the provider for a validated location and classify the result."""
        city = location.city
        try:
            payload = await provider_call(location.query)
        except LocationNotFoundError as e:
            return NotFound(city, e.message)
        except ProviderError as e:
            return ProviderFailure(city, e.status_code, e.message)
        except Exception as e:
            return Unexpected(city, str(e), error=e)

        if payload is None:
            return NullResponse(city)
        return Success(payload)

    def _log_outcome(self, outcome: Outcome, city: str) -> None:
        level = log_level(outcome)
        match outcome:
            case Success():
                self.logger.log(level, "Successfully retrieved weather data for %s", city)
            case InputError(field=field, message=message):
                self.logger.log(level, "Invalid input for %s: %s", field, message)
            case NotFound(message=message):
                self.logger.log(level, "City %s not found: %s", city, message)
            case ProviderFailure(status_code=status, message=message):
                self.logger.log(level, "Invalid request for city %s (status %s): %s", city, status, message)
            case NullResponse():
                self.logger.log(level, "Null response received for city %s", city)
            case Unexpected(error=error):
                self.logger.log(level, "Failed to retrieve weather data for %s", city, exc_info=error)

    async def run(
        self,
        city: str,
        country_code: str | None,
        provider_call: ProviderCall[T],
        formatter: Callable[[T], str],
    ) -> str:
        """Run a lookup and return the formatted payload or an error message.

        Never raises for bad input or provider failures. Cancellation of the
        awaiting task propagates into the provider call.
        """
        checked = validate(city, country_code)
        if isinstance(checked, InputError):
            self._log_outcome(checked, city)
            return checked.message

        self.logger.info("Getting weather data for %s, %s", checked.city, checked.country_code or "")
        self.logger.debug("Formatted query string: %s", checked.query)

        outcome = await self.classify(checked, provider_call)
        self._log_outcome(outcome, checked.city)

        if isinstance(outcome, Success):
            return formatter(outcome.payload)
        return error_text(outcome)
