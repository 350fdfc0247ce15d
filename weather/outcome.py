"""Classified results of a single weather lookup."""

import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    payload: T


@dataclass(frozen=True)
class InputError:
    """Rejected user input. ``field`` names the offending parameter."""

    field: str
    message: str


@dataclass(frozen=True)
class NotFound:
    city: str
    message: str


@dataclass(frozen=True)
class ProviderFailure:
    city: str
    status_code: int
    message: str


@dataclass(frozen=True)
class NullResponse:
    city: str


@dataclass(frozen=True)
class Unexpected:
    city: str
    message: str
    error: Exception | None = field(default=None, compare=False, repr=False)


Outcome = Success | InputError | NotFound | ProviderFailure | NullResponse | Unexpected


def log_level(outcome: Outcome) -> int:
    """Severity of the terminal log event for an outcome."""
    match outcome:
        case Success():
            return logging.INFO
        case InputError() | NotFound():
            return logging.WARNING
        case ProviderFailure() | NullResponse() | Unexpected():
            return logging.ERROR
    raise TypeError(f"Unsupported outcome: {type(outcome).__name__}")


def error_text(outcome: Outcome) -> str:
    """User-facing text for a failed outcome."""
    match outcome:
        case InputError(message=message):
            return message
        case NotFound(city=city):
            return f"City '{city}' not found. Please check the name and try again."
        case ProviderFailure(city=city, status_code=status, message=message):
            return f"Invalid request for city '{city}'. Response code: {status} Error details: {message}"
        case NullResponse(city=city):
            return f"Error retrieving weather data for {city}."
        case Unexpected(city=city, message=message):
            return f"Error retrieving weather data for {city}. Error details: {message}"
    raise TypeError(f"Not an error outcome: {type(outcome).__name__}")
