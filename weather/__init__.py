"""Weather query pipeline: validation, dispatch and formatting."""

from weather.dispatch import Dispatcher
from weather.formatting import format_response
from weather.validation import LocationQuery, build_query, validate

__all__ = ["Dispatcher", "LocationQuery", "build_query", "format_response", "validate"]
