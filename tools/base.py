"""Tool registry base with decorator pattern."""

import argparse
import asyncio
from typing import Awaitable, Callable, TypeVar

from pydantic import BaseModel

from config import ConfigError, load_settings
from openweathermap import OpenWeatherMapClient
from weather.dispatch import Dispatcher

T = TypeVar("T", bound=BaseModel)

Handler = Callable[[T, Dispatcher], Awaitable[str]]

# Internal registry
_HANDLERS: dict[str, tuple[type[BaseModel], Handler]] = {}


def tool(model: type[T]) -> Callable[[Handler], Handler]:
    """Decorator to register a tool with its Pydantic model.

    Usage:
        @tool(GetCurrentWeather)
        async def get_current_weather(params: GetCurrentWeather, dispatcher: Dispatcher) -> str:
            ...
    """
    def decorator(func: Handler) -> Handler:
        _HANDLERS[model.__name__] = (model, func)
        return func
    return decorator


async def execute_tool(name: str, args: dict, dispatcher: Dispatcher) -> str:
    """Execute a tool by name with given arguments."""
    if name not in _HANDLERS:
        return f"Error: Unknown tool '{name}'"

    model_class, handler = _HANDLERS[name]
    try:
        params = model_class(**args)
    except Exception as e:
        return f"Error executing {name}: {e}"
    return await handler(params, dispatcher)


def get_tools() -> dict[str, tuple[type[BaseModel], Handler]]:
    """Get all registered tools keyed by model name."""
    return dict(_HANDLERS)


# ─── CLI mode ──────────────────────────────────────────────────────────────

def _build_parser(model: type[BaseModel]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=model.__doc__)
    for name, field in model.model_fields.items():
        parser.add_argument(
            f"--{name.replace('_', '-')}",
            dest=name,
            required=field.is_required(),
            default=None if field.is_required() else field.default,
            help=field.description,
        )
    return parser


async def _run_once(handler: Handler, params: BaseModel) -> str:
    settings = load_settings()
    async with OpenWeatherMapClient(settings.api_key, settings.base_url, settings.timeout) as client:
        return await handler(params, Dispatcher(client))


def run(model: type[T], handler: Handler, argv: list[str] | None = None) -> None:
    """Run a single tool from the command line and print its result."""
    args = _build_parser(model).parse_args(argv)
    params = model(**vars(args))
    try:
        print(asyncio.run(_run_once(handler, params)))
    except ConfigError as e:
        raise SystemExit(f"Configuration error: {e}")
