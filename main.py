"""Weather MCP server - OpenWeatherMap tools over stdio."""

import asyncio
import logging
import sys

from config import ConfigError, Settings, load_settings
from openweathermap import OpenWeatherMapClient
from server import create_server
from weather.dispatch import Dispatcher

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("weather-mcp")


def configure_logging(level: str = "INFO") -> None:
    """Send all logs to stderr; stdout carries the MCP protocol."""
    logging.basicConfig(stream=sys.stderr, level=level, format=LOG_FORMAT, force=True)
    # Request lines would otherwise log the API key in the query string
    logging.getLogger("httpx").setLevel(logging.WARNING)


async def serve(settings: Settings) -> None:
    async with OpenWeatherMapClient(settings.api_key, settings.base_url, settings.timeout) as client:
        server = create_server(Dispatcher(client))
        logger.info("Serving %d tools over stdio", len(await server.list_tools()))
        await server.run_stdio_async()


def main() -> None:
    """Main entry point."""
    configure_logging()
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level)
    asyncio.run(serve(settings))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
