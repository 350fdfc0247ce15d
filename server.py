"""MCP server exposing the registered tools over stdio."""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from tools import execute_tool, get_tools
from weather.dispatch import Dispatcher

SERVER_NAME = "Weather"


def _bind(model_name: str, dispatcher: Dispatcher):
    """Wrap a registry tool as a plain async function FastMCP can introspect.

    Parameters are published as ``city`` and ``countryCode``.
    """

    async def call(
        city: Annotated[str, Field(description="The city name to get weather for")],
        countryCode: Annotated[
            str | None, Field(description="Optional: Country code (e.g., 'US', 'UK')")
        ] = None,
    ) -> str:
        return await execute_tool(model_name, {"city": city, "country_code": countryCode}, dispatcher)

    return call


def create_server(dispatcher: Dispatcher) -> FastMCP:
    """Build a FastMCP server with one tool per registry entry."""
    mcp = FastMCP(SERVER_NAME)
    for model_name, (model, handler) in get_tools().items():
        mcp.add_tool(
            _bind(model_name, dispatcher),
            name=handler.__name__,
            description=model.__doc__,
        )
    return mcp
