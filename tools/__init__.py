"""Tool registry and execution.

Importing this package registers every tool module with the registry.
"""

from tools import weather  # noqa: F401  (registers weather tools)
from tools.base import execute_tool, get_tools, tool

__all__ = ["execute_tool", "get_tools", "tool"]
