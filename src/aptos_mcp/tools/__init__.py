"""MCP tools for the Aptos MCP server.

This package provides the tool schemas, registry, response composition and
the handlers that implement each tool.
"""

from .guidance import GUIDANCE, compose
from .handlers import ToolDispatcher
from .registry import ToolRegistry
from .schemas import (
    ToolSchema,
    get_tool_schema,
    get_tool_schemas,
    TOOL_SCHEMAS,
)

__all__ = [
    "GUIDANCE",
    "compose",
    "ToolDispatcher",
    "ToolRegistry",
    "ToolSchema",
    "get_tool_schema",
    "get_tool_schemas",
    "TOOL_SCHEMAS",
]
