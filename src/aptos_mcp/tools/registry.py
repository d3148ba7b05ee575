"""Tool registry for the Aptos MCP server.

Keeps track of the tools registered with FastMCP together with their
schemas, so the server can report what it exposes.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass
class ToolMetadata:
    """Metadata for a registered tool."""

    name: str
    version: str
    handler: Callable
    schema: dict[str, Any]
    enabled: bool = True
    description: str | None = None


class ToolRegistry:
    """Registry for managing MCP tools."""

    def __init__(self):
        self._tools: dict[str, ToolMetadata] = {}

    def register(
        self,
        name: str,
        handler: Callable,
        schema: dict[str, Any],
        version: str = "1.0.0",
        description: str | None = None,
        enabled: bool = True,
    ) -> None:
        """Register a tool in the registry.

        Args:
            name: Tool name (must be unique)
            handler: Callable function that implements the tool
            schema: JSON Schema for the tool parameters
            version: Tool version (default: "1.0.0")
            description: Tool description
            enabled: Whether the tool is enabled (default: True)

        Raises:
            ValueError: If tool name already exists with another version
        """
        if name in self._tools:
            existing = self._tools[name]
            if existing.version == version:
                logger.warning(
                    f"Tool '{name}' v{version} already registered. "
                    "Skipping duplicate registration."
                )
                return
            raise ValueError(
                f"Tool '{name}' already registered with version "
                f"{existing.version}. Cannot register version {version}."
            )

        self._tools[name] = ToolMetadata(
            name=name,
            version=version,
            handler=handler,
            schema=schema,
            enabled=enabled,
            description=description or schema.get("description", ""),
        )
        logger.debug(f"Registered tool: {name} v{version} (enabled={enabled})")

    def get(self, name: str) -> ToolMetadata | None:
        return self._tools.get(name)

    def list_tools(self, enabled_only: bool = True) -> list[str]:
        if enabled_only:
            return [name for name, tool in self._tools.items() if tool.enabled]
        return list(self._tools.keys())

    def count_enabled(self) -> int:
        return sum(1 for tool in self._tools.values() if tool.enabled)
