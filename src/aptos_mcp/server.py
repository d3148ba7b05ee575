"""MCP Server implementation for Aptos development resources.

This module implements the MCP server with stdio transport, logging setup,
and registration of tools, resources and prompts.
"""

import asyncio
import json
import logging
import sys
import time
from pathlib import Path
from typing import Any, Callable, Optional

from mcp.server.fastmcp import FastMCP

from .config import ServerConfig, load_config
from .constants import RESOURCE_URI_PREFIX, ErrorMessage
from .prompts import PROMPTS
from .resources.handlers import list_document_resources, read_document_resource
from .resources.store import ResourceStore
from .tools.handlers import ToolDispatcher
from .tools.registry import ToolRegistry
from .tools.schemas import TOOL_SCHEMAS

logger = logging.getLogger(__name__)


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def _static_prompt(text: str) -> Callable[[], str]:
    def render() -> str:
        return text
    return render


class MCPServer:
    """MCP Server exposing Aptos development guidance to AI assistants."""

    def __init__(self, config: Optional[ServerConfig] = None):
        """Initialize MCP Server.

        Args:
            config: Resolved server configuration (defaults are used if None)
        """
        self.config = config or ServerConfig()

        self._setup_logging()

        self.store = ResourceStore(self.config.docs_path)
        self.dispatcher = ToolDispatcher(self.config, self.store)
        self.tool_registry = ToolRegistry()
        self._registered = False

        self.mcp = FastMCP(
            name=self.config.name,
            instructions=self.config.description,
        )

        logger.info(f"Initialized {self.config.name} MCP Server v{self.config.version}")
        logger.info(f"Transport: {self.config.transport}")
        logger.info(f"Docs path: {self.config.docs_path}")

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def version(self) -> str:
        return self.config.version

    def _setup_logging(self) -> None:
        """Setup structured logging for the server."""
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, self.config.log_level.upper(), logging.INFO))
        root_logger.handlers.clear()

        if self.config.log_format == "json":
            formatter: logging.Formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )

        # stdout carries the MCP protocol
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if self.config.log_file:
            file_handler = logging.FileHandler(self.config.log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            logger.info(f"Logging to file: {self.config.log_file}")

    def _register_capabilities(self) -> None:
        """Register tools, resources and prompts with FastMCP."""
        if self._registered:
            return

        logger.info("Registering server capabilities...")

        for tool_name, handler in self.dispatcher.handlers().items():
            schema = TOOL_SCHEMAS[tool_name]
            description = schema.get("description", "")

            self.mcp.tool(name=tool_name, description=description)(handler)
            self.tool_registry.register(
                name=tool_name,
                handler=handler,
                schema=schema,
                version=self.config.version,
                description=description,
            )

        logger.info(f"✓ Registered {self.tool_registry.count_enabled()} tools")

        self._register_resources()
        self._register_prompts()
        self._registered = True

    def _register_resources(self) -> None:
        """Register the aptos://docs resources."""
        store = self.store

        @self.mcp.resource(f"{RESOURCE_URI_PREFIX}/list", mime_type="application/json")
        async def list_documents() -> list[dict[str, Any]]:
            """List all available Aptos documents."""
            return await list_document_resources(store)

        @self.mcp.resource(f"{RESOURCE_URI_PREFIX}/{{category}}/{{name}}", mime_type="text/markdown")
        async def read_document(category: str, name: str) -> str:
            """Read an Aptos document by category and name."""
            return await read_document_resource(store, category, name)

        logger.info("✓ Registered document resources")

    def _register_prompts(self) -> None:
        for prompt_name, (description, text) in PROMPTS.items():
            self.mcp.prompt(name=prompt_name, description=description)(_static_prompt(text))
        logger.info(f"✓ Registered {len(PROMPTS)} prompts")

    async def start(self) -> None:
        """Start the MCP server on stdio and serve until the client disconnects."""
        logger.info("Starting MCP server...")

        if self.config.transport != "stdio":
            raise ValueError(
                f"{ErrorMessage.UNSUPPORTED_TRANSPORT}: '{self.config.transport}'. "
                "Only 'stdio' is currently supported."
            )

        self._register_capabilities()

        try:
            logger.info("Server ready. Waiting for requests...")
            await self.mcp.run_stdio_async()
        except KeyboardInterrupt:
            logger.info("Received interrupt signal. Shutting down...")
        except Exception as e:
            logger.error(f"Server error: {e}", exc_info=True)
            raise
        finally:
            await self.stop()

    async def stop(self) -> None:
        logger.info("MCP server stopped")

    def get_capabilities(self) -> dict[str, Any]:
        """Get server capabilities declaration."""
        tools = {}
        for name in sorted(self.tool_registry.list_tools()):
            tool = self.tool_registry.get(name)
            tools[name] = {"version": tool.version, "description": tool.description}

        return {
            "server": {
                "name": self.config.name,
                "version": self.config.version,
                "description": self.config.description,
            },
            "capabilities": {
                "tools": tools,
                "resources": [
                    f"{RESOURCE_URI_PREFIX}/list",
                    f"{RESOURCE_URI_PREFIX}/{{category}}/{{name}}",
                ],
                "prompts": sorted(PROMPTS),
            },
        }


def create_server(
    config: Optional[ServerConfig] = None,
    config_file: Optional[Path] = None,
) -> MCPServer:
    """Factory function to create an MCP server instance.

    Args:
        config: Server configuration. If None, it is loaded from
                config/server.yaml and the environment
        config_file: Alternative YAML file to load

    Returns:
        MCPServer instance
    """
    if config is None:
        config = load_config(config_file)
    return MCPServer(config)


async def main() -> None:
    """Main entry point for running the MCP server."""
    try:
        server = create_server()
        await server.start()
    except Exception as e:
        logger.error(f"Failed to start server: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
