"""MCP server exposing Aptos development resources to AI coding assistants."""

from .config import ServerConfig, load_config
from .constants import Category, ErrorCode, ErrorMessage, OperationKind
from .decorators import handle_errors
from .errors import (
    AptosMCPError,
    InvalidParametersError,
    ResourceNotFoundError,
    UnknownCategoryError,
)
from .server import MCPServer, create_server

__all__ = [
    "ServerConfig",
    "load_config",
    "Category",
    "ErrorCode",
    "ErrorMessage",
    "OperationKind",
    "handle_errors",
    "AptosMCPError",
    "InvalidParametersError",
    "ResourceNotFoundError",
    "UnknownCategoryError",
    "MCPServer",
    "create_server",
]
