"""Constants for the Aptos MCP server.

This module defines the closed sets (categories, operation kinds, tool
enums), error codes and error messages used throughout the server to avoid
magic strings.
"""

from enum import Enum
from typing import Any, Mapping


class Category(str, Enum):
    """Document categories. Each one is a directory under the docs root."""

    HOW_TO = "how_to"
    FRONTEND = "frontend"
    MOVE = "move"
    MANAGEMENT = "management"


class OperationKind(str, Enum):
    """Which trailing guidance block a response gets."""

    LIST_RESOURCES = "list_resources"
    SPECIFIC_RESOURCE = "specific_resource"
    SPECIFIC_RESOURCE_BY_NAME = "specific_resource_by_name"
    AUTO_SELECTED = "auto_selected"
    NO_MATCH = "no_match"
    MULTIPLE_MATCHES = "multiple_matches"
    OVERVIEW = "overview"
    BUILD_SMART_CONTRACT = "build_smart_contract"
    BUILD_FRONTEND = "build_frontend"
    BUILD_DAPP = "build_dapp"


class DevelopmentContext(str, Enum):
    """Areas accepted by debug_aptos_issue."""

    MOVE_CONTRACT = "move_contract"
    FRONTEND_INTEGRATION = "frontend_integration"
    WALLET_CONNECTION = "wallet_connection"
    TRANSACTION_SIGNING = "transaction_signing"
    API_SETUP = "api_setup"
    DEPLOYMENT = "deployment"
    OTHER = "other"


class ImplementationArea(str, Enum):
    """Areas accepted by validate_current_implementation."""

    MOVE_CONTRACT = "move_contract"
    WALLET_INTEGRATION = "wallet_integration"
    TRANSACTION_HANDLING = "transaction_handling"
    API_CONFIGURATION = "api_configuration"
    FRONTEND_SETUP = "frontend_setup"
    FULL_STACK = "full_stack"


class DeploymentTarget(str, Enum):
    """Networks accepted by pre_deployment_checklist."""

    TESTNET = "testnet"
    MAINNET = "mainnet"


class ErrorCode(str, Enum):
    """Error code identifiers for error categorization."""

    INVALID_PARAMETERS = "INVALID_PARAMETERS"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class ErrorMessage:
    """Error message templates."""

    MISSING_PARAMETER = "Missing required parameter"
    INVALID_TYPE = "Invalid parameter type"
    INVALID_ENUM = "Invalid parameter value"
    UNKNOWN_PARAMETER = "Unknown parameter"
    RESOURCE_NOT_FOUND = "Resource not found"
    UNKNOWN_CATEGORY = "Unknown document category"
    UNSUPPORTED_TRANSPORT = "Transport type not supported"
    UNEXPECTED_ERROR = "Unexpected error occurred"


DOCUMENT_EXTENSION = ".md"
RESOURCE_URI_PREFIX = "aptos://docs"


def require_exhaustive(mapping: Mapping[Any, Any], enum_type: type[Enum]) -> None:
    """Fail at import time when a lookup table does not cover an enum.

    Raises:
        RuntimeError: If any member is missing or an unknown key is present
    """
    missing = [member.value for member in enum_type if member not in mapping]
    extra = [key for key in mapping if not isinstance(key, enum_type)]
    if missing or extra:
        raise RuntimeError(
            f"Table for {enum_type.__name__} is not exhaustive "
            f"(missing={missing}, unexpected={extra})"
        )
