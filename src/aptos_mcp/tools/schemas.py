"""Tool schema definitions for the Aptos MCP server.

This module defines JSON Schema schemas for all MCP tools and validates
tool parameters against them before any handler logic runs.
"""

from typing import Any

from ..constants import (
    DeploymentTarget,
    DevelopmentContext,
    ErrorMessage,
    ImplementationArea,
)
from ..errors import InvalidParametersError

_NO_PARAMETERS: dict[str, Any] = {"type": "object", "properties": {}, "required": []}

# Tool schema definitions following JSON Schema specification
TOOL_SCHEMAS: dict[str, dict[str, Any]] = {
    "get_mcp_version": {
        "name": "get_mcp_version",
        "description": "Returns the version of the MCP server",
        "inputSchema": _NO_PARAMETERS,
    },
    "build_smart_contract_on_aptos": {
        "name": "build_smart_contract_on_aptos",
        "description": (
            "Build an Aptos smart contract - returns all resources from move and "
            "management directories. Use this tool when you need guidance on how to "
            "build a smart contract for a dapp on Aptos."
        ),
        "inputSchema": _NO_PARAMETERS,
    },
    "build_ui_frontend_on_aptos": {
        "name": "build_ui_frontend_on_aptos",
        "description": (
            "Build a UI frontend for Aptos dApp - returns all resources from frontend "
            "directory. Use this tool when you need guidance on how to build a "
            "frontend for a dapp on Aptos."
        ),
        "inputSchema": _NO_PARAMETERS,
    },
    "build_dapp_on_aptos": {
        "name": "build_dapp_on_aptos",
        "description": (
            "Build a complete full-stack Aptos dApp - returns all resources from move, "
            "management, and frontend directories. Use this tool when you need guidance "
            "on how to build a full-stack dapp on Aptos."
        ),
        "inputSchema": _NO_PARAMETERS,
    },
    "debug_aptos_issue": {
        "name": "debug_aptos_issue",
        "description": (
            "🚨 CRITICAL: Use this when you're stuck or encountering errors in Aptos "
            "development. Provide your current code/error and get targeted "
            "Aptos-specific guidance. This helps avoid getting stuck in debugging "
            "loops with outdated knowledge."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "issue_description": {
                    "type": "string",
                    "description": "Describe the specific problem, error message, or what you're trying to achieve",
                },
                "current_code": {
                    "type": "string",
                    "description": "Relevant code snippet that's causing issues",
                },
                "error_message": {
                    "type": "string",
                    "description": "Exact error message if any",
                },
                "context": {
                    "type": "string",
                    "enum": [c.value for c in DevelopmentContext],
                    "description": "What area of Aptos development this relates to",
                },
            },
            "required": ["issue_description", "context"],
        },
    },
    "validate_current_implementation": {
        "name": "validate_current_implementation",
        "description": (
            "🔍 Validate your current Aptos implementation against best practices. "
            "Use this regularly to ensure you're following Aptos patterns correctly "
            "and haven't drifted to generic blockchain approaches."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "implementation_area": {
                    "type": "string",
                    "enum": [a.value for a in ImplementationArea],
                    "description": "What part of your implementation to validate",
                },
                "specific_concern": {
                    "type": "string",
                    "description": "Any specific concern or pattern you want to validate",
                },
                "current_approach": {
                    "type": "string",
                    "description": "Brief description of your current implementation approach",
                },
            },
            "required": ["implementation_area"],
        },
    },
    "pre_deployment_checklist": {
        "name": "pre_deployment_checklist",
        "description": (
            "📋 Complete pre-deployment checklist for Aptos dApps. Use this before "
            "deploying to ensure you haven't missed any Aptos-specific requirements "
            "or best practices."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "deployment_target": {
                    "type": "string",
                    "enum": [t.value for t in DeploymentTarget],
                    "description": "Which network you're deploying to",
                },
            },
            "required": ["deployment_target"],
        },
    },
    "list_aptos_resources": {
        "name": "list_aptos_resources",
        "description": (
            "Get a list of all available Aptos development resources. Use this first "
            "to see what guidance is available, then use get_specific_aptos_resource "
            "to fetch the relevant one."
        ),
        "inputSchema": _NO_PARAMETERS,
    },
    "get_specific_aptos_resource": {
        "name": "get_specific_aptos_resource",
        "description": (
            "Retrieve a specific Aptos development resource by its exact filename "
            "(without .md extension)."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "filename": {
                    "type": "string",
                    "description": (
                        "Exact filename of the resource (e.g., 'how_to_add_wallet_connection', "
                        "'how_to_config_a_full_node_api_key_in_a_dapp', "
                        "'how_to_integrate_fungible_asset')"
                    ),
                },
            },
            "required": ["filename"],
        },
    },
    "get_aptos_resources": {
        "name": "get_aptos_resources",
        "description": (
            "Use this when you need guidance on any specific aspect of Aptos resources "
            "for development - the tool will automatically identify and return the "
            "most relevant resources."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "context": {
                    "type": "string",
                    "description": (
                        "The context or what you're trying to accomplish (e.g., 'gas station', "
                        "'no code indexer', etc.). If not provided, returns available "
                        "resources overview."
                    ),
                },
                "specific_resource": {
                    "type": "string",
                    "description": (
                        "If you know the exact resource name, specify it here "
                        "(without .md extension)"
                    ),
                },
            },
            "required": [],
        },
    },
}

_JSON_TYPES: dict[str, type] = {
    "string": str,
    "boolean": bool,
    "object": dict,
    "array": list,
}


class ToolSchema:
    """Tool schema wrapper for easier access."""

    def __init__(self, name: str, schema: dict[str, Any]):
        """Initialize tool schema.

        Args:
            name: Tool name
            schema: JSON Schema dictionary
        """
        self.name = name
        self.schema = schema
        self.description = schema.get("description", "")
        self.input_schema = schema.get("inputSchema", {})

    def get_required_params(self) -> list[str]:
        return self.input_schema.get("required", [])

    def get_properties(self) -> dict[str, Any]:
        return self.input_schema.get("properties", {})

    def validate_required(self, params: dict[str, Any]) -> tuple[bool, list[str]]:
        """Validate that all required parameters are present.

        Args:
            params: Parameters dictionary

        Returns:
            Tuple of (is_valid, missing_params)
        """
        required = self.get_required_params()
        missing = [param for param in required if params.get(param) is None]
        return len(missing) == 0, missing

    def validate(self, params: dict[str, Any]) -> None:
        """Validate parameters against the schema.

        Optional parameters passed as None are treated as absent.

        Args:
            params: Parameters dictionary

        Raises:
            InvalidParametersError: If any parameter is missing, unknown,
                of the wrong type or outside its enum
        """
        problems: list[str] = []

        _, missing = self.validate_required(params)
        problems.extend(f"{ErrorMessage.MISSING_PARAMETER}: '{p}'" for p in missing)

        properties = self.get_properties()
        for key, value in params.items():
            if value is None:
                continue
            spec = properties.get(key)
            if spec is None:
                problems.append(f"{ErrorMessage.UNKNOWN_PARAMETER}: '{key}'")
                continue

            expected = _JSON_TYPES.get(spec.get("type", ""))
            if expected is not None and not isinstance(value, expected):
                problems.append(
                    f"{ErrorMessage.INVALID_TYPE}: '{key}' must be {spec['type']}"
                )
                continue

            allowed = spec.get("enum")
            if allowed is not None and value not in allowed:
                problems.append(
                    f"{ErrorMessage.INVALID_ENUM}: '{key}' must be one of {', '.join(allowed)}"
                )

        if problems:
            raise InvalidParametersError(self.name, problems)


def get_tool_schema(name: str) -> ToolSchema | None:
    """Get tool schema by name.

    Args:
        name: Tool name

    Returns:
        ToolSchema instance if found, None otherwise
    """
    if name not in TOOL_SCHEMAS:
        return None
    return ToolSchema(name, TOOL_SCHEMAS[name])


def get_tool_schemas() -> dict[str, ToolSchema]:
    return {
        name: ToolSchema(name, schema)
        for name, schema in TOOL_SCHEMAS.items()
    }
