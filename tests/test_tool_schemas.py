"""Tests for tool schemas and parameter validation."""

import pytest

from src.aptos_mcp.errors import InvalidParametersError
from src.aptos_mcp.tools.schemas import (
    TOOL_SCHEMAS,
    ToolSchema,
    get_tool_schema,
    get_tool_schemas,
)

EXPECTED_TOOLS = {
    "get_mcp_version",
    "build_smart_contract_on_aptos",
    "build_ui_frontend_on_aptos",
    "build_dapp_on_aptos",
    "debug_aptos_issue",
    "validate_current_implementation",
    "pre_deployment_checklist",
    "list_aptos_resources",
    "get_specific_aptos_resource",
    "get_aptos_resources",
}


@pytest.mark.unit
class TestToolSchemas:
    """Test schema definitions."""

    def test_all_tools_defined(self):
        assert set(TOOL_SCHEMAS) == EXPECTED_TOOLS

    def test_schema_structure(self):
        for name, schema in TOOL_SCHEMAS.items():
            assert schema["name"] == name
            assert schema["description"]
            assert schema["inputSchema"]["type"] == "object"
            for required in schema["inputSchema"]["required"]:
                assert required in schema["inputSchema"]["properties"]

    def test_get_tool_schema(self):
        schema = get_tool_schema("get_specific_aptos_resource")

        assert isinstance(schema, ToolSchema)
        assert schema.get_required_params() == ["filename"]
        assert get_tool_schema("nonexistent") is None

    def test_get_tool_schemas(self):
        assert set(get_tool_schemas()) == EXPECTED_TOOLS

    def test_enum_values(self):
        props = TOOL_SCHEMAS["pre_deployment_checklist"]["inputSchema"]["properties"]
        assert props["deployment_target"]["enum"] == ["testnet", "mainnet"]


@pytest.mark.unit
class TestValidation:
    """Test boundary validation."""

    def test_valid_parameters(self):
        get_tool_schema("debug_aptos_issue").validate(
            {"issue_description": "stuck", "context": "api_setup", "current_code": None}
        )

    def test_no_parameters(self):
        get_tool_schema("get_aptos_resources").validate({})

    def test_validate_required(self):
        schema = get_tool_schema("get_specific_aptos_resource")
        assert schema.validate_required({"filename": "x"}) == (True, [])
        assert schema.validate_required({}) == (False, ["filename"])

    def test_missing_required(self):
        with pytest.raises(InvalidParametersError) as exc_info:
            get_tool_schema("get_specific_aptos_resource").validate({"filename": None})

        assert exc_info.value.tool_name == "get_specific_aptos_resource"
        assert "filename" in str(exc_info.value)

    def test_value_outside_enum(self):
        with pytest.raises(InvalidParametersError, match="testnet, mainnet"):
            get_tool_schema("pre_deployment_checklist").validate({"deployment_target": "devnet"})

    def test_wrong_type(self):
        with pytest.raises(InvalidParametersError, match="must be string"):
            get_tool_schema("get_aptos_resources").validate({"context": 42})

    def test_unknown_parameter(self):
        with pytest.raises(InvalidParametersError, match="Unknown parameter"):
            get_tool_schema("list_aptos_resources").validate({"category": "move"})

    def test_invalid_parameters_is_value_error(self):
        with pytest.raises(ValueError):
            get_tool_schema("pre_deployment_checklist").validate({})
