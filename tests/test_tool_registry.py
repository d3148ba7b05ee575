"""Tests for the tool registry."""

import pytest

from src.aptos_mcp.tools.registry import ToolRegistry


async def handler() -> str:
    return "ok"


@pytest.fixture
def registry():
    registry = ToolRegistry()
    registry.register(name="list_aptos_resources", handler=handler, schema={"description": "List"})
    return registry


@pytest.mark.unit
class TestToolRegistry:
    """Test tool registration bookkeeping."""

    def test_register(self, registry):
        tool = registry.get("list_aptos_resources")

        assert tool.version == "1.0.0"
        assert tool.description == "List"
        assert tool.handler is handler
        assert registry.list_tools() == ["list_aptos_resources"]

    def test_unknown_tool(self, registry):
        assert registry.get("missing") is None

    def test_duplicate_same_version_skipped(self, registry):
        registry.register(name="list_aptos_resources", handler=handler, schema={})
        assert registry.list_tools(enabled_only=False) == ["list_aptos_resources"]

    def test_duplicate_other_version_rejected(self, registry):
        with pytest.raises(ValueError, match="already registered"):
            registry.register(
                name="list_aptos_resources", handler=handler, schema={}, version="2.0.0"
            )

    def test_disabled_tool(self, registry):
        registry.register(name="hidden", handler=handler, schema={}, enabled=False)

        assert registry.list_tools() == ["list_aptos_resources"]
        assert registry.list_tools(enabled_only=False) == ["list_aptos_resources", "hidden"]
        assert registry.count_enabled() == 1
