"""Tool Registry Tests."""

import pytest
from pydantic import ValidationError

from pb_tools.base import BodyPolicy, HttpMethod, ToolDefinition
from pb_tools.registry import DuplicateToolError, ToolRegistry


def make_tool(name: str = "get_item", method: str = "GET", path: str = "/items/{id}"):
    return ToolDefinition(
        name=name,
        description="Item tool",
        method=method,
        path=path,
        input_schema={"type": "object", "properties": {"id": {"type": "string"}}},
    )


def test_register_and_retrieve_tool():
    """Test tool registration and retrieval."""
    registry = ToolRegistry()
    tool = make_tool()

    registry.register(tool)

    assert registry.get("get_item") is tool
    assert "get_item" in registry
    assert len(registry) == 1


def test_get_unknown_tool_returns_none():
    assert ToolRegistry().get("missing") is None


def test_duplicate_name_rejected():
    """Test names stay unique."""
    registry = ToolRegistry([make_tool()])

    with pytest.raises(DuplicateToolError, match="get_item"):
        registry.register(make_tool(path="/other/{id}"))


def test_registration_order_preserved():
    names = ["c_tool", "a_tool", "b_tool"]
    registry = ToolRegistry(make_tool(name=n) for n in names)

    assert [t.name for t in registry.definitions()] == names
    assert [t.name for t in registry] == names


def test_filter_by_method():
    registry = ToolRegistry(
        [make_tool("get_item"), make_tool("delete_item", method="DELETE")]
    )

    results = registry.filter_by_method("DELETE")

    assert [t.name for t in results] == ["delete_item"]
    assert registry.filter_by_method(HttpMethod.PUT) == []


def test_definition_defaults_to_data_body():
    assert make_tool().body is BodyPolicy.DATA
    assert make_tool().method is HttpMethod.GET


@pytest.mark.parametrize("path", ["items", "https://evil.com/items"])
def test_definition_rejects_absolute_or_relative_paths(path):
    with pytest.raises(ValidationError):
        make_tool(path=path)


def test_definition_rejects_unknown_method():
    with pytest.raises(ValidationError):
        make_tool(method="TRACE")


def test_definition_requires_object_schema():
    with pytest.raises(ValidationError):
        ToolDefinition(
            name="bad",
            description="Bad schema",
            method="GET",
            path="/bad",
            input_schema={"type": "array"},
        )
