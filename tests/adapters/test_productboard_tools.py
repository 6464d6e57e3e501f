"""Structural tests for the Productboard tool table."""

import pytest

from pb_tools.adapters.productboard import (
    PRODUCTBOARD_TOOLS,
    PathTemplate,
    build_productboard_registry,
)
from pb_tools.base import BodyPolicy, HttpMethod


def test_table_is_not_empty():
    assert len(PRODUCTBOARD_TOOLS) > 0


def test_tool_names_are_unique():
    names = [t.name for t in PRODUCTBOARD_TOOLS]
    assert len(set(names)) == len(names)


def test_registry_holds_every_tool_in_order():
    registry = build_productboard_registry()
    assert [t.name for t in registry] == [t.name for t in PRODUCTBOARD_TOOLS]


def test_paths_are_relative():
    for tool in PRODUCTBOARD_TOOLS:
        assert tool.path.startswith("/"), tool.name
        assert "http" not in tool.path, tool.name


def test_placeholders_are_required_properties():
    for tool in PRODUCTBOARD_TOOLS:
        for name in PathTemplate.parse(tool.path).placeholders:
            assert name in tool.input_schema["properties"], f"{tool.name}: {name}"
            assert name in tool.required, f"{tool.name}: {name}"


def test_create_tools_declare_required_params():
    for tool in PRODUCTBOARD_TOOLS:
        if tool.name.startswith("create_"):
            assert tool.required, tool.name
            assert tool.method is HttpMethod.POST


def test_tools_with_only_path_arguments_send_no_body():
    for tool in PRODUCTBOARD_TOOLS:
        placeholders = set(PathTemplate.parse(tool.path).placeholders)
        if tool.method is HttpMethod.DELETE:
            assert tool.body is BodyPolicy.NONE, tool.name
        if set(tool.input_schema["properties"]) == placeholders and tool.method is not HttpMethod.GET:
            assert tool.body is BodyPolicy.NONE, tool.name


def test_add_note_tag_is_bodyless_post():
    tool = build_productboard_registry().get("add_note_tag")
    assert tool.method is HttpMethod.POST
    assert tool.body is BodyPolicy.NONE
    assert tool.path == "/notes/{noteId}/tags/{tagName}"


@pytest.mark.parametrize(
    "prefix,path",
    [
        ("feature", "/features"),
        ("note", "/notes"),
        ("compan", "/companies"),
        ("objective", "/objectives"),
        ("initiative", "/initiatives"),
        ("key_result", "/key-results"),
        ("release", "/releases"),
        ("webhook", "/webhooks"),
        ("user", "/users"),
        ("product", "/products"),
        ("component", "/components"),
    ],
)
def test_each_resource_has_list_and_get_tools(prefix, path):
    tools = [t for t in PRODUCTBOARD_TOOLS if t.path.startswith(path)]
    assert len(tools) >= 2
    assert all(prefix in t.name for t in tools)
    assert any(t.method is HttpMethod.GET and t.path == path for t in tools)
    assert any(t.method is HttpMethod.GET and t.path == f"{path}/{{id}}" for t in tools)
