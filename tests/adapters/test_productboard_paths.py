"""Tests for the path template tokenizer."""

import pytest

from pb_tools.adapters.productboard import MissingPathParameterError, PathTemplate
from pb_tools.adapters.productboard.paths import Token, stringify, tokenize


def test_tokenize_literal_only():
    assert tokenize("/features") == [Token("/features", False)]


def test_tokenize_multiple_placeholders():
    assert tokenize("/notes/{noteId}/tags/{tagName}") == [
        Token("/notes/", False),
        Token("noteId", True),
        Token("/tags/", False),
        Token("tagName", True),
    ]


@pytest.mark.parametrize("template", ["/a/{}", "/a/{not-a-name}", "/a/{open", "/a/}b{"])
def test_malformed_braces_are_literal(template):
    assert PathTemplate.parse(template).placeholders == []
    assert PathTemplate.parse(template).render({}) == template


def test_placeholders_left_to_right():
    template = PathTemplate.parse("/notes/{noteId}/tags/{tagName}")
    assert template.placeholders == ["noteId", "tagName"]


def test_render_consumes_matched_keys():
    arguments = {"noteId": "n1", "tagName": "urgent", "extra": "x"}

    path = PathTemplate.parse("/notes/{noteId}/tags/{tagName}").render(arguments)

    assert path == "/notes/n1/tags/urgent"
    assert arguments == {"extra": "x"}


def test_render_substitutes_string_form():
    assert PathTemplate.parse("/items/{id}").render({"id": 42}) == "/items/42"


def test_render_repeated_placeholder():
    arguments = {"id": "abc"}
    assert PathTemplate.parse("/items/{id}/copies/{id}").render(arguments) == "/items/abc/copies/abc"
    assert arguments == {}


@pytest.mark.parametrize(
    "arguments", [{}, {"id": None}, {"id": ""}, {"id": "."}, {"id": ".."}]
)
def test_render_missing_or_empty_parameter_raises(arguments):
    with pytest.raises(MissingPathParameterError) as exc_info:
        PathTemplate.parse("/items/{id}").render(arguments)

    assert exc_info.value.name == "id"
    assert "/items/{id}" in str(exc_info.value)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("abc", "abc"),
        (1, "1"),
        (1.0, "1"),
        (2.5, "2.5"),
        (True, "true"),
        (False, "false"),
        (["a", "b"], '["a","b"]'),
        ({"k": 1}, '{"k":1}'),
    ],
)
def test_stringify(value, expected):
    assert stringify(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("abc-123_x.y~z", "/items/abc-123_x.y~z"),
        ("../webhooks/w1", "/items/..%2Fwebhooks%2Fw1"),
        ("x?archived=true", "/items/x%3Farchived%3Dtrue"),
        ("a/b", "/items/a%2Fb"),
        ("a#b", "/items/a%23b"),
        ("café", "/items/caf%C3%A9"),
    ],
)
def test_render_encodes_value_as_one_segment(value, expected):
    assert PathTemplate.parse("/items/{id}").render({"id": value}) == expected
