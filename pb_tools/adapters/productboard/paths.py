"""Path template tokenizer.

Templates look like `/notes/{noteId}/tags/{tagName}`. A placeholder is a
`{` followed by one or more word characters and a `}`; any other brace is
literal text. Substituted values are percent-encoded as a single path
segment, so `/`, `?` and `#` inside an argument stay inside it.
"""

import json
from typing import Any, MutableMapping, NamedTuple
from urllib.parse import quote

from .exceptions import MissingPathParameterError


# Values that would name the collection or walk up the path.
DOT_SEGMENTS = ("", ".", "..")


class Token(NamedTuple):
    """Literal text (`is_param=False`) or a placeholder name."""

    value: str
    is_param: bool


def stringify(value: Any) -> str:
    """Render an argument value the way it appears in a URL."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _is_name_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def tokenize(template: str) -> list[Token]:
    """Split a template into literal and placeholder tokens."""
    tokens: list[Token] = []
    literal: list[str] = []
    i = 0
    while i < len(template):
        char = template[i]
        if char == "{":
            end = i + 1
            while end < len(template) and _is_name_char(template[end]):
                end += 1
            if end > i + 1 and end < len(template) and template[end] == "}":
                if literal:
                    tokens.append(Token("".join(literal), False))
                    literal = []
                tokens.append(Token(template[i + 1 : end], True))
                i = end + 1
                continue
        literal.append(char)
        i += 1
    if literal:
        tokens.append(Token("".join(literal), False))
    return tokens


class PathTemplate:
    """Parsed path template."""

    def __init__(self, template: str):
        self.template = template
        self.tokens = tokenize(template)

    @classmethod
    def parse(cls, template: str) -> "PathTemplate":
        return cls(template)

    @property
    def placeholders(self) -> list[str]:
        """Placeholder names, left to right."""
        return [token.value for token in self.tokens if token.is_param]

    def render(self, arguments: MutableMapping[str, Any]) -> str:
        """Substitute placeholders, removing each consumed key from `arguments`.

        Raises:
            MissingPathParameterError: Placeholder argument absent, None, empty,
                or a dot segment
        """
        parts = []
        consumed: dict[str, Any] = {}
        for token in self.tokens:
            if not token.is_param:
                parts.append(token.value)
                continue
            if token.value not in consumed:
                consumed[token.value] = arguments.pop(token.value, None)
            value = consumed[token.value]
            segment = "" if value is None else stringify(value)
            if segment in DOT_SEGMENTS:
                raise MissingPathParameterError(token.value, self.template)
            parts.append(quote(segment, safe=""))
        return "".join(parts)
