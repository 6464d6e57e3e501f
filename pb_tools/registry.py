"""Tool Registry.

Name-keyed lookup over tool definitions, preserving registration order.
"""

from collections.abc import Iterable, Iterator

from pb_tools.base import HttpMethod, ToolDefinition


class DuplicateToolError(ValueError):
    """A tool with the same name is already registered."""


class ToolRegistry:
    """Tool registry with name-based lookup."""

    def __init__(self, definitions: Iterable[ToolDefinition] = ()):
        self._tools: dict[str, ToolDefinition] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: ToolDefinition) -> None:
        """Register a tool definition.

        Raises:
            DuplicateToolError: If the name is already taken
        """
        if definition.name in self._tools:
            raise DuplicateToolError(f"Duplicate tool name: {definition.name}")
        self._tools[definition.name] = definition

    def get(self, name: str) -> ToolDefinition | None:
        """Get tool by name."""
        return self._tools.get(name)

    def definitions(self) -> list[ToolDefinition]:
        """All definitions in registration order."""
        return list(self._tools.values())

    def filter_by_method(self, method: HttpMethod | str) -> list[ToolDefinition]:
        """Filter tools by HTTP verb."""
        method = HttpMethod(method)
        return [t for t in self._tools.values() if t.method is method]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
