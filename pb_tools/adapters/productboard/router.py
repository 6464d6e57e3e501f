"""Productboard tool router.

Binds MCP `tools/list` and `tools/call` onto the tool table: looks a tool
up by name, fills its path template from the arguments and sends whatever
is left as query parameters (GET) or `{"data": ...}` body (writes).
"""

import json
from typing import Any, Mapping

import httpx
from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    CallToolResult,
    ErrorData,
    TextContent,
    Tool,
)

from pb_obs.logging import get_logger
from pb_tools.base import BodyPolicy, HttpMethod, ToolDefinition
from pb_tools.registry import ToolRegistry

from .client import ProductboardClient
from .exceptions import MissingPathParameterError, ProductboardAPIError
from .paths import PathTemplate
from .tools import build_productboard_registry

logger = get_logger(__name__)

# HTTP status -> MCP error code; anything not listed is INTERNAL_ERROR
STATUS_ERROR_CODES: dict[int, int] = {
    404: INVALID_REQUEST,
}


def error_code_for(error: Exception) -> int:
    """MCP error code for a failed downstream call."""
    if isinstance(error, ProductboardAPIError):
        return STATUS_ERROR_CODES.get(error.status, INTERNAL_ERROR)
    return INTERNAL_ERROR


class ToolRouter:
    """Dispatches MCP tool calls to the Productboard API."""

    def __init__(self, client: ProductboardClient, registry: ToolRegistry):
        self.client = client
        self.registry = registry
        self._templates = {t.name: PathTemplate.parse(t.path) for t in registry}

    def list_tools(self) -> list[Tool]:
        """MCP tool listing, in registry order."""
        return [
            Tool(name=t.name, description=t.description, inputSchema=t.input_schema)
            for t in self.registry
        ]

    async def call_tool(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> CallToolResult:
        """Execute a tool by name.

        Args:
            name: Registered tool name
            arguments: Tool arguments; never mutated

        Returns:
            CallToolResult with one text item holding the JSON payload

        Raises:
            McpError: METHOD_NOT_FOUND / INVALID_PARAMS before any request,
                INVALID_REQUEST for 404, INTERNAL_ERROR for anything else
        """
        definition = self.registry.get(name)
        if definition is None:
            raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

        remaining = dict(arguments or {})
        template = self._templates.get(name) or PathTemplate.parse(definition.path)
        try:
            path = template.render(remaining)
        except MissingPathParameterError as e:
            raise McpError(ErrorData(code=INVALID_PARAMS, message=str(e))) from e

        logger.info("tool_call", tool=name, method=definition.method.value, path=path)

        try:
            data = await self._dispatch(definition, path, remaining)
        except McpError:
            raise
        except Exception as e:
            logger.warning("tool_call_failed", tool=name, error=str(e))
            raise McpError(ErrorData(code=error_code_for(e), message=str(e))) from e

        text = json.dumps(data, ensure_ascii=False)
        return CallToolResult(content=[TextContent(type="text", text=text)])

    async def _dispatch(
        self, definition: ToolDefinition, path: str, remaining: dict[str, Any]
    ) -> Any:
        method = definition.method
        if method is HttpMethod.GET:
            return await self.client.get(path, remaining)
        if method is HttpMethod.DELETE:
            return await self.client.delete(path)

        body = remaining if definition.body is BodyPolicy.DATA else None
        if method is HttpMethod.POST:
            return await self.client.post(path, body)
        if method is HttpMethod.PATCH:
            return await self.client.patch(path, body)
        return await self.client.put(path, body)


def create_productboard_router(
    token: str,
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout_seconds: float | None = None,
    api_version: str = "1",
    registry: ToolRegistry | None = None,
) -> ToolRouter:
    """Build a router over the Productboard tool table.

    Raises:
        ProductboardConfigError: Empty token or non-Productboard base URL
    """
    client = ProductboardClient(
        token,
        base_url=base_url,
        transport=transport,
        timeout_seconds=timeout_seconds,
        api_version=api_version,
    )
    if registry is None:
        registry = build_productboard_registry()
    return ToolRouter(client, registry)
