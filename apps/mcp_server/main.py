"""
pb-mcp MCP Server Entry Point.

Serves the Productboard tool table over MCP stdio:
- tools/list -> ToolRouter.list_tools()
- tools/call -> ToolRouter.call_tool()

Run with `pb-mcp` (console script) or `python -m apps.mcp_server.main`.
"""

import asyncio
import sys

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from pb_config.settings import Settings
from pb_obs.logging import get_logger, setup_logging
from pb_tools.adapters.productboard import (
    ProductboardConfigError,
    ToolRouter,
    create_productboard_router,
)

logger = get_logger(__name__)


def build_server(router: ToolRouter, settings: Settings) -> Server:
    """Create the MCP server and bind its tool handlers to `router`."""
    server = Server(settings.MCP_SERVER_NAME, version=settings.MCP_SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return router.list_tools()

    # Registered directly rather than via @server.call_tool(): that decorator
    # turns exceptions into isError results, dropping the McpError code.
    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await router.call_tool(req.params.name, req.params.arguments or {})
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def run_stdio(server: Server) -> None:
    """Serve until stdin closes."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Load settings, build the router and serve over stdio."""
    settings = Settings()
    setup_logging(settings)

    if not settings.PRODUCTBOARD_API_TOKEN.strip():
        sys.stderr.write("Error: PRODUCTBOARD_API_TOKEN environment variable is required\n")
        sys.exit(1)

    try:
        router = create_productboard_router(
            settings.PRODUCTBOARD_API_TOKEN,
            base_url=settings.PRODUCTBOARD_BASE_URL,
            timeout_seconds=settings.PRODUCTBOARD_TIMEOUT_SECONDS,
            api_version=settings.PRODUCTBOARD_API_VERSION,
        )
    except ProductboardConfigError as e:
        sys.stderr.write(f"Error: {e}\n")
        sys.exit(1)

    server = build_server(router, settings)
    logger.info(
        "mcp_server_starting",
        name=settings.MCP_SERVER_NAME,
        tools=len(router.registry),
    )
    asyncio.run(run_stdio(server))


if __name__ == "__main__":
    main()
