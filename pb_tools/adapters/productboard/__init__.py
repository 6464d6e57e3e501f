"""Productboard adapter for pb-mcp.

Exposes the Productboard REST API as MCP tools:
- Features, notes and note tags
- Companies, users, products and components
- Objectives, initiatives and key results
- Releases and webhooks

Usage:
    from pb_tools.adapters.productboard import create_productboard_router

    router = create_productboard_router(token="pb_...")
    tools = router.list_tools()
    result = await router.call_tool("get_feature", {"id": "..."})
"""

from .client import DEFAULT_BASE_URL, ProductboardClient
from .exceptions import (
    MissingPathParameterError,
    ProductboardAdapterError,
    ProductboardAPIError,
    ProductboardAuthError,
    ProductboardConfigError,
    ProductboardForbiddenError,
    ProductboardNotFoundError,
    ProductboardRateLimitError,
    ProductboardValidationError,
)
from .paths import PathTemplate
from .router import ToolRouter, create_productboard_router
from .tools import PRODUCTBOARD_TOOLS, build_productboard_registry

__all__ = [
    # Client
    "DEFAULT_BASE_URL",
    "ProductboardClient",
    # Exceptions
    "MissingPathParameterError",
    "ProductboardAdapterError",
    "ProductboardAPIError",
    "ProductboardAuthError",
    "ProductboardConfigError",
    "ProductboardForbiddenError",
    "ProductboardNotFoundError",
    "ProductboardRateLimitError",
    "ProductboardValidationError",
    # Routing
    "PathTemplate",
    "ToolRouter",
    "create_productboard_router",
    # Tool table
    "PRODUCTBOARD_TOOLS",
    "build_productboard_registry",
]
