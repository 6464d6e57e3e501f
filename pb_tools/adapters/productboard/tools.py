"""Productboard tool table.

One `ToolDefinition` per endpoint. Write tools default to wrapping their
remaining arguments as `{"data": ...}`; tools whose arguments all live in
the path use `BodyPolicy.NONE`.
"""

from typing import Any

from pb_tools.base import BodyPolicy, HttpMethod, ToolDefinition
from pb_tools.registry import ToolRegistry

GET = HttpMethod.GET
POST = HttpMethod.POST
PATCH = HttpMethod.PATCH
DELETE = HttpMethod.DELETE

ID = {"type": "string", "description": "Resource ID"}
PAGINATION = {
    "limit": {"type": "number", "description": "Max items to return (1-100)"},
    "offset": {"type": "number", "description": "Pagination offset"},
}


def _string(description: str) -> dict[str, str]:
    return {"type": "string", "description": description}


def _schema(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


def _by_id(name: str, description: str, method: HttpMethod, path: str) -> ToolDefinition:
    """Tool whose only argument is the `{id}` in its path."""
    return ToolDefinition(
        name=name,
        description=description,
        method=method,
        path=path,
        body=BodyPolicy.NONE,
        input_schema=_schema({"id": ID}, ["id"]),
    )


PRODUCTBOARD_TOOLS: list[ToolDefinition] = [
    # ========================================================================
    # FEATURES
    # ========================================================================
    ToolDefinition(
        name="get_features",
        description="List all features with optional filters",
        method=GET,
        path="/features",
        input_schema=_schema(
            {
                **PAGINATION,
                "archived": {"type": "boolean", "description": "Filter by archived status"},
                "ownerEmail": _string("Filter by owner email"),
                "parentId": _string("Filter by parent feature ID"),
            }
        ),
    ),
    _by_id("get_feature", "Get a specific feature by ID", GET, "/features/{id}"),
    ToolDefinition(
        name="create_feature",
        description="Create a new feature",
        method=POST,
        path="/features",
        input_schema=_schema(
            {
                "name": _string("Feature name"),
                "description": _string("Feature description"),
                "status": {"type": "object", "description": "Status object with id and name"},
                "owner": {"type": "object", "description": "Owner object"},
                "parent": {"type": "object", "description": "Parent feature reference"},
            },
            ["name"],
        ),
    ),
    ToolDefinition(
        name="update_feature",
        description="Update an existing feature",
        method=PATCH,
        path="/features/{id}",
        input_schema=_schema(
            {
                "id": ID,
                "name": _string("Feature name"),
                "description": _string("Feature description"),
                "status": {"type": "object", "description": "Status object"},
                "archived": {"type": "boolean", "description": "Archived status"},
            },
            ["id"],
        ),
    ),
    _by_id("delete_feature", "Delete a feature", DELETE, "/features/{id}"),
    # ========================================================================
    # NOTES
    # ========================================================================
    ToolDefinition(
        name="get_notes",
        description="List notes with optional filters",
        method=GET,
        path="/notes",
        input_schema=_schema(
            {
                **PAGINATION,
                "term": _string("Search term"),
                "companyId": _string("Filter by company"),
                "featureId": _string("Filter by feature"),
                "ownerEmail": _string("Filter by owner email"),
            }
        ),
    ),
    _by_id("get_note", "Get a specific note by ID", GET, "/notes/{id}"),
    ToolDefinition(
        name="create_note",
        description="Create a new note",
        method=POST,
        path="/notes",
        input_schema=_schema(
            {
                "title": _string("Note title"),
                "content": _string("Note content (HTML)"),
                "displayUrl": _string("Source display URL"),
                "userEmail": _string("User email"),
                "companyDomain": _string("Company domain"),
                "tags": {"type": "array", "description": "Tags to apply"},
            },
            ["title", "content"],
        ),
    ),
    ToolDefinition(
        name="update_note",
        description="Update an existing note",
        method=PATCH,
        path="/notes/{id}",
        input_schema=_schema(
            {
                "id": ID,
                "title": _string("Note title"),
                "content": _string("Note content (HTML)"),
                "tags": {"type": "array", "description": "Tags to apply"},
            },
            ["id"],
        ),
    ),
    _by_id("delete_note", "Delete a note", DELETE, "/notes/{id}"),
    ToolDefinition(
        name="list_note_tags",
        description="List tags on a note",
        method=GET,
        path="/notes/{noteId}/tags",
        body=BodyPolicy.NONE,
        input_schema=_schema({"noteId": _string("Note ID")}, ["noteId"]),
    ),
    ToolDefinition(
        name="add_note_tag",
        description="Add a tag to a note",
        method=POST,
        path="/notes/{noteId}/tags/{tagName}",
        body=BodyPolicy.NONE,
        input_schema=_schema(
            {"noteId": _string("Note ID"), "tagName": _string("Tag name")},
            ["noteId", "tagName"],
        ),
    ),
    ToolDefinition(
        name="remove_note_tag",
        description="Remove a tag from a note",
        method=DELETE,
        path="/notes/{noteId}/tags/{tagName}",
        body=BodyPolicy.NONE,
        input_schema=_schema(
            {"noteId": _string("Note ID"), "tagName": _string("Tag name")},
            ["noteId", "tagName"],
        ),
    ),
    # ========================================================================
    # COMPANIES
    # ========================================================================
    ToolDefinition(
        name="get_companies",
        description="List all companies with optional filters",
        method=GET,
        path="/companies",
        input_schema=_schema({**PAGINATION, "term": _string("Search term")}),
    ),
    _by_id("get_company", "Get a specific company by ID", GET, "/companies/{id}"),
    ToolDefinition(
        name="create_company",
        description="Create a new company",
        method=POST,
        path="/companies",
        input_schema=_schema(
            {
                "name": _string("Company name"),
                "domain": _string("Company domain"),
                "description": _string("Company description"),
                "externalId": _string("External identifier"),
            },
            ["name"],
        ),
    ),
    ToolDefinition(
        name="update_company",
        description="Update a company",
        method=PATCH,
        path="/companies/{id}",
        input_schema=_schema(
            {
                "id": ID,
                "name": _string("Company name"),
                "domain": _string("Company domain"),
                "description": _string("Company description"),
            },
            ["id"],
        ),
    ),
    _by_id("delete_company", "Delete a company", DELETE, "/companies/{id}"),
    # ========================================================================
    # OBJECTIVES
    # ========================================================================
    ToolDefinition(
        name="get_objectives",
        description="List all objectives",
        method=GET,
        path="/objectives",
        input_schema=_schema({**PAGINATION}),
    ),
    _by_id("get_objective", "Get a specific objective by ID", GET, "/objectives/{id}"),
    ToolDefinition(
        name="create_objective",
        description="Create a new objective",
        method=POST,
        path="/objectives",
        input_schema=_schema(
            {
                "name": _string("Objective name"),
                "description": _string("Objective description"),
                "ownerId": _string("Owner user ID"),
                "startDate": _string("Start date (ISO 8601)"),
                "endDate": _string("End date (ISO 8601)"),
            },
            ["name"],
        ),
    ),
    ToolDefinition(
        name="update_objective",
        description="Update an objective",
        method=PATCH,
        path="/objectives/{id}",
        input_schema=_schema(
            {
                "id": ID,
                "name": _string("Objective name"),
                "description": _string("Objective description"),
                "ownerId": _string("Owner user ID"),
            },
            ["id"],
        ),
    ),
    _by_id("delete_objective", "Delete an objective", DELETE, "/objectives/{id}"),
    # ========================================================================
    # INITIATIVES
    # ========================================================================
    ToolDefinition(
        name="get_initiatives",
        description="List all initiatives",
        method=GET,
        path="/initiatives",
        input_schema=_schema({**PAGINATION}),
    ),
    _by_id("get_initiative", "Get a specific initiative by ID", GET, "/initiatives/{id}"),
    ToolDefinition(
        name="create_initiative",
        description="Create a new initiative",
        method=POST,
        path="/initiatives",
        input_schema=_schema(
            {
                "name": _string("Initiative name"),
                "description": _string("Initiative description"),
                "ownerId": _string("Owner user ID"),
                "status": _string("Initiative status"),
            },
            ["name"],
        ),
    ),
    ToolDefinition(
        name="update_initiative",
        description="Update an initiative",
        method=PATCH,
        path="/initiatives/{id}",
        input_schema=_schema(
            {
                "id": ID,
                "name": _string("Initiative name"),
                "description": _string("Initiative description"),
            },
            ["id"],
        ),
    ),
    _by_id("delete_initiative", "Delete an initiative", DELETE, "/initiatives/{id}"),
    # ========================================================================
    # KEY RESULTS
    # ========================================================================
    ToolDefinition(
        name="get_key_results",
        description="List all key results",
        method=GET,
        path="/key-results",
        input_schema=_schema({**PAGINATION}),
    ),
    _by_id("get_key_result", "Get a specific key result by ID", GET, "/key-results/{id}"),
    ToolDefinition(
        name="create_key_result",
        description="Create a new key result",
        method=POST,
        path="/key-results",
        input_schema=_schema(
            {
                "name": _string("Key result name"),
                "objectiveId": _string("Parent objective ID"),
                "type": _string("Key result type"),
                "targetValue": {"type": "number", "description": "Target value"},
            },
            ["name", "objectiveId"],
        ),
    ),
    ToolDefinition(
        name="update_key_result",
        description="Update a key result",
        method=PATCH,
        path="/key-results/{id}",
        input_schema=_schema(
            {
                "id": ID,
                "name": _string("Key result name"),
                "currentValue": {"type": "number", "description": "Current value"},
                "targetValue": {"type": "number", "description": "Target value"},
            },
            ["id"],
        ),
    ),
    _by_id("delete_key_result", "Delete a key result", DELETE, "/key-results/{id}"),
    # ========================================================================
    # RELEASES
    # ========================================================================
    ToolDefinition(
        name="list_releases",
        description="List all releases",
        method=GET,
        path="/releases",
        input_schema=_schema(
            {**PAGINATION, "releaseGroupId": _string("Filter by release group")}
        ),
    ),
    _by_id("get_release", "Get a specific release by ID", GET, "/releases/{id}"),
    ToolDefinition(
        name="create_release",
        description="Create a new release",
        method=POST,
        path="/releases",
        input_schema=_schema(
            {
                "name": _string("Release name"),
                "releaseGroupId": _string("Release group ID"),
                "state": _string("Release state"),
                "description": _string("Release description"),
                "releaseDate": _string("Release date (ISO 8601)"),
            },
            ["name", "releaseGroupId"],
        ),
    ),
    ToolDefinition(
        name="update_release",
        description="Update a release",
        method=PATCH,
        path="/releases/{id}",
        input_schema=_schema(
            {
                "id": ID,
                "name": _string("Release name"),
                "state": _string("Release state"),
                "description": _string("Release description"),
                "releaseDate": _string("Release date (ISO 8601)"),
            },
            ["id"],
        ),
    ),
    _by_id("delete_release", "Delete a release", DELETE, "/releases/{id}"),
    # ========================================================================
    # WEBHOOKS
    # ========================================================================
    ToolDefinition(
        name="list_webhooks",
        description="List all webhooks",
        method=GET,
        path="/webhooks",
        input_schema=_schema({**PAGINATION}),
    ),
    _by_id("get_webhook", "Get a specific webhook by ID", GET, "/webhooks/{id}"),
    ToolDefinition(
        name="create_webhook",
        description="Create a webhook subscription",
        method=POST,
        path="/webhooks",
        input_schema=_schema(
            {
                "name": _string("Webhook name"),
                "url": _string("Webhook callback URL"),
                "events": {"type": "array", "description": "Events to subscribe to"},
                "version": _string("Webhook version"),
            },
            ["name", "url", "events"],
        ),
    ),
    _by_id("delete_webhook", "Delete a webhook", DELETE, "/webhooks/{id}"),
    # ========================================================================
    # USERS
    # ========================================================================
    ToolDefinition(
        name="get_users",
        description="List all users",
        method=GET,
        path="/users",
        input_schema=_schema({**PAGINATION}),
    ),
    _by_id("get_user", "Get a specific user by ID", GET, "/users/{id}"),
    ToolDefinition(
        name="create_user",
        description="Create a new user",
        method=POST,
        path="/users",
        input_schema=_schema(
            {
                "email": _string("User email"),
                "name": _string("User name"),
                "role": _string("User role"),
            },
            ["email"],
        ),
    ),
    ToolDefinition(
        name="update_user",
        description="Update a user",
        method=PATCH,
        path="/users/{id}",
        input_schema=_schema(
            {"id": ID, "name": _string("User name"), "role": _string("User role")},
            ["id"],
        ),
    ),
    _by_id("delete_user", "Delete a user", DELETE, "/users/{id}"),
    # ========================================================================
    # PRODUCTS
    # ========================================================================
    ToolDefinition(
        name="get_products",
        description="List all products",
        method=GET,
        path="/products",
        input_schema=_schema({**PAGINATION}),
    ),
    _by_id("get_product", "Get a specific product by ID", GET, "/products/{id}"),
    ToolDefinition(
        name="update_product",
        description="Update a product",
        method=PATCH,
        path="/products/{id}",
        input_schema=_schema(
            {
                "id": ID,
                "name": _string("Product name"),
                "description": _string("Product description"),
            },
            ["id"],
        ),
    ),
    # ========================================================================
    # COMPONENTS
    # ========================================================================
    ToolDefinition(
        name="get_components",
        description="List all components",
        method=GET,
        path="/components",
        input_schema=_schema({**PAGINATION, "productId": _string("Filter by product ID")}),
    ),
    _by_id("get_component", "Get a specific component by ID", GET, "/components/{id}"),
    ToolDefinition(
        name="create_component",
        description="Create a new component",
        method=POST,
        path="/components",
        input_schema=_schema(
            {
                "name": _string("Component name"),
                "description": _string("Component description"),
                "ownerEmail": _string("Owner email"),
            },
            ["name"],
        ),
    ),
    ToolDefinition(
        name="update_component",
        description="Update a component",
        method=PATCH,
        path="/components/{id}",
        input_schema=_schema(
            {
                "id": ID,
                "name": _string("Component name"),
                "description": _string("Component description"),
            },
            ["id"],
        ),
    ),
]


def build_productboard_registry() -> ToolRegistry:
    """Registry loaded with every Productboard tool."""
    return ToolRegistry(PRODUCTBOARD_TOOLS)
