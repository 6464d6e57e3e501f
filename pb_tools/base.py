"""Tool Definition & Metadata.

A tool is pure data: one record per endpoint, interpreted by the generic
router in `pb_tools.adapters.productboard.router`.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HttpMethod(str, Enum):
    """HTTP verbs a tool may be bound to."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"


class BodyPolicy(str, Enum):
    """How leftover arguments of a write tool become the request body."""

    DATA = "data"  # wrap remaining arguments as {"data": {...}}
    NONE = "none"  # send no body at all


class ToolDefinition(BaseModel):
    """Declarative mapping from a tool name onto one HTTP request shape."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Unique tool name")
    description: str = Field(..., min_length=1)
    method: HttpMethod
    path: str = Field(..., description="Path template, e.g. /notes/{noteId}/tags")
    body: BodyPolicy = BodyPolicy.DATA
    input_schema: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}},
        description="JSON schema of accepted arguments",
    )

    @field_validator("path")
    @classmethod
    def _relative_path(cls, value: str) -> str:
        if not value.startswith("/") or "://" in value:
            raise ValueError(f"path must be relative to the API base URL: {value!r}")
        return value

    @field_validator("input_schema")
    @classmethod
    def _object_schema(cls, value: dict[str, Any]) -> dict[str, Any]:
        if value.get("type") != "object" or not isinstance(value.get("properties"), dict):
            raise ValueError("input_schema must be an object schema with properties")
        return value

    @property
    def required(self) -> list[str]:
        """Argument names the schema marks as required."""
        return list(self.input_schema.get("required", []))
