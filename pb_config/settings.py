"""
Application Settings (Pydantic Settings).

Loads configuration from environment variables (.env file or system env).

The Productboard token is the only required value; `apps.mcp_server.main`
refuses to start without it.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ========================================================================
    # PRODUCTBOARD API
    # ========================================================================
    PRODUCTBOARD_API_TOKEN: str = Field(
        default="",
        description="Productboard public API access token (Bearer)",
    )
    PRODUCTBOARD_BASE_URL: str = Field(
        default="https://api.productboard.com",
        description="API base URL, host must be under productboard.com",
    )
    PRODUCTBOARD_API_VERSION: str = Field(
        default="1",
        description="Value sent in the X-Version header",
    )
    PRODUCTBOARD_TIMEOUT_SECONDS: float | None = Field(
        default=None,
        description="Per-request timeout in seconds (unset = no timeout)",
    )

    # ========================================================================
    # MCP SERVER
    # ========================================================================
    MCP_SERVER_NAME: str = Field(default="pb-mcp")
    MCP_SERVER_VERSION: str = Field(default="0.1.0")

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")
