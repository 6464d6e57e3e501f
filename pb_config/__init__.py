"""
pb-mcp Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from pb_config.settings import Settings

__all__ = ["Settings"]
