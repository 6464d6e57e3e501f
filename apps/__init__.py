"""
pb-mcp Applications Package.

Contains:
- mcp_server: MCP stdio server exposing the Productboard tools
"""

__version__ = "0.1.0"
