"""MCP stdio server for the Productboard tools."""
