"""API adapters for pb-mcp."""
