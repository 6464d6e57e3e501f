"""pb-mcp tool layer.

Declarative tool definitions, the registry that holds them, and API adapters
that execute them.
"""
