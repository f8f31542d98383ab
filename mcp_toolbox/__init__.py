"""MCP tool server with a validated, schema-driven dispatch core."""

__version__ = "1.0.0"
