"""MCP tool server for idea submission validation."""
