"""MCP surface: FastMCP server and tool adapter."""
