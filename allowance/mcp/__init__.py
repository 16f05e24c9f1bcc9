"""MCP server exposing allowance tools."""
