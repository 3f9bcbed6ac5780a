"""MCP tools for the pace calculator."""

from pace_calculator.tools.pace import register_pace_tools

__all__ = [
    "register_pace_tools",
]


def register_all_tools(mcp):
    """Register all MCP tools with the server."""
    register_pace_tools(mcp)
