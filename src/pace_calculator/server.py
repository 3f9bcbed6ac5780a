#!/usr/bin/env python3
"""
MCP server for the pace calculator.
This server exposes pace calculation and race projection as MCP tools.
"""

from loguru import logger
from mcp.server.fastmcp import FastMCP

from pace_calculator.config import load_settings
from pace_calculator.logger import setup_logger
from pace_calculator.tools import register_all_tools

mcp = FastMCP("pace-calculator")
register_all_tools(mcp)


def main() -> None:
    """Main function to start the pace calculator MCP server."""
    settings = load_settings()
    setup_logger(settings.log_level)
    logger.info("Starting pace calculator MCP server")

    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
