#!/usr/bin/env python3
"""
IMAP Date-Time MCP Server

This module provides the main entry point for the IMAP date-time MCP server.
"""

import sys
import traceback

from mcp.server.fastmcp import FastMCP

from imap_datetime.utils.logger import get_logger, setup_logger
from imap_datetime.utils.config import get_config
from imap_datetime.mcp.tools import setup_tools

setup_logger("imap_datetime")
logger = get_logger(__name__)

config = get_config()

mcp = FastMCP(name=config["server_name"])

setup_tools(mcp)


def main() -> None:
    """
    Main entry point for the IMAP date-time MCP server.
    """
    try:
        logger.info("Starting MCP server")
        mcp.run()
    except Exception as e:
        logger.error(f"Error running MCP server: {e}")
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
