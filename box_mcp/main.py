#!/usr/bin/env python3
"""
Box MCP Server

This module provides the main entry point for the Box MCP server.
"""

import sys
import traceback

from mcp.server.fastmcp import FastMCP

from box_mcp.utils.logger import get_logger, setup_logger
from box_mcp.utils.config import get_config
from box_mcp.auth.session import get_session
from box_mcp.mcp.tools import setup_tools

setup_logger("box_mcp")
logger = get_logger("box_mcp")

config = get_config()

mcp = FastMCP(name=config["mcp_server_name"])

setup_tools(mcp, get_session())


def main() -> None:
    """
    Main entry point for the Box MCP server.
    """
    try:
        if get_session().fallback_token:
            logger.info("Using BOX_ACCESS_TOKEN as fallback access token")
        else:
            logger.info("No BOX_ACCESS_TOKEN set; call box_authenticate or box_set_access_token first")

        logger.info("Starting Box MCP server")
        mcp.run()
    except Exception as e:
        logger.error(f"Error running MCP server: {e}")
        logger.error(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
