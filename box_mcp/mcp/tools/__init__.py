"""
MCP Tools Package

Tool definitions for the Box MCP server, grouped by domain:
- auth: box_authenticate, box_set_access_token, box_get_auth_status
- ai_extract: box_extract_metadata, box_extract_structured_metadata
- files: box_get_file_info
"""

from typing import Optional

import httpx
from mcp.server.fastmcp import FastMCP

from box_mcp.auth.session import TokenSession, get_session
from box_mcp.box.client import BoxClient
from box_mcp.mcp.tools.auth import setup_auth_tools
from box_mcp.mcp.tools.ai_extract import setup_ai_extract_tools
from box_mcp.mcp.tools.files import setup_file_tools


def setup_tools(
    mcp: FastMCP,
    session: Optional[TokenSession] = None,
    http_client: Optional[httpx.Client] = None,
) -> None:
    """
    Set up all MCP tools on the FastMCP application.

    Args:
        mcp (FastMCP): The FastMCP application.
        session (Optional[TokenSession]): Token session shared by every tool.
            Defaults to the process-wide session.
        http_client (Optional[httpx.Client]): HTTP client for Box calls.
            A short-lived client per request is used when omitted.
    """
    session = session or get_session()
    client = BoxClient(session, http_client=http_client)

    setup_auth_tools(mcp, session, http_client=http_client)
    setup_ai_extract_tools(mcp, client)
    setup_file_tools(mcp, client)


__all__ = [
    "setup_tools",
    "setup_auth_tools",
    "setup_ai_extract_tools",
    "setup_file_tools",
]
