"""
Box MCP - Model Context Protocol server for Box AI metadata extraction.

Tools:
- box_authenticate: JWT server-to-server authentication
- box_set_access_token / box_get_auth_status: manual token handling
- box_extract_metadata / box_extract_structured_metadata: Box AI extraction
- box_get_file_info: file details

Example:
    from mcp.server.fastmcp import FastMCP
    from box_mcp.mcp.tools import setup_tools
    from box_mcp.auth.session import TokenSession
"""

__version__ = "1.0.0"

from box_mcp.types import (
    AuthenticateResponse,
    SetAccessTokenResponse,
    AuthStatusResponse,
    FileInfoResponse,
    ExtractRequest,
    ExtractStructuredRequest,
)

__all__ = [
    "__version__",
    "AuthenticateResponse",
    "SetAccessTokenResponse",
    "AuthStatusResponse",
    "FileInfoResponse",
    "ExtractRequest",
    "ExtractStructuredRequest",
]
