"""
File Tools Module

Box file lookups.
"""

from typing import Annotated, Any, Dict
from urllib.parse import quote

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from box_mcp.box.client import BoxClient
from box_mcp.mcp.envelope import run_tool
from box_mcp.types import FileInfoResponse


def shape_file_info(file: Dict[str, Any]) -> FileInfoResponse:
    """Pick the attributes returned by box_get_file_info from a Box file object."""
    return {
        "id": file.get("id"),
        "name": file.get("name"),
        "size": file.get("size"),
        "type": file.get("type"),
        "createdAt": file.get("created_at"),
        "modifiedAt": file.get("modified_at"),
        "description": file.get("description"),
        "parent": file.get("parent"),
        "path": file.get("path_collection"),
        "sharedLink": file.get("shared_link"),
    }


def setup_file_tools(mcp: FastMCP, client: BoxClient) -> None:
    """Set up Box file tools on the FastMCP application."""

    @mcp.tool(
        name="box_get_file_info",
        title="Get Box File Information",
        description="Get basic information about a Box file including name, size, type, and metadata.",
        structured_output=False,
    )
    def box_get_file_info(
        fileId: Annotated[str, Field(description="The Box file ID")],
    ) -> CallToolResult:
        def get_info() -> FileInfoResponse:
            return shape_file_info(client.get(f"/files/{quote(fileId, safe='')}"))

        return run_tool("Error getting file info", get_info).to_envelope()
