"""
Tool Result Envelope Module

Tool handlers build a Success or Failure and convert it to the MCP
CallToolResult envelope only when returning to the host.
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Union

from mcp.types import CallToolResult, TextContent

from box_mcp.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Success:
    """A tool outcome carrying a JSON-serialisable payload."""
    payload: Any

    def to_envelope(self) -> CallToolResult:
        text = json.dumps(self.payload, indent=2)
        return CallToolResult(content=[TextContent(type="text", text=text)])


@dataclass(frozen=True)
class Failure:
    """A tool outcome carrying a human-readable error message."""
    message: str

    def to_envelope(self) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=self.message)],
            isError=True,
        )


ToolResult = Union[Success, Failure]


def run_tool(error_prefix: str, action: Callable[[], Any]) -> ToolResult:
    """
    Run a tool body and capture its outcome.

    Args:
        error_prefix (str): Text placed before the error message on failure,
            e.g. ``"Error getting file info"``.
        action (Callable[[], Any]): Zero-argument callable returning the payload.

    Returns:
        ToolResult: Success with the payload, or Failure if anything was raised.
    """
    try:
        return Success(action())
    except Exception as e:
        logger.error(f"{error_prefix}: {e}")
        return Failure(f"{error_prefix}: {e}")
