"""Shared helpers for the Box MCP tests."""

import json

import httpx
from mcp.server.fastmcp import FastMCP


class RecordingTransport:
    """
    httpx.MockTransport handler that records requests and answers from a
    list of (status, body) responses, one per request.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.responses.pop(0)
        if isinstance(body, (dict, list)):
            return httpx.Response(status, json=body)
        return httpx.Response(status, text=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


def build_tools(session, http_client=None) -> FastMCP:
    from box_mcp.mcp.tools import setup_tools

    mcp = FastMCP(name="Test")
    setup_tools(mcp, session=session, http_client=http_client)
    return mcp


def get_tool(mcp: FastMCP, name: str):
    """Return the plain function behind a registered tool."""
    return mcp._tool_manager._tools[name].fn


def envelope_text(result) -> str:
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    return result.content[0].text


def envelope_json(result):
    assert not result.isError
    return json.loads(envelope_text(result))
