"""
Exceptions raised by the Box MCP auth and API layers.

Tool handlers catch these and turn them into error envelopes.
"""

from typing import Optional


class BoxMCPError(Exception):
    """Base class for Box MCP errors."""


class NotAuthenticatedError(BoxMCPError):
    """No active access token is available."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(
            message
            or "No valid Box access token. Please authenticate using box_authenticate tool "
            "or set BOX_ACCESS_TOKEN environment variable."
        )


class JWTAssertionError(BoxMCPError):
    """The JWT assertion could not be built (bad or non-RSA private key)."""


class BoxHTTPError(BoxMCPError):
    """A Box endpoint answered with a non-2xx status."""

    prefix = "Box API error"

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"{self.prefix}: {status_code} {reason} - {body}")


class BoxAPIError(BoxHTTPError):
    """Non-2xx response from a Box content API endpoint."""


class BoxAuthError(BoxHTTPError):
    """Non-2xx response from the Box token endpoint."""

    prefix = "Authentication failed"
