"""
Authentication Tools Module

Handles Box JWT authentication, manual token setting and status checks.
"""

from typing import Annotated, Optional

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from box_mcp.auth.box_auth import exchange_jwt_for_token
from box_mcp.auth.session import TokenSession, format_timestamp
from box_mcp.mcp.envelope import Success, run_tool
from box_mcp.types import AuthenticateResponse, SetAccessTokenResponse, SubjectType
from box_mcp.utils.logger import get_logger

logger = get_logger(__name__)


def setup_auth_tools(
    mcp: FastMCP,
    session: TokenSession,
    http_client: Optional[httpx.Client] = None,
) -> None:
    """Set up authentication tools on the FastMCP application."""

    @mcp.tool(
        name="box_authenticate",
        title="Authenticate with Box API (JWT)",
        description=(
            "Obtain an access token from Box using JWT (JSON Web Token) authentication. "
            "This is for server-to-server authentication using a private key and stores "
            "the token in memory for use by other tools."
        ),
        structured_output=False,
    )
    def box_authenticate(
        clientId: Annotated[str, Field(description="Box application client ID")],
        clientSecret: Annotated[str, Field(description="Box application client secret")],
        privateKey: Annotated[
            str, Field(description="Private key in PEM format (from Box Developer Console key pair)")
        ],
        publicKeyId: Annotated[str, Field(description="Public Key ID (kid) from Box Developer Console")],
        subjectType: Annotated[
            SubjectType, Field(description="Type of subject to authenticate as (user or enterprise)")
        ],
        subjectId: Annotated[
            str, Field(description="User ID or Enterprise ID to authenticate as")
        ],
    ) -> CallToolResult:
        def authenticate() -> AuthenticateResponse:
            token_data = exchange_jwt_for_token(
                clientId,
                clientSecret,
                privateKey,
                publicKeyId,
                subjectType,
                subjectId,
                http_client=http_client,
            )
            session.set_token(token_data["access_token"], token_data.get("expires_in"))
            logger.info("Authenticated with Box using JWT")

            return {
                "success": True,
                "message": "Successfully authenticated with Box API using JWT",
                "tokenType": token_data.get("token_type"),
                "expiresIn": token_data.get("expires_in"),
                "expiresAt": format_timestamp(session.expires_at),
                "restrictedTo": token_data.get("restricted_to"),
                "issuedTokenType": token_data.get("issued_token_type"),
            }

        return run_tool("Authentication error", authenticate).to_envelope()

    @mcp.tool(
        name="box_set_access_token",
        title="Set Box Access Token",
        description=(
            "Manually set a Box access token. Useful if you already have a token from "
            "another source. The token will be stored in memory for use by other tools."
        ),
        structured_output=False,
    )
    def box_set_access_token(
        accessToken: Annotated[str, Field(description="Box access token to use")],
        expiresIn: Annotated[
            Optional[float],
            Field(description="Token expiration time in seconds (optional, for automatic expiration tracking)"),
        ] = None,
    ) -> CallToolResult:
        def set_token() -> SetAccessTokenResponse:
            session.set_token(accessToken, expiresIn)
            return {
                "success": True,
                "message": "Access token stored successfully",
                "expiresAt": format_timestamp(session.expires_at) or "No expiration set",
            }

        return run_tool("Error setting access token", set_token).to_envelope()

    @mcp.tool(
        name="box_get_auth_status",
        title="Get Box Authentication Status",
        description="Check the current authentication status and token information.",
        structured_output=False,
    )
    def box_get_auth_status() -> CallToolResult:
        return Success(session.status()).to_envelope()
