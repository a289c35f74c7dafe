"""
Box JWT Authentication Module

Exchanges a signed JWT assertion for a Box access token.
"""

from typing import Optional

import httpx

from box_mcp.auth.jwt_assertion import create_jwt_assertion
from box_mcp.errors import BoxAuthError
from box_mcp.types import SubjectType, TokenResponse
from box_mcp.utils.config import get_config_value
from box_mcp.utils.logger import get_logger

logger = get_logger(__name__)

JWT_BEARER_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:jwt-bearer"


def exchange_jwt_for_token(
    client_id: str,
    client_secret: str,
    private_key: str,
    public_key_id: str,
    subject_type: SubjectType,
    subject_id: str,
    http_client: Optional[httpx.Client] = None,
) -> TokenResponse:
    """
    Build a JWT assertion and trade it for an access token.

    Args:
        client_id (str): Box application client ID.
        client_secret (str): Box application client secret.
        private_key (str): PEM encoded RSA private key.
        public_key_id (str): Public key ID from the Box Developer Console.
        subject_type (str): ``user`` or ``enterprise``.
        subject_id (str): User or enterprise ID to authenticate as.
        http_client (Optional[httpx.Client]): Client to send the request with.
            A short-lived client is used when omitted.

    Returns:
        TokenResponse: The decoded token endpoint response.

    Raises:
        BoxAuthError: If the token endpoint answers with a non-2xx status.
        JWTAssertionError: If the assertion cannot be signed.
    """
    token_url = get_config_value("box_oauth_url")
    assertion = create_jwt_assertion(
        client_id,
        client_secret,
        private_key,
        public_key_id,
        subject_type,
        subject_id,
        audience=token_url,
    )

    form = {
        "grant_type": JWT_BEARER_GRANT_TYPE,
        "client_id": client_id,
        "client_secret": client_secret,
        "assertion": assertion,
    }

    logger.info(f"Requesting Box access token for {subject_type} {subject_id}")
    if http_client is None:
        with httpx.Client() as client:
            response = client.post(token_url, data=form)
    else:
        response = http_client.post(token_url, data=form)

    if not response.is_success:
        raise BoxAuthError(response.status_code, response.reason_phrase, response.text)

    return response.json()
