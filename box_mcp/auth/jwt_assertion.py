"""
JWT Assertion Module

Builds the signed RS256 assertion exchanged at the Box token endpoint
for server-to-server (JWT) authentication.
"""

import secrets
import time
from typing import Optional

from jose import jwt
from jose.exceptions import JOSEError

from box_mcp.errors import JWTAssertionError
from box_mcp.types import SubjectType
from box_mcp.utils.config import BOX_OAUTH_URL

ALGORITHM = "RS256"
ASSERTION_LIFETIME_SECONDS = 60


def create_jwt_assertion(
    client_id: str,
    client_secret: str,
    private_key: str,
    public_key_id: str,
    subject_type: SubjectType,
    subject_id: str,
    audience: str = BOX_OAUTH_URL,
    now: Optional[int] = None,
) -> str:
    """
    Create a signed JWT assertion for the Box JWT-bearer grant.

    Args:
        client_id (str): Box application client ID (``iss``).
        client_secret (str): Box application client secret. Sent alongside
            the assertion, not part of it.
        private_key (str): PEM encoded RSA private key.
        public_key_id (str): Key ID registered in the Box Developer Console (``kid``).
        subject_type (str): ``user`` or ``enterprise``.
        subject_id (str): User or enterprise ID to act as (``sub``).
        audience (str): Token endpoint URL (``aud``).
        now (Optional[int]): Issue time in epoch seconds. Defaults to the current time.

    Returns:
        str: The compact ``<header>.<claims>.<signature>`` token.

    Raises:
        JWTAssertionError: If the private key cannot be used for RS256 signing.
    """
    issued_at = int(time.time()) if now is None else int(now)

    claims = {
        "iss": client_id,
        "sub": subject_id,
        "box_sub_type": subject_type,
        "aud": audience,
        "jti": secrets.token_hex(16),
        "exp": issued_at + ASSERTION_LIFETIME_SECONDS,
        "iat": issued_at,
    }

    try:
        return jwt.encode(claims, private_key, algorithm=ALGORITHM, headers={"kid": public_key_id})
    except JOSEError as e:
        raise JWTAssertionError(f"Invalid private key: {e}") from e
