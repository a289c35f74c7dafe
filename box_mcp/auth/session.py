"""
Token Session Module

Holds the single in-memory Box access token and its expiry.
"""

import threading
import time
from datetime import datetime, timezone
from typing import Callable, Optional

from box_mcp.types import AuthStatusResponse, TokenSource
from box_mcp.utils.config import DEFAULT_EXPIRY_BUFFER_SECONDS, get_config
from box_mcp.utils.logger import get_logger

logger = get_logger(__name__)

# Singleton instance
_instance: Optional["TokenSession"] = None


def get_session() -> "TokenSession":
    """
    Get the process-wide TokenSession, built from configuration on first use.

    Returns:
        TokenSession: The shared session.
    """
    global _instance
    if _instance is None:
        config = get_config()
        _instance = TokenSession(
            fallback_token=config.get("box_access_token") or None,
            expiry_buffer_seconds=config.get(
                "token_expiry_buffer_seconds", DEFAULT_EXPIRY_BUFFER_SECONDS
            ),
        )
    return _instance


def format_timestamp(epoch_seconds: Optional[float]) -> Optional[str]:
    """Render an epoch timestamp as ISO-8601 UTC with millisecond precision."""
    if epoch_seconds is None:
        return None
    moment = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TokenSession:
    """
    In-memory holder for the current Box access token.

    A new token always replaces the previous one completely. When the stored
    token is missing or within ``expiry_buffer_seconds`` of expiring, the
    fallback token (BOX_ACCESS_TOKEN at startup) is used instead.
    """

    def __init__(
        self,
        fallback_token: Optional[str] = None,
        expiry_buffer_seconds: float = DEFAULT_EXPIRY_BUFFER_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.fallback_token = fallback_token
        self.expiry_buffer_seconds = expiry_buffer_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._access_token: Optional[str] = None
        self._expires_at: Optional[float] = None

    @property
    def expires_at(self) -> Optional[float]:
        return self._expires_at

    @property
    def has_stored_token(self) -> bool:
        return self._access_token is not None

    def set_token(self, value: str, expires_in: Optional[float] = None) -> None:
        """
        Store a token, replacing whatever was there.

        Args:
            value (str): The access token.
            expires_in (Optional[float]): Lifetime in seconds. Without it the
                token is treated as non-expiring.
        """
        with self._lock:
            self._access_token = value
            self._expires_at = self._clock() + expires_in if expires_in else None
        logger.info(
            "Stored Box access token (%s)",
            f"expires in {expires_in}s" if expires_in else "no expiry",
        )

    def clear(self) -> None:
        """Forget the stored token."""
        with self._lock:
            self._access_token = None
            self._expires_at = None

    def _active_token_locked(self) -> Optional[str]:
        # Caller holds self._lock
        if self._access_token is not None:
            if self._expires_at is None:
                return self._access_token
            if self._clock() < self._expires_at - self.expiry_buffer_seconds:
                return self._access_token
            logger.info("Stored Box access token is expiring, discarding it")
            self._access_token = None
            self._expires_at = None
        return self.fallback_token or None

    def _token_source_locked(self) -> TokenSource:
        if self._access_token is not None:
            return "stored_in_memory"
        if self.fallback_token:
            return "environment_variable"
        return "none"

    def get_active_token(self) -> Optional[str]:
        """
        Return the token to use for the next API call.

        Returns:
            Optional[str]: The stored token while it is outside the expiry
            buffer, else the fallback token, else None.
        """
        with self._lock:
            return self._active_token_locked()

    def token_source(self) -> TokenSource:
        with self._lock:
            return self._token_source_locked()

    def status(self) -> AuthStatusResponse:
        """
        Describe the current authentication state.

        Returns:
            AuthStatusResponse: Whether a token is active, where it comes
            from, and how long the stored token has left.
        """
        with self._lock:
            active = self._active_token_locked()
            source = self._token_source_locked()
            expires_at = self._expires_at
            now = self._clock()
        return {
            "authenticated": active is not None,
            "tokenSource": source,
            "expiresAt": format_timestamp(expires_at),
            "isExpired": now >= expires_at if expires_at is not None else None,
            "timeUntilExpiry": max(0, int(expires_at - now)) if expires_at is not None else None,
        }
