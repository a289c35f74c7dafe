"""
Box API Client Module

Thin HTTP helper for the Box content API that injects the active bearer token.
"""

from typing import Any, Dict, Optional

import httpx

from box_mcp.auth.session import TokenSession
from box_mcp.errors import BoxAPIError, NotAuthenticatedError
from box_mcp.utils.config import get_config_value
from box_mcp.utils.logger import get_logger

logger = get_logger(__name__)


class BoxClient:
    """
    Sends requests to the Box API on behalf of a TokenSession.

    There is no retry logic and no timeout beyond httpx's defaults; transport
    and HTTP errors reach the caller as raised.
    """

    def __init__(
        self,
        session: TokenSession,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.session = session
        self.base_url = (base_url or get_config_value("box_api_base_url")).rstrip("/")
        self._http_client = http_client

    def request(
        self,
        path: str,
        method: str = "GET",
        json_body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Call a Box API endpoint and return its decoded JSON body.

        Args:
            path (str): Endpoint path relative to the API base, e.g. ``/files/123``.
            method (str): HTTP method. Defaults to GET.
            json_body (Optional[Any]): Body to send as JSON.
            headers (Optional[Dict[str, str]]): Extra headers; these override the defaults.

        Returns:
            Any: The parsed JSON response.

        Raises:
            NotAuthenticatedError: If no access token is available.
            BoxAPIError: If Box answers with a non-2xx status.
        """
        access_token = self.session.get_active_token()
        if not access_token:
            raise NotAuthenticatedError()

        request_headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }
        if headers:
            request_headers.update(headers)

        url = f"{self.base_url}{path}"
        logger.debug(f"Box API {method} {url}")

        if self._http_client is None:
            with httpx.Client() as client:
                response = client.request(method, url, json=json_body, headers=request_headers)
        else:
            response = self._http_client.request(method, url, json=json_body, headers=request_headers)

        if not response.is_success:
            logger.warning(f"Box API {method} {path} failed with {response.status_code}")
            raise BoxAPIError(response.status_code, response.reason_phrase, response.text)

        return response.json()

    def get(self, path: str, **kwargs: Any) -> Any:
        return self.request(path, method="GET", **kwargs)

    def post(self, path: str, json_body: Any, **kwargs: Any) -> Any:
        return self.request(path, method="POST", json_body=json_body, **kwargs)
