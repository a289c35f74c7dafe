"""
Tests for box/client.py and auth/box_auth.py - outbound HTTP calls
"""

from urllib.parse import parse_qs

import pytest


class TestBoxClientRequest:
    """Tests for BoxClient.request."""

    def test_no_token_raises(self, session, make_http_client):
        from box_mcp.box.client import BoxClient
        from box_mcp.errors import NotAuthenticatedError

        http_client, recorder = make_http_client()
        client = BoxClient(session, http_client=http_client)

        with pytest.raises(NotAuthenticatedError) as exc_info:
            client.request("/files/1")

        assert "No valid Box access token" in str(exc_info.value)
        assert recorder.requests == []

    def test_sends_bearer_and_json_headers(self, session, make_http_client):
        from box_mcp.box.client import BoxClient

        session.set_token("tok-abc")
        http_client, recorder = make_http_client((200, {"id": "1"}))
        client = BoxClient(session, http_client=http_client)

        result = client.request("/files/1")

        assert result == {"id": "1"}
        request = recorder.last_request
        assert request.method == "GET"
        assert str(request.url) == "https://api.box.com/2.0/files/1"
        assert request.headers["Authorization"] == "Bearer tok-abc"
        assert request.headers["Content-Type"] == "application/json"

    def test_post_sends_json_body(self, session, make_http_client):
        from box_mcp.box.client import BoxClient

        session.set_token("tok")
        http_client, recorder = make_http_client((200, {"answer": "ok"}))
        client = BoxClient(session, http_client=http_client)

        client.post("/ai/extract", {"prompt": "hi"})

        assert recorder.last_request.method == "POST"
        assert recorder.last_json() == {"prompt": "hi"}

    def test_caller_headers_override_defaults(self, session, make_http_client):
        from box_mcp.box.client import BoxClient

        session.set_token("tok")
        http_client, recorder = make_http_client((200, {}))
        client = BoxClient(session, http_client=http_client)

        client.request("/files/1", headers={"Content-Type": "text/plain", "X-Extra": "1"})

        assert recorder.last_request.headers["Content-Type"] == "text/plain"
        assert recorder.last_request.headers["X-Extra"] == "1"

    def test_non_2xx_raises_with_status_and_body(self, session, make_http_client):
        from box_mcp.box.client import BoxClient
        from box_mcp.errors import BoxAPIError

        session.set_token("tok")
        http_client, _ = make_http_client((404, '{"code":"not_found"}'))
        client = BoxClient(session, http_client=http_client)

        with pytest.raises(BoxAPIError) as exc_info:
            client.request("/files/missing")

        error = exc_info.value
        assert error.status_code == 404
        assert error.reason == "Not Found"
        assert error.body == '{"code":"not_found"}'
        assert str(error) == 'Box API error: 404 Not Found - {"code":"not_found"}'

    def test_uses_fallback_token(self, clock, make_http_client):
        from box_mcp.auth.session import TokenSession
        from box_mcp.box.client import BoxClient

        session = TokenSession(fallback_token="env-token", clock=clock)
        http_client, recorder = make_http_client((200, {}))

        BoxClient(session, http_client=http_client).request("/files/1")

        assert recorder.last_request.headers["Authorization"] == "Bearer env-token"

    def test_base_url_from_config(self, session, make_http_client, tmp_path, monkeypatch):
        from box_mcp.box.client import BoxClient
        from box_mcp.utils.config import reset_config

        config_file = tmp_path / "config.yaml"
        config_file.write_text("box:\n  api_base_url: https://box.example.test/2.0/\n")
        monkeypatch.setenv("CONFIG_FILE_PATH", str(config_file))
        reset_config()

        session.set_token("tok")
        http_client, recorder = make_http_client((200, {}))
        BoxClient(session, http_client=http_client).request("/files/1")

        assert str(recorder.last_request.url) == "https://box.example.test/2.0/files/1"


class TestExchangeJwtForToken:
    """Tests for the JWT-bearer token exchange."""

    def test_posts_form_to_token_endpoint(self, private_key_pem, make_http_client):
        from box_mcp.auth.box_auth import JWT_BEARER_GRANT_TYPE, exchange_jwt_for_token

        http_client, recorder = make_http_client(
            (200, {"access_token": "new-token", "expires_in": 3600, "token_type": "bearer"})
        )

        token_data = exchange_jwt_for_token(
            "client123", "secret456", private_key_pem, "kid789", "user", "42",
            http_client=http_client,
        )

        assert token_data["access_token"] == "new-token"
        request = recorder.last_request
        assert str(request.url) == "https://api.box.com/oauth2/token"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        form = parse_qs(request.content.decode())
        assert form["grant_type"] == [JWT_BEARER_GRANT_TYPE]
        assert form["client_id"] == ["client123"]
        assert form["client_secret"] == ["secret456"]
        assert len(form["assertion"][0].split(".")) == 3

    def test_error_response_raises(self, private_key_pem, make_http_client):
        from box_mcp.auth.box_auth import exchange_jwt_for_token
        from box_mcp.errors import BoxAuthError

        http_client, _ = make_http_client((400, '{"error":"invalid_grant"}'))

        with pytest.raises(BoxAuthError) as exc_info:
            exchange_jwt_for_token(
                "client123", "secret456", private_key_pem, "kid789", "user", "42",
                http_client=http_client,
            )

        assert str(exc_info.value) == 'Authentication failed: 400 Bad Request - {"error":"invalid_grant"}'
