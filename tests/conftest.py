"""
Pytest configuration and fixtures for Box MCP tests.

Tools take their TokenSession and httpx client from setup_tools(), so tests
inject a fresh session with a controllable clock and an httpx.MockTransport
instead of patching module globals.
"""

import httpx
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa


@pytest.fixture(autouse=True)
def reset_state(monkeypatch, tmp_path):
    """Isolate tests from the developer's environment and config.yaml."""
    monkeypatch.delenv("BOX_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("MCP_SERVER_NAME", raising=False)
    monkeypatch.setenv("CONFIG_FILE_PATH", str(tmp_path / "missing-config.yaml"))

    import box_mcp.auth.session as session_module
    from box_mcp.utils.config import reset_config

    reset_config()
    session_module._instance = None

    yield

    reset_config()
    session_module._instance = None


class FakeClock:
    """Manually advanced replacement for time.time."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(clock):
    from box_mcp.auth.session import TokenSession
    return TokenSession(clock=clock)


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_key_pem(rsa_key):
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture
def make_http_client():
    """Build an httpx.Client backed by a RecordingTransport."""
    from helpers import RecordingTransport

    def factory(*responses):
        recorder = RecordingTransport(*responses)
        return httpx.Client(transport=httpx.MockTransport(recorder)), recorder
    return factory


@pytest.fixture
def anyio_backend():
    return "asyncio"
