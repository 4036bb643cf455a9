"""Root conftest — shared test configuration and HTTP client fixtures.

Invariants:
    - Tests never reach the real Anthropic API: the messages client dependency is
      always overridden (None = fallback mode, or a MockAnthropicClient)
    - Dependency overrides cleared after every test
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Ensure tests don't accidentally use a real API key
os.environ.pop("ANTHROPIC_API_KEY", None)

from prenatal_api.infrastructure.anthropic_client import get_messages_client  # noqa: E402
from prenatal_api.main import app  # noqa: E402


@pytest.fixture
async def client():
    """FastAPI test client in fallback mode (no API key configured)."""
    app.dependency_overrides[get_messages_client] = lambda: None
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def use_model_client():
    """Install a mock messages client for the duration of one test.

    Usage: use_model_client(MockAnthropicClient([...])) before issuing requests.
    """
    def _install(mock):
        app.dependency_overrides[get_messages_client] = lambda: mock
        return mock

    yield _install
    app.dependency_overrides.clear()
