"""Anthropic client tests — SDK error mapping and single-attempt configuration.

Invariants:
    - Every SDK failure surfaces as UpstreamError with a kind
    - Provider error envelopes surface their message
    - SDK retries disabled

Design Decisions:
    - Patch messages.create on the wrapped AsyncAnthropic (no network)
"""

import anthropic
import httpx
import pytest

from prenatal_api.config import Settings
from prenatal_api.core.errors import UpstreamError
from prenatal_api.infrastructure import anthropic_client as client_module
from prenatal_api.infrastructure.anthropic_client import AnthropicMessagesClient

from tests.services.mock_anthropic import text_response

_URL = "https://api.anthropic.com/v1/messages"


def _client(monkeypatch, outcome):
    c = AnthropicMessagesClient("sk-ant-test-fake-key", "claude-sonnet-4-20250514")
    calls = []

    async def fake_create(**kwargs):
        calls.append(kwargs)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    monkeypatch.setattr(c.client.messages, "create", fake_create)
    return c, calls


def _status_error(cls, status, body):
    request = httpx.Request("POST", _URL)
    response = httpx.Response(status, request=request, json=body)
    return cls("API request failed", response=response, body=body)


def test_sdk_retries_disabled():
    c = AnthropicMessagesClient("sk-ant-test-fake-key", "claude-sonnet-4-20250514")
    assert c.client.max_retries == 0


async def test_success_passes_model_and_budget(monkeypatch):
    c, calls = _client(monkeypatch, text_response("{}"))
    messages = [{"role": "user", "content": "hi"}]
    response = await c.create_message(max_tokens=1000, messages=messages)

    assert response.content[0].text == "{}"
    assert calls == [{
        "model": "claude-sonnet-4-20250514",
        "max_tokens": 1000,
        "messages": messages,
    }]


async def test_connection_error_mapped(monkeypatch):
    error = anthropic.APIConnectionError(request=httpx.Request("POST", _URL))
    c, _ = _client(monkeypatch, error)
    with pytest.raises(UpstreamError) as exc:
        await c.create_message(max_tokens=10, messages=[])
    assert exc.value.kind == "connection_error"


async def test_timeout_mapped(monkeypatch):
    error = anthropic.APITimeoutError(request=httpx.Request("POST", _URL))
    c, _ = _client(monkeypatch, error)
    with pytest.raises(UpstreamError) as exc:
        await c.create_message(max_tokens=10, messages=[])
    assert exc.value.kind == "timeout"


async def test_error_envelope_message_surfaced(monkeypatch):
    body = {"type": "error", "error": {"type": "overloaded_error", "message": "Overloaded"}}
    c, _ = _client(monkeypatch, _status_error(anthropic.InternalServerError, 529, body))
    with pytest.raises(UpstreamError) as exc:
        await c.create_message(max_tokens=10, messages=[])
    assert exc.value.kind == "status_error"
    assert exc.value.status_code == 529
    assert "Overloaded" in exc.value.message


async def test_auth_error_mapped(monkeypatch):
    body = {"type": "error", "error": {"type": "authentication_error", "message": "invalid x-api-key"}}
    c, _ = _client(monkeypatch, _status_error(anthropic.AuthenticationError, 401, body))
    with pytest.raises(UpstreamError) as exc:
        await c.create_message(max_tokens=10, messages=[])
    assert exc.value.status_code == 401
    assert "invalid x-api-key" in exc.value.message


# -- Process-wide client lifecycle ---------------------------------------------


async def test_init_without_key_leaves_fallback_mode(monkeypatch):
    monkeypatch.setattr(client_module, "messages_client", None)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    settings = Settings(_env_file=None, anthropic_api_key="  ")
    assert client_module.init_messages_client(settings) is None
    assert client_module.get_messages_client() is None


async def test_init_with_key_then_close(monkeypatch):
    monkeypatch.setattr(client_module, "messages_client", None)
    settings = Settings(
        _env_file=None,
        anthropic_api_key="sk-ant-test-fake-key",
        anthropic_model="m",
        anthropic_timeout_seconds=30.0,
    )
    created = client_module.init_messages_client(settings)
    assert client_module.get_messages_client() is created
    assert created.model == "m"

    await client_module.close_messages_client()
    assert client_module.get_messages_client() is None
