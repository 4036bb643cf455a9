"""Health probe tests — liveness and content-source readiness."""

from tests.services.mock_anthropic import MockAnthropicClient


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_ready_in_fallback_mode(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["content_source"] == "fallback"


async def test_ready_with_model_configured(client, use_model_client):
    use_model_client(MockAnthropicClient([]))
    res = await client.get("/api/v1/health/ready")
    assert res.json()["checks"]["content_source"] == "model"
