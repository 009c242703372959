import pytest

from app.main import app
from app.api.routes.drafting import get_drafting_handler
from app.core.config import Settings, get_settings
from app.services.drafting.service import DraftingHandler

@pytest.mark.asyncio
async def test_health_check(client):
    """Test the health check endpoint."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "model" in data

@pytest.mark.asyncio
async def test_health_check_uses_injected_settings(client):
    app.dependency_overrides[get_settings] = lambda: Settings(
        _env_file=None, LLM_PROVIDER="groq", LLM_MODEL="llama-3.1-70b"
    )
    response = await client.get("/health")
    assert response.json() == {"status": "ok", "provider": "groq", "model": "llama-3.1-70b"}

@pytest.mark.asyncio
async def test_get_generate_is_health_probe(client):
    response = await client.get("/api/generate")
    assert response.status_code == 200
    assert response.json() == {"ok": True}

@pytest.mark.asyncio
async def test_post_generate_order(client, fake_llm):
    fake_llm.response = 'Sure! {"facts": {"village": "X"}, "orderText": "OFFICIAL ORDER"} Hope this helps.'
    response = await client.post("/api/generate", json={
        "mode": "order",
        "language": "english",
        "applicantName": "Sunita Patil",
        "facts": {"village": "X"},
        "texts": {"caseText": "case", "grText": "gr", "legalText": ""},
        "unknownKey": "ignored",
    })

    assert response.status_code == 200
    assert response.json() == {
        "facts": {"village": "X"}, "decisionText": None, "orderText": "OFFICIAL ORDER", "raw": None
    }
    assert len(fake_llm.calls) == 1

@pytest.mark.asyncio
async def test_post_generate_degraded(client, fake_llm):
    fake_llm.response = "I cannot comply."
    response = await client.post("/api/generate", json={"mode": "decision"})

    assert response.status_code == 200
    assert response.json()["raw"] == "I cannot comply."

@pytest.mark.asyncio
async def test_put_is_method_not_allowed(client, fake_llm):
    response = await client.put("/api/generate", json={"mode": "order"})

    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}
    assert fake_llm.calls == []

@pytest.mark.asyncio
async def test_invalid_json_body(client, fake_llm):
    response = await client.post(
        "/api/generate", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid JSON body"
    assert fake_llm.calls == []

@pytest.mark.asyncio
async def test_empty_body_is_accepted(client, fake_llm):
    fake_llm.response = '{"facts": null, "orderText": "आदेश"}'
    response = await client.post("/api/generate")

    assert response.status_code == 200
    assert response.json()["orderText"] == "आदेश"

@pytest.mark.asyncio
async def test_missing_credential_returns_500_without_call(client, unconfigured_settings, fake_llm):
    app.dependency_overrides[get_drafting_handler] = lambda: DraftingHandler(unconfigured_settings, client=fake_llm)
    response = await client.post("/api/generate", json={"mode": "order"})

    assert response.status_code == 500
    assert "error" in response.json()
    assert fake_llm.calls == []
