import importlib.util
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from chat_cards.webhook import WebhookSender

API_MAIN = Path(__file__).resolve().parents[1] / "services" / "api" / "main.py"


@pytest.fixture
def api(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "dev")
    monkeypatch.delenv("PROJECT_ID", raising=False)
    monkeypatch.delenv("CARD_WEBHOOK_URL", raising=False)
    spec = importlib.util.spec_from_file_location("chat_cards_api_main", API_MAIN)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def client(api):
    return TestClient(api.app)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_validate_accepts_sample(client, contact_card):
    response = client.post("/v1/messages:validate", json=contact_card)

    assert response.status_code == 200
    assert response.json() == {"valid": True, "error": None}


def test_validate_reports_first_error(client, contact_card):
    widget = contact_card["cardsV2"][0]["card"]["sections"][0]["widgets"][0]
    widget["divider"] = {}

    body = client.post("/v1/messages:validate", json=contact_card).json()

    assert body["valid"] is False
    assert body["error"]["kind"] == "AmbiguousUnion"
    assert body["error"]["path"] == "cardsV2[0].card.sections[0].widgets[0]"
    assert body["error"]["alternatives"] == ["decoratedText", "divider"]


def test_canonicalize_normalizes_enum_aliases(client):
    payload = {"cardsV2": [{"card": {"header": {"imageType": 1, "badge": "new"}}}]}

    response = client.post("/v1/messages:canonicalize", json=payload)

    assert response.status_code == 200
    assert response.json() == {"cardsV2": [{"card": {"header": {"imageType": "CIRCLE", "badge": "new"}}}]}


def test_canonicalize_rejects_invalid_message(client):
    payload = {"cardsV2": [{"card": {"sections": [{"widgets": [{"dateTimePicker": {"valueMsEpoch": "soon"}}]}]}}]}

    response = client.post("/v1/messages:canonicalize", json=payload)

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["kind"] == "MalformedInteger"
    assert error["path"] == "cardsV2[0].card.sections[0].widgets[0].dateTimePicker.valueMsEpoch"
    assert error["raw"] == "soon"


def test_send_requires_webhook_url(client, contact_card):
    response = client.post("/v1/messages:send", json=contact_card)

    assert response.status_code == 503


def test_send_posts_to_webhook(api, client, monkeypatch, contact_card):
    received = []

    def handler(request: httpx.Request) -> httpx.Response:
        received.append(request)
        return httpx.Response(200, json={})

    sender = WebhookSender("https://chat.example.com/hook", transport=httpx.MockTransport(handler))
    monkeypatch.setattr(api, "webhook_sender", sender)

    response = client.post("/v1/messages:send", json=contact_card)

    assert response.status_code == 200
    assert response.json() == {"status": "sent", "webhook_status": 200}
    assert len(received) == 1


def test_send_maps_webhook_failure_to_bad_gateway(api, client, monkeypatch, contact_card):
    sender = WebhookSender(
        "https://chat.example.com/hook",
        transport=httpx.MockTransport(lambda request: httpx.Response(403, json={"error": "forbidden"})),
    )
    monkeypatch.setattr(api, "webhook_sender", sender)

    response = client.post("/v1/messages:send", json=contact_card)

    assert response.status_code == 502


def test_malformed_json_body_is_rejected(client):
    response = client.post(
        "/v1/messages:validate",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "not valid JSON" in response.json()["detail"]


def test_trace_id_is_prefixed_with_project(api, client, monkeypatch):
    recorded = []
    monkeypatch.setattr(api, "PROJECT_ID", "my-project")
    monkeypatch.setattr(api, "set_trace_id", recorded.append)

    client.get("/health", headers={"X-Cloud-Trace-Context": "abc123/1;o=1"})

    assert recorded == ["projects/my-project/traces/abc123"]


def test_trace_id_without_project_is_bare(api, client, monkeypatch):
    recorded = []
    monkeypatch.setattr(api, "set_trace_id", recorded.append)

    client.get("/health", headers={"X-Cloud-Trace-Context": "abc123/1;o=1"})

    assert recorded == ["abc123"]
