# /tests/test_ai_router.py

import httpx
import pytest

from app.services import openrouter_service
from app.services.demo_content import generate_demo_content

GENERATE_URL = "/api/ai/generate"


def test_title_without_key_returns_demo_content(client, auth_headers):
    response = client.post(GENERATE_URL, json={"prompt": "X", "type": "title"}, headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["demo"] is True
    assert body["type"] == "title"
    assert "X" in body["text"]
    assert body["text"] == generate_demo_content("X", "title")
    assert body["timestamp"]


@pytest.mark.parametrize("payload", [{"prompt": "Topic"}, {"type": "title"}, {}, {"prompt": "", "type": "title"}])
def test_missing_fields_are_rejected(client, auth_headers, payload):
    response = client.post(GENERATE_URL, json=payload, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Prompt and type are required"}


def test_request_without_body_is_missing_fields(client, auth_headers):
    response = client.post(GENERATE_URL, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Prompt and type are required"}


def test_unknown_type_is_rejected(client, auth_headers):
    response = client.post(GENERATE_URL, json={"prompt": "Topic", "type": "bogus"}, headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid generation type"}


def test_requires_a_token(client):
    response = client.post(GENERATE_URL, json={"prompt": "Topic", "type": "title"})
    assert response.status_code == 401
    assert response.json() == {"error": "No token provided"}


def test_rejects_a_forged_token(client):
    response = client.post(
        GENERATE_URL,
        json={"prompt": "Topic", "type": "title"},
        headers={"Authorization": "Bearer not-a-real-token"},
    )
    assert response.status_code == 403
    assert response.json() == {"error": "Invalid token"}


def test_live_response_is_not_demo(client, auth_headers, monkeypatch, mocker):
    monkeypatch.setenv("OPENROUTER_API_KEY", "test-key")
    real_async_client = httpx.AsyncClient

    def handler(request):
        return httpx.Response(200, json={"choices": [{"message": {"content": "Live meta description."}}]})

    mocker.patch.object(
        openrouter_service.httpx,
        "AsyncClient",
        side_effect=lambda **kwargs: real_async_client(transport=httpx.MockTransport(handler)),
    )

    response = client.post(GENERATE_URL, json={"prompt": "Hiking", "type": "meta"}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["demo"] is False
    assert response.json()["text"] == "Live meta description."


def test_provider_outage_still_returns_200(client, auth_headers, monkeypatch, mocker):
    monkeypatch.setenv("OPENROUTER_API_KEY", "test-key")
    real_async_client = httpx.AsyncClient
    mocker.patch.object(
        openrouter_service.httpx,
        "AsyncClient",
        side_effect=lambda **kwargs: real_async_client(
            transport=httpx.MockTransport(lambda request: httpx.Response(502))
        ),
    )

    response = client.post(GENERATE_URL, json={"prompt": "Hiking", "type": "section"}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["demo"] is True
    assert response.json()["text"] == generate_demo_content("Hiking", "section")


def test_unexpected_error_returns_500(client, auth_headers, mocker):
    mocker.patch("app.services.prompt_library.build_messages", side_effect=RuntimeError("template exploded"))

    response = client.post(GENERATE_URL, json={"prompt": "Hiking", "type": "full"}, headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate content", "details": "template exploded"}
