"""
Tests for the HTTP layer using FastAPI's TestClient
"""

import json

import pytest
from fastapi.testclient import TestClient

from gym_agent.api import app as app_module
from gym_agent.api.routes import chat as chat_routes

from conftest import ai_text, ai_tool_calls, tool_call


def _sse_payloads(body: str):
    return [line[len("data: "):] for line in body.split("\n") if line.startswith("data: ")]


@pytest.fixture
def client():
    return TestClient(app_module.app)


@pytest.fixture
def use_agent(monkeypatch, make_agent):
    """Route handlers get a scripted agent instead of the shared one"""

    def _use(responses, **kwargs):
        agent, llm = make_agent(responses, **kwargs)
        monkeypatch.setattr(chat_routes, "get_agent", lambda: agent)
        return agent, llm

    return _use


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "gym-agent-api", "version": "1.0.0"}


def test_root_lists_endpoints(client):
    body = client.get("/").json()
    assert body["endpoints"]["chat"] == "/chat"


def test_chat_streams_tokens_then_done(client, use_agent):
    use_agent([
        ai_tool_calls(tool_call("search_product", {"query": "treadmill"})),
        ai_text("Hajur, the Cardio Pro T90 is in stock."),
    ])

    response = client.post("/chat", json={"message": "treadmill?", "threadId": "api-1"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/event-stream")
    assert response.headers["cache-control"] == "no-cache"

    payloads = _sse_payloads(response.text)
    assert payloads[-1] == "[DONE]"
    assert payloads.count("[DONE]") == 1

    events = [json.loads(p) for p in payloads[:-1]]
    tokens = [e["content"] for e in events if e["type"] == "token"]
    assert "".join(tokens) == "Hajur, the Cardio Pro T90 is in stock."
    assert {"type": "tool_started", "tool": "search_product"} in events


def test_chat_without_tool_events(client, use_agent):
    use_agent(
        [ai_tool_calls(tool_call("search_company", {})), ai_text("We are in Butwal.")],
        emit_tool_events=False,
    )

    payloads = _sse_payloads(client.post("/chat", json={"message": "where?", "threadId": "api-2"}).text)

    assert all(json.loads(p)["type"] == "token" for p in payloads[:-1])


def test_chat_defaults_thread_id(client, use_agent):
    agent, _ = use_agent([ai_text("Namaste!")])

    client.post("/chat", json={"message": "hi"})

    history = client.get("/chat/default/history").json()
    assert history["threadId"] == "default"
    assert history["messages"] == [
        {"role": "user", "content": "hi"},
        {"role": "assistant", "content": "Namaste!"},
    ]


def test_chat_model_failure_mid_stream(client, use_agent):
    use_agent([RuntimeError("service unavailable")])

    response = client.post("/chat", json={"message": "hi", "threadId": "api-3"})

    assert response.status_code == 200
    payloads = _sse_payloads(response.text)
    assert payloads == ['{"type":"error","content":"Stream interrupted"}', "[DONE]"]


def test_chat_malformed_body_returns_500(client, use_agent):
    use_agent([])

    response = client.post("/chat", content=b"{not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}


def test_chat_missing_message_returns_500(client, use_agent):
    use_agent([])

    response = client.post("/chat", json={"threadId": "api-4"})

    assert response.status_code == 500
    assert "error" in response.json()


def test_chat_agent_construction_failure_returns_500(client, monkeypatch):
    def broken_agent():
        raise ValueError("OpenAI API key required")

    monkeypatch.setattr(chat_routes, "get_agent", broken_agent)

    response = client.post("/chat", json={"message": "hi", "threadId": "api-5"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}


def test_chat_complete_returns_reply(client, use_agent):
    use_agent([
        ai_tool_calls(tool_call("get_products", {"number": "2"})),
        ai_text("Here are two products."),
    ])

    response = client.post("/chat/complete", json={"message": "show 2 products", "threadId": "api-6"})

    assert response.status_code == 200
    assert response.json() == {"reply": "Here are two products.", "threadId": "api-6"}


def test_chat_complete_model_failure_returns_500(client, use_agent):
    use_agent([RuntimeError("service unavailable")])

    response = client.post("/chat/complete", json={"message": "hi", "threadId": "api-7"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}


def test_history_skips_tool_traffic(client, use_agent):
    use_agent([
        ai_tool_calls(tool_call("search_company", {})),
        ai_text("We are in Butwal."),
    ])

    client.post("/chat/complete", json={"message": "where are you?", "threadId": "api-8"})
    history = client.get("/chat/api-8/history").json()

    assert history["messages"] == [
        {"role": "user", "content": "where are you?"},
        {"role": "assistant", "content": "We are in Butwal."},
    ]
