from typing import Any

import pytest

from reasoning_client import (
    ClientSettings,
    MockClient,
    ReasoningEffort,
    ResponsesClient,
    create_client,
)
from reasoning_client.types import Error, Success


def test_create_client_uses_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "k")
    client = create_client()
    assert isinstance(client, ResponsesClient)
    assert client.api_key == "k"


def test_create_client_defaults_to_mock(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    assert isinstance(create_client(), MockClient)


def test_create_client_prefers_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    client = create_client(settings=ClientSettings(api_key="from-settings"))
    assert isinstance(client, ResponsesClient)
    assert client.api_key == "from-settings"


def test_create_client_explicit_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "k")
    assert isinstance(create_client("mock"), MockClient)


def test_create_client_openai_without_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(RuntimeError):
        create_client("OPENAI")


def test_mock_client_default_document() -> None:
    client = MockClient()
    result = client.send_reasoning_request("prompt", ReasoningEffort.HIGH)
    assert isinstance(result, Success)
    assert result.text == "mock answer"
    assert result.reasoning_effort == "high"
    assert result.reasoning_trace == "mock trace"
    assert list(client.requests) == [
        ([{"role": "user", "content": "prompt"}], ReasoningEffort.HIGH)
    ]


def test_mock_client_custom_document() -> None:
    doc: dict[str, Any] = {"error": {"message": "boom", "code": "server_error"}}
    client = MockClient(doc)
    result = client.send([{"role": "user", "content": "x"}], ReasoningEffort.LOW)
    assert isinstance(result, Error)
    assert result.code == "server_error"
    assert client.send_for_text("x", ReasoningEffort.LOW) is None


def test_mock_client_keeps_bounded_history() -> None:
    client = MockClient(history=2)
    for prompt in ("a", "b", "c"):
        client.send_reasoning_request(prompt, ReasoningEffort.LOW)
    assert [messages[0]["content"] for messages, _ in client.requests] == ["b", "c"]
