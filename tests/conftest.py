"""Shared fixtures: a fake ``requests.post`` and a configured TestClient."""

from __future__ import annotations

import json
from typing import Callable, List

import pytest
import requests
from fastapi.testclient import TestClient

from config import Settings


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, status_code: int = 200, payload: object = None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self) -> object:
        if self._payload is None:
            return json.loads(self.text)
        return self._payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)


def completion(content: object) -> FakeResponse:
    """A successful chat-completion body wrapping ``content``."""
    return FakeResponse(200, {"choices": [{"message": {"role": "assistant", "content": content}}]})


class FakePost:
    """Records each call and answers from a queue of responses or exceptions."""

    def __init__(self, responses: List[object]):
        self.responses = list(responses)
        self.calls: List[dict] = []

    def __call__(self, url, headers=None, json=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", model_name="test/model", timeout=5.0)


@pytest.fixture
def fake_post(monkeypatch: pytest.MonkeyPatch) -> Callable[[List[object]], FakePost]:
    """Install a FakePost as ``requests.post`` for the chat-completion client."""
    import interview.llm_openrouter as llm

    def install(responses: List[object]) -> FakePost:
        fake = FakePost(responses)
        monkeypatch.setattr(llm.requests, "post", fake)
        return fake

    return install


@pytest.fixture
def client_factory():
    """Build a TestClient whose handlers see the given Settings."""
    from app import app, get_settings

    def build(settings: Settings) -> TestClient:
        app.dependency_overrides[get_settings] = lambda: settings
        return TestClient(app)

    yield build
    app.dependency_overrides.clear()
