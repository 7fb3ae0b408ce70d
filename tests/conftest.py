"""Shared fixtures: settings and a stub transport that never touches the network."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from assistant_proxy.config import Settings
from assistant_proxy.main import create_app
from assistant_proxy.schemas import TransportResponse


class StubTransport:
    """Records outbound calls and answers each one with a canned response."""

    def __init__(self, status_code=200, body=None, error=None):
        self.status_code = status_code
        self.body = {"id": "obj_1"} if body is None else body
        self.error = error
        self.calls = []
        self.closed = False

    def send(self, method, url, headers, body=None):
        self.calls.append({"method": method, "url": url, "headers": headers, "body": body})
        if self.error is not None:
            raise self.error
        return TransportResponse(status_code=self.status_code, body=self.body)

    def close(self):
        self.closed = True


ENV_NAMES = (
    "OPENAI_API_KEY",
    "OPENAI_ASSISTANT_ID",
    "OPENAI_ORG_ID",
    "OPENAI_BASE_URL",
    "OPENAI_BETA",
    "MESSAGES_LIMIT",
    "REQUEST_TIMEOUT",
    "LOG_LEVEL",
    "HOST",
    "PORT",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Run every test without proxy variables and outside any directory holding a .env."""
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    return Settings(
        openai_api_key="sk-test",
        openai_assistant_id="asst_test",
        openai_base_url="https://api.example.test/v1",
    )


@pytest.fixture
def transport():
    return StubTransport()


@pytest.fixture
def client(settings, transport):
    return TestClient(create_app(settings, transport))
