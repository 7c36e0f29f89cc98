"""
Shared pytest fixtures for automate_api tests.

- Settings built without reading .env
- FakePrompter: scripted stand-in for the console
- mock_transport: httpx.MockTransport that records requests
"""

import json
from dataclasses import dataclass, field
from typing import Callable, List

import httpx
import pytest

from automate_api.config.settings import Settings
from automate_api.domain.models.credential import Credential
from automate_api.infra.client.automate_client import AutomateClient
from automate_api.infra.persistence.session_repository_memory import MemorySessionRepository


@dataclass
class FakePrompter:
    """Returns canned answers and records how often each prompt was shown."""
    servers: List[str] = field(default_factory=list)
    credentials: List[Credential] = field(default_factory=list)
    codes: List[str] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)
    calls: List[str] = field(default_factory=list)

    def server(self) -> str:
        self.calls.append("server")
        return self.servers.pop(0)

    def credential(self) -> Credential:
        self.calls.append("credential")
        return self.credentials.pop(0)

    def two_factor_code(self) -> str:
        self.calls.append("two_factor_code")
        return self.codes.pop(0)

    def notify(self, message: str) -> None:
        self.messages.append(message)


class RecordingTransport:
    """Wraps httpx.MockTransport and keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        self.transport = httpx.MockTransport(_handler)

    def bodies(self) -> list:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def repository():
    return MemorySessionRepository()


@pytest.fixture
def prompter():
    return FakePrompter()


@pytest.fixture
def credential():
    return Credential(username="admin", password="s3cret")


@pytest.fixture
def make_client(settings):
    def _make(handler: Callable[[httpx.Request], httpx.Response]):
        recorder = RecordingTransport(handler)
        return AutomateClient(settings, transport=recorder.transport), recorder

    return _make
