"""Pytest configuration and fixtures."""

import json
from typing import Callable, List, Optional

import httpx
import pytest

from pushtrigger.infrastructure.config import get_settings
from pushtrigger.infrastructure.http import CallbackClient


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without I/O")
    config.addinivalue_line("markers", "contract: wire-level tests against a mock transport")


class RecordingTransport(httpx.MockTransport):
    """
    Mock transport that records every request it receives.

    Responds with ``status_code`` and ``json_body`` unless a custom
    handler is given.
    """

    def __init__(
        self,
        status_code: int = 202,
        json_body: Optional[dict] = None,
        handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
    ):
        self.requests: List[httpx.Request] = []
        self.status_code = status_code
        self.json_body = json_body
        self._handler = handler
        super().__init__(self._record)

    def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._handler is not None:
            return self._handler(request)
        if self.json_body is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture
def transport() -> RecordingTransport:
    """Recording transport answering 202 Accepted."""
    return RecordingTransport()


@pytest.fixture
def callback_client(transport) -> CallbackClient:
    """Callback client opening per-call clients on the recording transport."""
    return CallbackClient(timeout=100.0, transport=transport)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Re-read settings from the environment in every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def transport_factory() -> Callable[..., RecordingTransport]:
    """Factory for recording transports with custom responses."""
    return RecordingTransport
