from __future__ import annotations

import json
from typing import Any, Callable, List

import httpx
import pytest

from intercom import IntercomClient
from intercom.core.config import Settings

BASE_URL = "https://api.intercom.test"


class Recorder:
    """Collects the requests seen by a MockTransport and replies with a canned response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {"type": "ok"}
        self.raw: bytes | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url=BASE_URL, max_pages=10, max_items=100)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_client(settings: Settings, recorder: Recorder) -> Callable[..., IntercomClient]:
    created: List[IntercomClient] = []

    def factory(extra_options: Any = None, username: str = "app", password: str = "key") -> IntercomClient:
        client = IntercomClient(username, password, extra_options, settings=settings)
        client.set_client(httpx.Client(transport=httpx.MockTransport(recorder)))
        created.append(client)
        return client

    yield factory
    for client in created:
        client.close()


@pytest.fixture
def client(make_client: Callable[..., IntercomClient]) -> IntercomClient:
    return make_client()
