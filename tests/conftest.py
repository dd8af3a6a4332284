import json

import httpx
import pytest

from starr.application.domain import Config

API_KEY = "0123456789abcdef"


class Recorder:
    """Answers every request with one canned response and keeps what was sent."""

    def __init__(self, status: int = 200, payload=None, content: bytes = None, headers=None):
        self.status = status
        self.payload = payload
        self.content = content
        self.headers = headers or {}
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status, content=self.content, headers=self.headers)
        if self.payload is None:
            return httpx.Response(self.status, headers=self.headers)
        return httpx.Response(self.status, json=self.payload, headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


def make_handle(handle_cls, recorder, url: str = "http://starr.local:7878", **config):
    client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    return handle_cls(Config(url=url, api_key=API_KEY, **config), client=client)


@pytest.fixture
def recorder():
    return Recorder()
