"""Shared test fixtures: a recording fake server on top of httpx.MockTransport."""

from __future__ import annotations

import json
from collections import deque
from pathlib import Path
from typing import Any

import httpx
import pytest

from adapters.http_client import HttpxTransport, build_client
from core.domain.models import Task
from core.services.todo_client import TodoApiClient

RESOURCES = Path(__file__).parent / "resources"

BASE_URL = "http://todo.test"

TASK_ID = "1"
TASK_CREATED = Task(id="1", owner_id="2", title="Finish this kata", finished=False)


def load_resource(name: str) -> bytes:
    return (RESOURCES / name).read_bytes()


def load_resource_json(name: str) -> Any:
    return json.loads(load_resource(name))


class MockServer:
    """Queue of canned responses plus a log of every request received."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: deque[httpx.Response] = deque()

    def enqueue(
        self,
        status_code: int = 200,
        fixture: str | None = None,
        *,
        content: bytes | None = None,
    ) -> None:
        if fixture:
            content = load_resource(fixture)
        content = content or b""
        headers = {"Content-Type": "application/json"} if content else {}
        self._responses.append(httpx.Response(status_code, content=content, headers=headers))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.popleft()
        return httpx.Response(200)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached the server"
        return self.requests[-1]

    def http_client(self) -> httpx.Client:
        return build_client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def server() -> MockServer:
    return MockServer()


@pytest.fixture
def api_client(server: MockServer):
    client = TodoApiClient(BASE_URL, transport=HttpxTransport(server.http_client()))
    yield client
    client.close()
