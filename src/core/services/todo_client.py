"""Public client for the remote todo service.

Each operation is a single stateless request/response cycle: build the
request, hand it to the transport, interpret the outcome. Failures come back
as `Failure(...)`; nothing is raised for HTTP or network problems.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping
from urllib.parse import quote

from pydantic import TypeAdapter

from adapters.http_client import HttpxTransport, build_client
from core.config import AppSettings
from core.domain.errors import ApiError, TransportError
from core.domain.models import Task
from core.domain.result import Failure, Result
from core.interfaces.transport import HttpTransport, TransportFailure
from core.services.interpreter import TASK, TASK_LIST, interpret

logger = logging.getLogger(__name__)

TODOS_PATH = "todos"

JSON_MEDIA_TYPE = "application/json"
_ACCEPT_HEADERS: Mapping[str, str] = {"Accept": JSON_MEDIA_TYPE}
_BODY_HEADERS: Mapping[str, str] = {"Accept": JSON_MEDIA_TYPE, "Content-Type": JSON_MEDIA_TYPE}


def join_url(base: str, *segments: str) -> str:
    """Join `base` and path segments with exactly one `/` between each part.

    >>> join_url("http://host/api/", "/todos", "1")
    'http://host/api/todos/1'
    """

    parts = [base.rstrip("/")]
    for segment in segments:
        cleaned = segment.strip("/")
        if cleaned:
            parts.append(cleaned)
    return "/".join(parts)


def _task_segment(task_id: str) -> str:
    if not task_id or not task_id.strip():
        raise ValueError("task_id must be a non-empty string")
    segment = quote(task_id, safe="")
    # "." and ".." would be collapsed as dot segments by URL normalisation.
    if set(segment) == {"."}:
        segment = segment.replace(".", "%2E")
    return segment


class TodoApiClient:
    """Facade over the `/todos` resource.

    The instance only holds the base endpoint and the transport, so a single
    client can serve concurrent independent calls.
    """

    def __init__(self, base_endpoint: str, *, transport: HttpTransport | None = None) -> None:
        if not base_endpoint or not base_endpoint.strip():
            raise ValueError("base_endpoint must be a non-empty URL")
        if transport is None:
            transport = HttpxTransport()
        self._base_endpoint = base_endpoint.strip()
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "TodoApiClient":
        client = build_client(
            timeout_seconds=settings.http_timeout_seconds,
            user_agent=settings.user_agent,
        )
        return cls(settings.base_url, transport=HttpxTransport(client))

    @property
    def base_endpoint(self) -> str:
        return self._base_endpoint

    def __repr__(self) -> str:
        return f"TodoApiClient(base_endpoint={self._base_endpoint!r})"

    def __enter__(self) -> "TodoApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def list_tasks(self) -> Result[list[Task], ApiError]:
        """GET /todos, order preserved as served."""

        return self._call("GET", join_url(self._base_endpoint, TODOS_PATH), shape=TASK_LIST)

    def get_task(self, task_id: str) -> Result[Task, ApiError]:
        """GET /todos/{id}."""

        url = join_url(self._base_endpoint, TODOS_PATH, _task_segment(task_id))
        return self._call("GET", url, shape=TASK)

    def add_task(self, task: Task) -> Result[Task, ApiError]:
        """POST /todos with the task as JSON; returns the created representation."""

        body = json.dumps(task.to_wire()).encode("utf-8")
        return self._call("POST", join_url(self._base_endpoint, TODOS_PATH), shape=TASK, body=body)

    def delete_task(self, task_id: str) -> Result[None, ApiError]:
        """DELETE /todos/{id}."""

        url = join_url(self._base_endpoint, TODOS_PATH, _task_segment(task_id))
        return self._call("DELETE", url, shape=None)

    def _call(
        self,
        method: str,
        url: str,
        *,
        shape: TypeAdapter[Any] | None,
        body: bytes | None = None,
    ) -> Result[Any, ApiError]:
        headers = _BODY_HEADERS if body is not None else _ACCEPT_HEADERS
        try:
            raw = self._transport.execute(method, url, headers, body)
        except TransportFailure as exc:
            logger.warning("Transport failure on %s %s: %s", method, url, exc)
            return Failure(TransportError(reason=str(exc)))
        return interpret(raw, shape)
