"""Response interpretation: raw (status, body) -> Result.

Status classification:
- 2xx: decode the body into the expected shape (or succeed with `None`).
- 404: `ItemNotFound`.
- anything else: `UnknownApiError(code)`.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from core.domain.errors import ITEM_NOT_FOUND, ApiError, DecodingError, UnknownApiError
from core.domain.models import Task
from core.domain.result import Failure, Result, Success
from core.interfaces.transport import RawResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

TASK = TypeAdapter(Task)
TASK_LIST = TypeAdapter(list[Task])

HTTP_NOT_FOUND = 404


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code <= 299


def interpret(response: RawResponse, shape: TypeAdapter[T] | None) -> Result[Any, ApiError]:
    """Map a raw response into `Success`/`Failure`.

    `shape=None` means no payload is expected (e.g. DELETE): any 2xx body is
    ignored and the result is `Success(None)`.
    """

    status = response.status_code
    if is_success_status(status):
        if shape is None:
            return Success(None)
        return _decode(response.body, shape)
    if status == HTTP_NOT_FOUND:
        return Failure(ITEM_NOT_FOUND)
    return Failure(UnknownApiError(code=status))


def _decode(body: bytes | None, shape: TypeAdapter[T]) -> Result[T, ApiError]:
    if not body:
        logger.warning("Expected a JSON body but the response was empty")
        return Failure(DecodingError(reason="empty body"))
    try:
        return Success(shape.validate_json(body))
    except ValidationError as exc:
        logger.warning("Response body does not match the expected shape: %s", exc)
        first = exc.errors()[0]["msg"]
        return Failure(DecodingError(reason=f"{exc.error_count()} validation error(s): {first}"))
