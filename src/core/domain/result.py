"""Disjoint success/failure result.

`Result[T, E]` is either `Success(value)` or `Failure(error)`, never both.
Both arms are frozen dataclasses, so they compare structurally and work with
`match` statements:

    match client.get_task("1"):
        case Success(task):
            ...
        case Failure(ItemNotFound()):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def value_or_none(self) -> T:
        return self.value

    def error_or_none(self) -> None:
        return None


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def value_or_none(self) -> None:
        return None

    def error_or_none(self) -> E:
        return self.error


Result = Union[Success[T], Failure[E]]
