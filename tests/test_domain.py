"""Task, error taxonomy and Result value semantics."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.domain.errors import (
    ITEM_NOT_FOUND,
    DecodingError,
    ItemNotFound,
    TransportError,
    UnknownApiError,
)
from core.domain.models import Task
from core.domain.result import Failure, Success


class TestTask:
    def test_accepts_wire_names(self) -> None:
        task = Task.model_validate({"id": "7", "userId": "3", "title": "Buy milk", "finished": True})

        assert task == Task(id="7", owner_id="3", title="Buy milk", finished=True)

    def test_to_wire_uses_service_field_names(self) -> None:
        task = Task(id="1", owner_id="2", title="Finish this kata", finished=False)

        assert task.to_wire() == {"id": "1", "userId": "2", "title": "Finish this kata", "finished": False}

    def test_numeric_ids_are_coerced_to_strings(self) -> None:
        task = Task.model_validate({"id": 1, "userId": 1, "title": "x", "finished": False})

        assert task.id == "1"
        assert task.owner_id == "1"

    def test_unknown_fields_are_ignored(self) -> None:
        task = Task.model_validate(
            {"id": "1", "userId": "1", "title": "x", "finished": True, "completedAt": None}
        )

        assert task == Task(id="1", owner_id="1", title="x", finished=True)

    def test_is_immutable(self) -> None:
        task = Task(id="1", owner_id="1", title="x", finished=False)

        with pytest.raises(ValidationError):
            task.title = "y"

    def test_missing_finished_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Task.model_validate({"id": "1", "userId": "1", "title": "x"})

    def test_missing_title_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Task.model_validate({"id": "1", "userId": "1"})


class TestErrors:
    def test_structural_equality(self) -> None:
        assert UnknownApiError(code=500) == UnknownApiError(code=500)
        assert UnknownApiError(code=500) != UnknownApiError(code=502)
        assert ItemNotFound() == ITEM_NOT_FOUND

    def test_variants_are_distinct(self) -> None:
        errors = [ITEM_NOT_FOUND, UnknownApiError(code=500), TransportError(), DecodingError()]

        assert len({e.kind for e in errors}) == 4
        assert len(set(errors)) == 4

    def test_human_readable(self) -> None:
        assert str(UnknownApiError(code=418)) == "Unknown API error (HTTP 418)"
        assert str(TransportError(reason="timeout")) == "Transport error: timeout"


class TestResult:
    def test_success_arm(self) -> None:
        result = Success(3)

        assert result.is_success and not result.is_failure
        assert result.value_or_none() == 3
        assert result.error_or_none() is None

    def test_failure_arm(self) -> None:
        result = Failure(ITEM_NOT_FOUND)

        assert result.is_failure and not result.is_success
        assert result.value_or_none() is None
        assert result.error_or_none() == ITEM_NOT_FOUND

    def test_arms_never_compare_equal(self) -> None:
        assert Success(None) != Failure(None)

    def test_pattern_matching(self) -> None:
        def describe(result) -> str:
            match result:
                case Success(value):
                    return f"ok:{value}"
                case Failure(UnknownApiError(code=code)):
                    return f"http:{code}"
                case Failure(ItemNotFound()):
                    return "missing"
            return "other"

        assert describe(Success(1)) == "ok:1"
        assert describe(Failure(UnknownApiError(code=500))) == "http:500"
        assert describe(Failure(ITEM_NOT_FOUND)) == "missing"
        assert describe(Failure(TransportError())) == "other"
