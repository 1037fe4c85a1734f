"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import builtins
import json

import pytest

from grant_tracker.kernel.errors import (
    ApplicationError,
    BaseError,
    DecodeError,
    DomainError,
    InfrastructureError,
    SaveFailedError,
    SourceUnavailableError,
    TimeoutError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {
            "code": "my_code",
            "category": "internal",
            "message": "m",
            "retryable": False,
            "detail": {"key": "val"},
        }

    def test_detail_is_copied(self) -> None:
        detail = {"key": "val"}
        err = BaseError("m", detail=detail)
        detail["key"] = "changed"
        assert err.detail == {"key": "val"}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestHierarchy:
    @pytest.mark.parametrize(
        ("cls", "parent"),
        [
            (DecodeError, DomainError),
            (TimeoutError, ApplicationError),
            (SourceUnavailableError, InfrastructureError),
            (SaveFailedError, InfrastructureError),
        ],
    )
    def test_parents(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)
        assert issubclass(cls, BaseError)

    def test_does_not_shadow_builtin_timeout(self) -> None:
        assert not issubclass(TimeoutError, builtins.TimeoutError)


class TestOutcomeClassification:
    @pytest.mark.parametrize(
        ("error", "category", "retryable"),
        [
            (DecodeError("invalid_padding"), "data", False),
            (TimeoutError("slow"), "application", True),
            (SourceUnavailableError("svc"), "infrastructure", True),
            (SaveFailedError("asylum_decisions.csv"), "infrastructure", False),
        ],
    )
    def test_category_and_retryable(self, error: BaseError, category: str, retryable: bool) -> None:
        payload = error.to_dict()
        assert payload["category"] == category
        assert payload["retryable"] is retryable


class TestDecodeError:
    def test_default_message_from_reason(self) -> None:
        assert DecodeError("invalid_length").message == "invalid length"

    def test_detail_carries_position(self) -> None:
        err = DecodeError("invalid_character", position=7, character="!")
        assert err.detail == {"reason": "invalid_character", "position": 7, "character": "!"}
        assert err.code == "decode_error"


class TestSourceUnavailableError:
    def test_default_message(self) -> None:
        err = SourceUnavailableError("https://data.example/asylum")
        assert err.message == "Dataset source 'https://data.example/asylum' is unavailable"
        assert err.code == "source_unavailable"

    def test_status_code_in_detail(self) -> None:
        err = SourceUnavailableError("svc", status_code=503)
        assert err.status_code == 503
        assert err.detail == {"source": "svc", "status_code": 503}


class TestSaveFailedError:
    def test_default_message(self) -> None:
        err = SaveFailedError("asylum_decisions.csv")
        assert err.filename == "asylum_decisions.csv"
        assert "asylum_decisions.csv" in err.message
        assert err.code == "save_failed"
