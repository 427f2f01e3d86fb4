"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from slog_journal.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    JournalUnavailableError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert str(err) == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "slog_journal_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert err.cause is cause

    def test_cause_defaults_to_none(self) -> None:
        assert BaseError("m").cause is None

    def test_to_json(self) -> None:
        parsed = json.loads(BaseError("oops", code="oops", detail={"x": 1}).to_json())
        assert parsed == {"code": "oops", "message": "oops", "detail": {"x": 1}}

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class TestHierarchy:
    @pytest.mark.parametrize(
        ("cls", "code"),
        [
            (ApplicationError, "application_error"),
            (InfrastructureError, "infrastructure_error"),
        ],
    )
    def test_codes(self, cls: type[BaseError], code: str) -> None:
        err = cls("m")
        assert isinstance(err, BaseError)
        assert err.code == code

    def test_journal_unavailable(self) -> None:
        err = JournalUnavailableError("socket missing")
        assert isinstance(err, InfrastructureError)
        assert err.reason == "socket missing"
        assert err.code == "journal_unavailable"
        assert "socket missing" in str(err)

    def test_journal_unavailable_keeps_cause(self) -> None:
        cause = ImportError("no module named systemd")
        err = JournalUnavailableError("binding missing", cause=cause)
        assert err.cause is cause
