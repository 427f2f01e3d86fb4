"""Unit tests for JournalConverter."""
from __future__ import annotations

import re

import pytest

from slog_journal.config.settings import JournalSettings
from slog_journal.journal.converter import LOGGER_IDENTITY, JournalConverter, attrs_to_fields
from slog_journal.kernel.attrs import Attr, Level, Record, SourceLocation, group
from slog_journal.kernel.priority import Priority

_FIELD_RE = re.compile(r"^[A-Z0-9_]+$")


class BoomError(Exception):
    pass


def _record(*attrs: Attr, level: int = Level.INFO, source: SourceLocation | None = None) -> Record:
    return Record("M", Level(level), list(attrs), source=source)


def _convert(
    record: Record,
    settings: JournalSettings | None = None,
    *,
    add_source: bool = False,
    replace_attr=None,
    logger_attrs: list[Attr] | None = None,
    groups: list[str] | None = None,
) -> tuple[str, int, dict[str, str]]:
    converter = JournalConverter(settings)
    return converter(add_source, replace_attr, logger_attrs or [], groups or [], record)


# ---------------------------------------------------------------------------
# Basic output
# ---------------------------------------------------------------------------


class TestBasicConversion:
    def test_default_prefix(self) -> None:
        message, priority, fields = _convert(_record(Attr.of("uuid", "X")))
        assert message == "M"
        assert priority == Priority.INFO
        assert fields == {"SLOG_UUID": "X", "SLOG_LOGGER": LOGGER_IDENTITY}

    def test_logger_identity(self) -> None:
        assert LOGGER_IDENTITY.startswith("slog-journal:")

    def test_custom_prefix(self) -> None:
        _, _, fields = _convert(_record(Attr.of("uuid", "X")), JournalSettings(field_prefix="CUSTOM"))
        assert fields["CUSTOM_UUID"] == "X"
        assert fields["CUSTOM_LOGGER"] == LOGGER_IDENTITY
        assert "SLOG_UUID" not in fields

    @pytest.mark.parametrize("prefix", ["INVALID-PREFIX", "1INVALID_PREFIX"])
    def test_invalid_prefix_falls_back(self, prefix: str) -> None:
        _, _, fields = _convert(_record(Attr.of("uuid", "X")), JournalSettings(field_prefix=prefix))
        assert fields["SLOG_UUID"] == "X"

    def test_message_unchanged(self) -> None:
        record = Record("with %s and {braces}", Level.INFO)
        message, _, _ = _convert(record)
        assert message == "with %s and {braces}"

    def test_every_field_name_is_journal_safe(self) -> None:
        record = _record(
            Attr.of("ok", 1),
            Attr.of("%invalid_field%", "value"),
            Attr.of("nested", {"a-b": 1, "c": [1, {"d.e": 2}]}),
        )
        _, _, fields = _convert(record)
        assert all(_FIELD_RE.match(k) for k in fields)
        assert fields["SLOG_OK"] == "1"
        assert fields["SLOG_NESTED_C_0"] == "1"
        assert not any("INVALID" in k for k in fields)
        assert "SLOG_NESTED_A-B" not in fields

    @pytest.mark.parametrize("prefix", ["", "CUSTOM", "BAD-ONE"])
    def test_invalid_key_absent_under_any_prefix(self, prefix: str) -> None:
        _, _, fields = _convert(_record(Attr.of("%invalid%", "v")), JournalSettings(field_prefix=prefix))
        assert list(fields) == [k for k in fields if k.endswith("LOGGER")]

    def test_logger_identity_wins_over_attr(self) -> None:
        _, _, fields = _convert(_record(Attr.of("logger", "mine")))
        assert fields["SLOG_LOGGER"] == LOGGER_IDENTITY


# ---------------------------------------------------------------------------
# Attribute shapes
# ---------------------------------------------------------------------------


class TestAttributeShapes:
    def test_sequences_and_mappings(self) -> None:
        _, _, fields = _convert(_record(Attr.of("tags", ["a", "b"]), Attr.of("user", {"id": 7})))
        assert fields["SLOG_TAGS_0"] == "a"
        assert fields["SLOG_TAGS_1"] == "b"
        assert fields["SLOG_USER_ID"] == "7"

    def test_none_values_dropped_zero_kept(self) -> None:
        _, _, fields = _convert(_record(Attr.of("none", None), Attr.of("zero", 0), group("empty")))
        assert "SLOG_NONE" not in fields
        assert "SLOG_EMPTY" not in fields
        assert fields["SLOG_ZERO"] == "0"

    def test_duplicate_key_last_wins(self) -> None:
        _, _, fields = _convert(_record(Attr.of("k", "first"), Attr.of("k", "second")))
        assert fields["SLOG_K"] == "second"

    def test_groups_wrap_record_attrs(self) -> None:
        _, _, fields = _convert(_record(Attr.of("uuid", "X")), groups=["group"])
        assert fields["SLOG_GROUP_UUID"] == "X"

    def test_logger_attrs_come_first(self) -> None:
        _, _, fields = _convert(
            _record(Attr.of("uuid", "X")),
            logger_attrs=[Attr.of("attr", "extra")],
        )
        assert fields["SLOG_ATTR"] == "extra"
        assert list(fields)[:2] == ["SLOG_ATTR", "SLOG_UUID"]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrorAttributes:
    def test_error_decomposed(self) -> None:
        _, _, fields = _convert(_record(Attr.of("error", ValueError("boom"))))
        assert fields["SLOG_ERROR_ERROR"] == "boom"
        assert fields["SLOG_ERROR_KIND"] == "ValueError"
        assert fields["SLOG_ERROR_STACK"] == "<nil>"

    def test_err_alias(self) -> None:
        _, _, fields = _convert(_record(Attr.of("err", ValueError("boom"))))
        assert fields["SLOG_ERR_ERROR"] == "boom"

    def test_user_defined_error_kind(self) -> None:
        _, _, fields = _convert(_record(Attr.of("error", BoomError("bang"))))
        assert fields["SLOG_ERROR_KIND"] == f"{BoomError.__module__}.BoomError"

    def test_caught_error_has_stack(self) -> None:
        try:
            raise BoomError("bang")
        except BoomError as exc:
            caught = exc
        _, _, fields = _convert(_record(Attr.of("error", caught)))
        assert "raise BoomError" in fields["SLOG_ERROR_STACK"]

    def test_custom_error_keys(self) -> None:
        settings = JournalSettings(error_keys=["exc"])
        _, _, fields = _convert(
            _record(Attr.of("exc", ValueError("boom")), Attr.of("error", ValueError("raw"))),
            settings,
        )
        assert fields["SLOG_EXC_ERROR"] == "boom"
        assert fields["SLOG_ERROR"] == "raw"


# ---------------------------------------------------------------------------
# Source
# ---------------------------------------------------------------------------


class TestSource:
    def test_add_source(self) -> None:
        record = _record(source=SourceLocation("handler", "/srv/app.py", 42))
        _, _, fields = _convert(record, add_source=True)
        assert fields["SLOG_SOURCE_FUNCTION"] == "handler"
        assert fields["SLOG_SOURCE_FILE"] == "/srv/app.py"
        assert fields["SLOG_SOURCE_LINE"] == "42"

    def test_source_off_by_default(self) -> None:
        record = _record(source=SourceLocation("handler", "/srv/app.py", 42))
        _, _, fields = _convert(record)
        assert not any(k.startswith("SLOG_SOURCE") for k in fields)

    def test_custom_source_key(self) -> None:
        record = _record(source=SourceLocation("f", "/a.py", 1))
        _, _, fields = _convert(record, JournalSettings(source_key="caller"), add_source=True)
        assert fields["SLOG_CALLER_LINE"] == "1"

    def test_unknown_location_adds_nothing(self) -> None:
        _, _, fields = _convert(_record(), add_source=True)
        assert fields == {"SLOG_LOGGER": LOGGER_IDENTITY}


# ---------------------------------------------------------------------------
# replace_attr
# ---------------------------------------------------------------------------


class TestReplaceAttr:
    def test_masks_values(self) -> None:
        def mask(groups: list[str], attr: Attr) -> Attr:
            return Attr.of(attr.key, "***") if attr.key == "password" else attr

        _, _, fields = _convert(_record(Attr.of("password", "hunter2"), Attr.of("user", "bob")), replace_attr=mask)
        assert fields["SLOG_PASSWORD"] == "***"
        assert fields["SLOG_USER"] == "bob"

    def test_runs_after_error_replacement(self) -> None:
        seen: list[tuple[list[str], str]] = []

        def spy(groups: list[str], attr: Attr) -> Attr:
            seen.append((groups, attr.key))
            return attr

        _convert(_record(Attr.of("error", ValueError("x"))), replace_attr=spy)
        assert (["error"], "kind") in seen

    def test_replacement_to_none_is_dropped(self) -> None:
        _, _, fields = _convert(
            _record(Attr.of("secret", "s")),
            replace_attr=lambda groups, a: Attr.of(a.key, None),
        )
        assert "SLOG_SECRET" not in fields


# ---------------------------------------------------------------------------
# Priority
# ---------------------------------------------------------------------------


class TestPriority:
    @pytest.mark.parametrize(
        ("level", "priority"),
        [
            (Level.DEBUG, 7),
            (Level.INFO, 6),
            (Level.WARNING, 4),
            (Level.ERROR, 3),
            (Level.CRITICAL, 2),
        ],
    )
    def test_default_table(self, level: Level, priority: int) -> None:
        _, prio, _ = _convert(_record(level=level))
        assert prio == priority

    def test_unmapped_level_falls_back_to_debug(self) -> None:
        _, prio, _ = _convert(_record(level=25))
        assert prio == Priority.DEBUG

    def test_empty_table_falls_back_to_debug(self) -> None:
        _, prio, _ = _convert(_record(), JournalSettings(level_priorities={}))
        assert prio == Priority.DEBUG

    def test_custom_level_name(self) -> None:
        settings = JournalSettings(level_priorities={"DEBUG-5": Priority.NOTICE})
        _, prio, _ = _convert(_record(level=5), settings)
        assert prio == Priority.NOTICE

    def test_priority_is_plain_int(self) -> None:
        _, prio, _ = _convert(_record())
        assert type(prio) is int


class TestAttrsToFields:
    def test_prefix_applied_after_sanitizing(self) -> None:
        assert attrs_to_fields("P_", [Attr.of("a", 1), Attr.of("b c", 2)]) == {"P_A": "1"}
