"""Journal – convert a record into (message, priority, fields).

The default converter runs, in order:

1. merge logger-bound attrs with the record's attrs (wrapped in ``groups``)
2. decompose exceptions held by ``error`` / ``err`` into kind/error/stack
3. append the call-site group when ``add_source`` is set
4. apply the user's ``replace_attr``
5. drop empty attrs
6. build the nested tree, flatten it, sanitize and prefix every key
7. stamp ``<prefix>LOGGER`` with the library identity
8. map the level name to a journal priority
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol

from slog_journal._version import NAME, __version__
from slog_journal.config.settings import JournalSettings
from slog_journal.journal.fields import FieldPrefixer, sanitize
from slog_journal.journal.flatten import flatten
from slog_journal.kernel.attrs import (
    Attr,
    Record,
    ReplaceAttr,
    append_record_attrs_to_attrs,
    attrs_to_map,
    remove_empty_attrs,
    replace_attrs,
    replace_error,
    source_attr,
)
from slog_journal.kernel.priority import FALLBACK_PRIORITY

LOGGER_IDENTITY = f"{NAME}:{__version__}"


class Converter(Protocol):
    def __call__(
        self,
        add_source: bool,
        replace_attr: ReplaceAttr | None,
        logger_attrs: Sequence[Attr],
        groups: Sequence[str],
        record: Record,
    ) -> tuple[str, int, dict[str, str]]: ...


def attrs_to_fields(prefix: str, attrs: Sequence[Attr]) -> dict[str, str]:
    """Flatten *attrs* into prefixed journal fields, dropping unusable names."""
    fields: dict[str, str] = {}
    for key, value in flatten(attrs_to_map(attrs)).items():
        name, keep = sanitize(key)
        if keep:
            fields[prefix + name] = value
    return fields


def level_to_priority(level_priorities: Mapping[str, int], record: Record) -> int:
    return int(level_priorities.get(record.level.name, FALLBACK_PRIORITY))


class JournalConverter:
    """Default :class:`Converter`, bound to one :class:`JournalSettings`."""

    def __init__(self, settings: JournalSettings | None = None) -> None:
        self.settings = settings or JournalSettings()
        self._prefixer = FieldPrefixer(self.settings)

    @property
    def prefix(self) -> str:
        return self._prefixer.resolve()

    def __call__(
        self,
        add_source: bool,
        replace_attr: ReplaceAttr | None,
        logger_attrs: Sequence[Attr],
        groups: Sequence[str],
        record: Record,
    ) -> tuple[str, int, dict[str, str]]:
        settings = self.settings
        attrs = append_record_attrs_to_attrs(logger_attrs, groups, record)

        attrs = replace_error(attrs, *settings.error_keys)
        if add_source:
            attrs.append(source_attr(settings.source_key, record))
        attrs = replace_attrs(replace_attr, [], attrs)
        attrs = remove_empty_attrs(attrs)

        prefix = self._prefixer.resolve()
        fields = attrs_to_fields(prefix, attrs)
        fields[prefix + "LOGGER"] = LOGGER_IDENTITY

        return record.message, level_to_priority(settings.level_priorities, record), fields


__all__ = ["LOGGER_IDENTITY", "Converter", "JournalConverter", "attrs_to_fields", "level_to_priority"]
