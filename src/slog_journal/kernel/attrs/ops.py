"""Kernel attrs – operations over attribute lists.

These are the building blocks the journal converter chains together:

* :func:`append_attrs_to_group`        – bind attrs under a group path
* :func:`append_record_attrs_to_attrs` – merge logger attrs with a record's
* :func:`replace_error`                – decompose exceptions into sub-fields
* :func:`source_attr`                  – call-site group
* :func:`replace_attrs`                – group-aware ``replace_attr`` walk
* :func:`remove_empty_attrs`           – drop empty keys, ``None`` and empty groups
* :func:`attrs_to_map`                 – build the nested value tree
* :func:`context_extractor`            – run registered context extractors
"""
from __future__ import annotations

import contextvars
import traceback
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from slog_journal.kernel.attrs.types import NIL, Attr, Kind, Record, Value

ReplaceAttr = Callable[[list[str], Attr], Attr]
AttrFromContext = Callable[[contextvars.Context], Sequence[Attr]]


def uniq_attrs(attrs: Iterable[Attr]) -> list[Attr]:
    """De-duplicate by key: first position, last value."""
    by_key: dict[str, Attr] = {}
    for attr in attrs:
        by_key[attr.key] = attr
    return list(by_key.values())


def append_attrs_to_group(groups: Sequence[str], actual: Sequence[Attr], *new: Attr) -> list[Attr]:
    """Nest *new* under *groups* inside *actual*, merging into an existing group."""
    current = list(actual)
    if not groups:
        return uniq_attrs([*current, *new])

    head, rest = groups[0], groups[1:]
    for i, attr in enumerate(current):
        if attr.key == head and attr.is_group():
            current[i] = Attr(head, Value.group(*append_attrs_to_group(rest, attr.value.attrs, *new)))
            return current
    return uniq_attrs([*current, Attr(head, Value.group(*append_attrs_to_group(rest, [], *new)))])


def append_record_attrs_to_attrs(attrs: Sequence[Attr], groups: Sequence[str], record: Record) -> list[Attr]:
    output = list(attrs)
    for attr in record.attrs:
        for name in reversed(groups):
            attr = Attr(name, Value.group(attr))
        output.append(attr)
    return output


def error_kind(exc: BaseException) -> str:
    cls = type(exc)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def format_error(exc: BaseException) -> Value:
    stack = "".join(traceback.format_tb(exc.__traceback__)) if exc.__traceback__ else NIL
    return Value.group(
        Attr.of("kind", error_kind(exc)),
        Attr.of("error", str(exc)),
        Attr.of("stack", stack),
    )


def replace_error(attrs: Sequence[Attr], *error_keys: str) -> list[Attr]:
    """Replace exception-valued attrs named in *error_keys* by a kind/error/stack group.

    Only the top level and the first group level are considered.
    """
    keys = frozenset(error_keys)

    def _replace(groups: list[str], attr: Attr) -> Attr:
        if len(groups) > 1:
            return attr
        if attr.key in keys and attr.value.kind is Kind.ERROR:
            return Attr(attr.key, format_error(attr.value.payload))
        return attr

    return replace_attrs(_replace, [], attrs)


def source_attr(key: str, record: Record) -> Attr:
    members: list[Attr] = []
    src = record.source
    if src is not None:
        if src.function:
            members.append(Attr.of("function", src.function))
        if src.file:
            members.append(Attr.of("file", src.file))
        if src.line:
            members.append(Attr.of("line", src.line))
    return Attr(key, Value.group(*members))


def replace_attrs(fn: ReplaceAttr | None, groups: list[str], attrs: Sequence[Attr]) -> list[Attr]:
    out: list[Attr] = []
    for attr in attrs:
        if attr.is_group():
            members = replace_attrs(fn, [*groups, attr.key], attr.value.attrs)
            out.append(Attr(attr.key, Value.group(*members)))
        elif fn is not None:
            out.append(fn(list(groups), attr))
        else:
            out.append(attr)
    return out


def remove_empty_attrs(attrs: Sequence[Attr]) -> list[Attr]:
    out: list[Attr] = []
    for attr in attrs:
        if not attr.key:
            continue
        if attr.is_group():
            members = remove_empty_attrs(attr.value.attrs)
            if members:
                out.append(Attr(attr.key, Value.group(*members)))
            continue
        if not attr.value.is_empty():
            out.append(attr)
    return out


def _merge_values(values: list[Value]) -> Value:
    merged = values[0]
    for value in values[1:]:
        if merged.kind is Kind.GROUP and value.kind is Kind.GROUP:
            merged = Value.group(*merged.attrs, *value.attrs)
        else:
            merged = value
    return merged


def _to_tree(value: Value) -> Any:
    if value.kind is Kind.GROUP:
        return attrs_to_map(value.attrs)
    if value.kind is Kind.SEQUENCE:
        return [_to_tree(v) for v in value.payload]
    return value.payload


def attrs_to_map(attrs: Iterable[Attr]) -> dict[str, Any]:
    """Nested value tree: groups become dicts, sequences become lists."""
    by_key: dict[str, list[Value]] = {}
    for attr in attrs:
        by_key.setdefault(attr.key, []).append(attr.value)
    return {key: _to_tree(_merge_values(values)) for key, values in by_key.items()}


def context_extractor(ctx: contextvars.Context, fns: Iterable[AttrFromContext]) -> list[Attr]:
    attrs: list[Attr] = []
    for fn in fns:
        attrs.extend(fn(ctx))
    return attrs


__all__ = [
    "AttrFromContext",
    "ReplaceAttr",
    "append_attrs_to_group",
    "append_record_attrs_to_attrs",
    "attrs_to_map",
    "context_extractor",
    "error_kind",
    "format_error",
    "remove_empty_attrs",
    "replace_attrs",
    "replace_error",
    "source_attr",
    "uniq_attrs",
]
