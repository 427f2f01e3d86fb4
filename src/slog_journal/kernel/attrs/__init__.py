"""Kernel attrs – the structured attribute model and its list operations."""
from slog_journal.kernel.attrs.ops import (
    AttrFromContext,
    ReplaceAttr,
    append_attrs_to_group,
    append_record_attrs_to_attrs,
    attrs_to_map,
    context_extractor,
    remove_empty_attrs,
    replace_attrs,
    replace_error,
    source_attr,
)
from slog_journal.kernel.attrs.types import (
    MAX_DEPTH,
    NIL,
    Attr,
    Kind,
    Level,
    Record,
    SourceLocation,
    Value,
    args_to_attrs,
    group,
    kwargs_to_attrs,
)

__all__ = [
    "MAX_DEPTH",
    "NIL",
    "Attr",
    "AttrFromContext",
    "Kind",
    "Level",
    "Record",
    "ReplaceAttr",
    "SourceLocation",
    "Value",
    "append_attrs_to_group",
    "append_record_attrs_to_attrs",
    "args_to_attrs",
    "attrs_to_map",
    "context_extractor",
    "group",
    "kwargs_to_attrs",
    "remove_empty_attrs",
    "replace_attrs",
    "replace_error",
    "source_attr",
]
