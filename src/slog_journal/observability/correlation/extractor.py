"""Observability – attribute extractor for the active RequestContext."""
from __future__ import annotations

import contextvars

from slog_journal.kernel.attrs import Attr
from slog_journal.observability.correlation.context import REQUEST_CONTEXT


def correlation_attrs(ctx: contextvars.Context) -> list[Attr]:
    """``attr_from_context`` extractor emitting the request's correlation ids.

    ``tenant_id``, ``user_id``, ``trace_id`` and ``span_id`` are only emitted
    when set.
    """
    request = ctx.get(REQUEST_CONTEXT)
    if request is None:
        return []
    attrs = [Attr.of("correlation_id", request.correlation_id)]
    for name in ("tenant_id", "user_id", "trace_id", "span_id"):
        value = getattr(request, name)
        if value is not None:
            attrs.append(Attr.of(name, value))
    return attrs


__all__ = ["correlation_attrs"]
