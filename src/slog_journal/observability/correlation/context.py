"""Observability – RequestContext, CorrelationContext."""
from __future__ import annotations

import contextlib
import dataclasses
from collections.abc import Iterator
from contextvars import ContextVar
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Ambient context for a single request/use-case execution."""
    correlation_id: str
    tenant_id: str | None = None
    user_id: str | None = None
    trace_id: str | None = None
    span_id: str | None = None

    @classmethod
    def new(cls, tenant_id: str | None = None, user_id: str | None = None) -> "RequestContext":
        return cls(correlation_id=str(uuid4()), tenant_id=tenant_id, user_id=user_id)


REQUEST_CONTEXT: ContextVar[RequestContext | None] = ContextVar("_slog_journal_request_ctx", default=None)


class CorrelationContext:
    """Ambient correlation context stored in a ``ContextVar``."""

    @staticmethod
    def set(ctx: RequestContext) -> None:
        REQUEST_CONTEXT.set(ctx)

    @staticmethod
    def get() -> RequestContext | None:
        return REQUEST_CONTEXT.get()

    @staticmethod
    def clear() -> None:
        REQUEST_CONTEXT.set(None)

    @staticmethod
    @contextlib.contextmanager
    def scope(ctx: RequestContext) -> Iterator[RequestContext]:
        """Bind *ctx* for the duration of a ``with`` block."""
        token = REQUEST_CONTEXT.set(ctx)
        try:
            yield ctx
        finally:
            REQUEST_CONTEXT.reset(token)


__all__ = ["REQUEST_CONTEXT", "CorrelationContext", "RequestContext"]
