"""Observability – the library's own logger and correlation context extractors."""
from slog_journal.observability.correlation import (
    CorrelationContext,
    RequestContext,
    correlation_attrs,
)
from slog_journal.observability.logging import get_logger

__all__ = ["CorrelationContext", "RequestContext", "correlation_attrs", "get_logger"]
