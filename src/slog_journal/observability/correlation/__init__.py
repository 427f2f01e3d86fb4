"""Observability – correlation context and its journal attribute extractor."""
from slog_journal.observability.correlation.context import CorrelationContext, RequestContext
from slog_journal.observability.correlation.extractor import correlation_attrs

__all__ = ["CorrelationContext", "RequestContext", "correlation_attrs"]
