"""Application-layer errors – misuse or misconfiguration by the embedding app."""

from __future__ import annotations

from slog_journal.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """The embedding application asked for something the library cannot do."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
