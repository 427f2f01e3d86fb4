"""Infrastructure errors – the journal sink and its transport."""

from __future__ import annotations

from typing import Any

from slog_journal.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure talking to the event-log sink."""

    default_code = "infrastructure_error"


class JournalUnavailableError(InfrastructureError):
    """The systemd journal cannot be reached from this process."""

    default_code = "journal_unavailable"

    def __init__(self, reason: str, **kwargs: Any) -> None:
        super().__init__(f"systemd journal is not available: {reason}", **kwargs)
        self.reason = reason


__all__ = ["InfrastructureError", "JournalUnavailableError"]
