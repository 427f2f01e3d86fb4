"""Journal – the send primitive handing entries to systemd-journald."""
from __future__ import annotations

import os
from collections.abc import Callable, Mapping

from slog_journal.kernel.errors import JournalUnavailableError

Sender = Callable[[str, int, Mapping[str, str]], None]

JOURNAL_SOCKET = "/run/systemd/journal/socket"


def journal_enabled(socket_path: str = JOURNAL_SOCKET) -> bool:
    """Whether the journald native socket is present on this host."""
    return os.path.exists(socket_path)


def journal_send(message: str, priority: int, fields: Mapping[str, str]) -> None:
    """Send one entry through :func:`systemd.journal.send`.

    Raises :class:`JournalUnavailableError` when ``systemd-python`` is not
    installed; dispatchers discard that like any other delivery failure.
    """
    try:
        from systemd import journal
    except ImportError as exc:
        raise JournalUnavailableError(
            "install 'slog-journal[journal]' (systemd-python)", cause=exc
        ) from exc
    journal.send(message, PRIORITY=str(priority), **fields)


__all__ = ["JOURNAL_SOCKET", "Sender", "journal_enabled", "journal_send"]
