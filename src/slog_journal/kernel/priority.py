"""Kernel – journal priorities (syslog severity scale, lower is more severe)."""
from __future__ import annotations

import enum


class Priority(enum.IntEnum):
    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


#: Priority used when a level has no entry in the table.
FALLBACK_PRIORITY = Priority.DEBUG

DEFAULT_LEVEL_PRIORITIES: dict[str, int] = {
    "DEBUG": Priority.DEBUG,
    "INFO": Priority.INFO,
    "WARNING": Priority.WARNING,
    "ERROR": Priority.ERR,
    "CRITICAL": Priority.CRIT,
}


__all__ = ["DEFAULT_LEVEL_PRIORITIES", "FALLBACK_PRIORITY", "Priority"]
