"""Observability – structlog logger for the library's own diagnostics.

Only lifecycle warnings (skipped settings loaders, dropped entries) go
through here. The per-record conversion path never logs, so attaching a journal
handler to the root logger cannot feed back into itself.
"""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger"]
