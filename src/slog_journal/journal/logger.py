"""Journal – Logger front end over a JournalHandler."""
from __future__ import annotations

import sys
from typing import Any

from slog_journal.journal.handler import JournalHandler
from slog_journal.kernel.attrs import Level, Record, SourceLocation, args_to_attrs, kwargs_to_attrs


class Logger:
    """Structured logger.

    Positional arguments after the message are alternating key/value pairs
    (or :class:`Attr` instances); keyword arguments become attributes too::

        log = Logger(handler).with_(service="billing")
        log.info("charged", "amount", 12, currency="EUR")
    """

    def __init__(self, handler: JournalHandler) -> None:
        self.handler = handler

    def with_(self, *args: Any, **kwargs: Any) -> Logger:
        attrs = [*args_to_attrs(args), *kwargs_to_attrs(kwargs)]
        if not attrs:
            return self
        return Logger(self.handler.with_attrs(attrs))

    def with_group(self, name: str) -> Logger:
        return Logger(self.handler.with_group(name))

    def enabled(self, level: int) -> bool:
        return self.handler.enabled(level)

    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(level, msg, args, kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Level.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Level.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Level.WARNING, msg, args, kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Level.ERROR, msg, args, kwargs)

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(Level.CRITICAL, msg, args, kwargs)

    def _log(self, level: int, msg: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if not self.handler.enabled(level):
            return
        # _log <- public method <- caller
        frame = sys._getframe(2)
        record = Record(
            message=msg,
            level=Level(level),
            source=SourceLocation(
                function=frame.f_code.co_qualname,
                file=frame.f_code.co_filename,
                line=frame.f_lineno,
            ),
        )
        record.add(*args, **kwargs)
        self.handler.handle(record)


__all__ = ["Logger"]
