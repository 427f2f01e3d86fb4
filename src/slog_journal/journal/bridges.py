"""Journal – adapters from stdlib ``logging`` and structlog to a JournalHandler.

* :class:`JournalLoggingHandler` – a :class:`logging.Handler`; ``extra=``
  keys become attributes and ``exc_info`` becomes the ``error`` attribute.
* :class:`JournalProcessor` – a structlog processor; the event dict becomes
  the attribute set, ``event`` the message.
* :class:`JournalLoggerFactory` – wires both into the process in one call.
"""
from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import Any

import structlog

from slog_journal.journal.handler import JournalHandler, JournalOptions
from slog_journal.kernel.attrs import Attr, Level, Record, SourceLocation

_RESERVED_RECORD_KEYS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime"}

_METHOD_LEVELS: dict[str, Level] = {
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "msg": Level.INFO,
    "warn": Level.WARNING,
    "warning": Level.WARNING,
    "error": Level.ERROR,
    "exception": Level.ERROR,
    "critical": Level.CRITICAL,
    "fatal": Level.CRITICAL,
}


def from_log_record(record: logging.LogRecord) -> Record:
    """Translate a stdlib :class:`logging.LogRecord`."""
    attrs = [Attr.of("logger_name", record.name)]
    attrs.extend(
        Attr.of(key, value)
        for key, value in vars(record).items()
        if key not in _RESERVED_RECORD_KEYS and not key.startswith("_")
    )
    if record.exc_info and record.exc_info[1] is not None:
        attrs.append(Attr.of("error", record.exc_info[1]))
    return Record(
        message=record.getMessage(),
        level=Level(record.levelno),
        attrs=attrs,
        time=datetime.fromtimestamp(record.created, UTC),
        source=SourceLocation(
            function=record.funcName or "",
            file=record.pathname or "",
            line=record.lineno,
        ),
    )


class JournalLoggingHandler(logging.Handler):
    """stdlib handler delegating to a :class:`JournalHandler`.

    Usage::

        journal = JournalOptions(add_source=True).new_journal_handler()
        logging.getLogger().addHandler(JournalLoggingHandler(journal))
        logging.getLogger(__name__).info("paid", extra={"order_id": 42})
    """

    def __init__(self, journal: JournalHandler, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.journal = journal

    def emit(self, record: logging.LogRecord) -> None:
        if not self.journal.enabled(record.levelno):
            return
        try:
            self.journal.handle(from_log_record(record))
        except Exception:  # noqa: BLE001
            self.handleError(record)

    def flush(self) -> None:
        self.journal.flush(timeout=1.0)


def _event_level(method_name: str, event_dict: dict[str, Any]) -> Level:
    name = str(event_dict.get("level", method_name)).lower()
    return _METHOD_LEVELS.get(name, Level.INFO)


def _event_error(exc_info: Any) -> BaseException | None:
    if isinstance(exc_info, BaseException):
        return exc_info
    if isinstance(exc_info, tuple):
        return exc_info[1]
    if exc_info:
        return sys.exc_info()[1]
    return None


class JournalProcessor:
    """structlog processor that forwards each event to the journal.

    The event dict is returned unchanged so rendering can continue, unless
    *drop* is set, in which case the event ends here.
    """

    def __init__(self, journal: JournalHandler, drop: bool = False) -> None:
        self.journal = journal
        self.drop = drop

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        level = _event_level(method_name, event_dict)
        if self.journal.enabled(level):
            attrs = [
                Attr.of(key, value)
                for key, value in event_dict.items()
                if key not in ("event", "level", "exc_info")
            ]
            error = _event_error(event_dict.get("exc_info"))
            if error is not None:
                attrs.append(Attr.of("error", error))
            self.journal.handle(Record(str(event_dict.get("event", "")), level, attrs))
        if self.drop:
            raise structlog.DropEvent
        return event_dict


class JournalLoggerFactory:
    """Route structlog and stdlib logging into the journal."""

    @staticmethod
    def configure(options: JournalOptions | None = None, level: int = logging.INFO) -> JournalHandler:
        journal = (options or JournalOptions(level=level)).new_journal_handler()

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.add_log_level,
                structlog.processors.StackInfoRenderer(),
                JournalProcessor(journal, drop=True),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(level),
            cache_logger_on_first_use=True,
        )

        root = logging.getLogger()
        root.handlers = [h for h in root.handlers if not isinstance(h, JournalLoggingHandler)]
        root.addHandler(JournalLoggingHandler(journal))
        root.setLevel(level)
        return journal


__all__ = ["JournalLoggerFactory", "JournalLoggingHandler", "JournalProcessor", "from_log_record"]
