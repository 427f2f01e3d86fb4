"""Journal – convert structured records into systemd journal entries."""
from slog_journal.journal.bridges import (
    JournalLoggerFactory,
    JournalLoggingHandler,
    JournalProcessor,
    from_log_record,
)
from slog_journal.journal.converter import LOGGER_IDENTITY, Converter, JournalConverter
from slog_journal.journal.dispatch import BackgroundDispatcher, Dispatcher, SyncDispatcher
from slog_journal.journal.fields import DEFAULT_FIELD_PREFIX, FieldPrefixer, sanitize
from slog_journal.journal.flatten import flatten
from slog_journal.journal.handler import JournalHandler, JournalOptions
from slog_journal.journal.logger import Logger
from slog_journal.journal.sender import Sender, journal_enabled, journal_send

__all__ = [
    "DEFAULT_FIELD_PREFIX",
    "LOGGER_IDENTITY",
    "BackgroundDispatcher",
    "Converter",
    "Dispatcher",
    "FieldPrefixer",
    "JournalConverter",
    "JournalHandler",
    "JournalLoggerFactory",
    "JournalLoggingHandler",
    "JournalOptions",
    "JournalProcessor",
    "Logger",
    "Sender",
    "SyncDispatcher",
    "flatten",
    "from_log_record",
    "journal_enabled",
    "journal_send",
    "sanitize",
]
