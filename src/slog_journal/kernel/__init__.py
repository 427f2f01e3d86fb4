"""Kernel – framework-agnostic building blocks: errors and the attribute model."""

from slog_journal.kernel.attrs import Attr, Kind, Level, Record, SourceLocation, Value
from slog_journal.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    JournalUnavailableError,
)

__all__ = [
    "ApplicationError",
    "Attr",
    "BaseError",
    "InfrastructureError",
    "JournalUnavailableError",
    "Kind",
    "Level",
    "Record",
    "SourceLocation",
    "Value",
]
