"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError         (application.py)
    │   └── ConfigError          (slog_journal.config.validation)
    └── InfrastructureError      (infrastructure.py)
        └── JournalUnavailableError

None of these ever escape the logging path: the handler swallows delivery
failures. They are raised by configuration loading and by senders, which
the dispatchers guard.
"""

from slog_journal.kernel.errors.application import ApplicationError
from slog_journal.kernel.errors.base import BaseError
from slog_journal.kernel.errors.infrastructure import (
    InfrastructureError,
    JournalUnavailableError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "JournalUnavailableError",
]
