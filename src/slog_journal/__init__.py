"""
slog_journal – structured logging into the systemd journal.

Import path convention::

    from slog_journal import Logger
    from slog_journal.journal import JournalOptions, JournalConverter
    from slog_journal.config.settings import JournalSettings
"""

from slog_journal._version import NAME, __version__
from slog_journal.journal import JournalHandler, JournalOptions, Logger

__all__ = ["JournalHandler", "JournalOptions", "Logger", "NAME", "__version__"]
