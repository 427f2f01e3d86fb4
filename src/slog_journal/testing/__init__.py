"""Testing support – an in-memory journal and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["slog_journal.testing.fixtures"]
"""
from slog_journal.testing.fakes import FakeJournal, JournalEntry

__all__ = ["FakeJournal", "JournalEntry"]
