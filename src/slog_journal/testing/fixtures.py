"""Testing fixtures – fake_journal, journal_settings, journal_handler."""
from __future__ import annotations

from collections.abc import Iterator

import pytest

from slog_journal.config.settings import JournalSettings
from slog_journal.journal import JournalHandler, JournalOptions, SyncDispatcher
from slog_journal.kernel.attrs import Level
from slog_journal.testing.fakes import FakeJournal


@pytest.fixture
def fake_journal() -> FakeJournal:
    return FakeJournal()


@pytest.fixture
def journal_settings() -> JournalSettings:
    return JournalSettings()


@pytest.fixture
def journal_handler(fake_journal: FakeJournal, journal_settings: JournalSettings) -> Iterator[JournalHandler]:
    """INFO-level handler sending synchronously into ``fake_journal``."""
    handler = JournalOptions(
        level=Level.INFO,
        settings=journal_settings,
        dispatcher=SyncDispatcher(fake_journal),
    ).new_journal_handler()
    yield handler
    handler.close()


__all__ = ["fake_journal", "journal_handler", "journal_settings"]
