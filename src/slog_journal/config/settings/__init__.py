"""Config settings – env-driven configuration for the journal handler."""
from slog_journal.config.settings.base import Settings
from slog_journal.config.settings.factory import SettingsFactory
from slog_journal.config.settings.journal import JournalSettings
from slog_journal.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "JournalSettings", "Settings", "SettingsFactory", "SettingsLoader"]
