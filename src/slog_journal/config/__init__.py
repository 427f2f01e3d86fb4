"""Config – settings dataclasses, loaders and validation errors."""
from slog_journal.config.settings import (
    EnvSettingsLoader,
    JournalSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from slog_journal.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "JournalSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
