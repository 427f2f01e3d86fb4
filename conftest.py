pytest_plugins = ["slog_journal.testing.fixtures"]
