"""Config settings – JournalSettings."""
import dataclasses
from typing import ClassVar

from slog_journal.config.settings.base import Settings
from slog_journal.config.validation import InvalidSettingValueError
from slog_journal.kernel.priority import DEFAULT_LEVEL_PRIORITIES, Priority


@dataclasses.dataclass
class JournalSettings(Settings):
    """Adapter-wide settings, owned by one handler tree.

    ``field_prefix`` is the *raw* prefix; the converter resolves it lazily
    and writes the resolved form back here (an invalid prefix silently
    becomes ``SLOG_``).  ``level_priorities`` maps canonical level names
    (``INFO``, ``DEBUG-5`` ...) to journal priorities.
    """

    _prefix: ClassVar[str] = "SLOG_JOURNAL"

    field_prefix: str = ""
    level_priorities: dict[str, int] = dataclasses.field(
        default_factory=lambda: dict(DEFAULT_LEVEL_PRIORITIES)
    )
    error_keys: list[str] = dataclasses.field(default_factory=lambda: ["error", "err"])
    source_key: str = "source"
    queue_size: int = 10_000
    workers: int = 1

    def _validate(self) -> None:
        for name, priority in self.level_priorities.items():
            if not Priority.EMERG <= priority <= Priority.DEBUG:
                raise InvalidSettingValueError(
                    "level_priorities", {name: priority}, "priority must be within 0..7"
                )
        if self.queue_size < 1:
            raise InvalidSettingValueError("queue_size", self.queue_size, "must be positive")
        if self.workers < 1:
            raise InvalidSettingValueError("workers", self.workers, "must be positive")


__all__ = ["JournalSettings"]
