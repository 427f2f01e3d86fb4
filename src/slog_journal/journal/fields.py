"""Journal – field-name sanitizing and prefix resolution."""
from __future__ import annotations

import string

from slog_journal.config.settings import JournalSettings

DEFAULT_FIELD_PREFIX = "SLOG_"

_FIELD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_PREFIX_CHARS = frozenset(string.ascii_uppercase + string.digits + "_")


def sanitize(raw: str) -> tuple[str, bool]:
    """Uppercase *raw* for use as a journal field name.

    All or nothing: a single character outside ``[A-Za-z0-9_]`` rejects the
    whole key and ``("", False)`` is returned.
    """
    if any(c not in _FIELD_CHARS for c in raw):
        return "", False
    return raw.upper(), True


def validate_prefix(raw: str) -> str:
    """Resolved form of a raw prefix: ``raw + "_"``, or the default if invalid."""
    if not raw or raw[0] not in string.ascii_uppercase:
        return DEFAULT_FIELD_PREFIX
    if any(c not in _PREFIX_CHARS for c in raw):
        return DEFAULT_FIELD_PREFIX
    return raw + "_"


class FieldPrefixer:
    """Resolves ``settings.field_prefix`` and memoizes the result.

    The resolved prefix is written back into the settings, so a second call
    sees its own output and returns the cache instead of appending another
    ``_``. Changing ``settings.field_prefix`` afterwards triggers a fresh
    resolution on the next call.
    """

    def __init__(self, settings: JournalSettings) -> None:
        self._settings = settings
        self._applied = ""

    def resolve(self) -> str:
        raw = self._settings.field_prefix
        if self._applied and self._applied == raw:
            return self._applied
        self._applied = validate_prefix(raw)
        self._settings.field_prefix = self._applied
        return self._applied


__all__ = ["DEFAULT_FIELD_PREFIX", "FieldPrefixer", "sanitize", "validate_prefix"]
