from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

MaskingStrategy = Literal["redact", "hash", "partial", "tokenize"]

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {"password", "passwd", "secret", "token", "api_key", "apikey", "authorization", "cookie"}
)


@dataclass(frozen=True)
class MaskingRule:
    """How to mask attributes whose key matches *field_pattern* (fnmatch, case-insensitive).

    A pattern containing ``.`` is matched against the dotted group path,
    e.g. ``"user.email"`` only masks ``email`` inside group ``user``.
    """

    field_pattern: str
    strategy: MaskingStrategy = "redact"
    salt: str = ""
    # For partial strategy: characters to show at start/end
    partial_show_start: int = 2
    partial_show_end: int = 2

    @classmethod
    def defaults(cls) -> list[MaskingRule]:
        return [cls(name) for name in sorted(DEFAULT_SENSITIVE_FIELDS)]


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "MaskingRule", "MaskingStrategy"]
