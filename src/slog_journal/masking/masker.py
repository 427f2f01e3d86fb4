from __future__ import annotations

import fnmatch
import hashlib
import uuid
from collections.abc import Sequence
from typing import Any

from slog_journal.kernel.attrs import Attr, Kind, ReplaceAttr
from slog_journal.masking.rules import MaskingRule

REDACTED = "***"


def _redact(value: Any, rule: MaskingRule) -> str:  # noqa: ARG001
    return REDACTED


def _hash(value: Any, rule: MaskingRule) -> str:
    raw = f"{rule.salt}{value}".encode()
    return hashlib.sha256(raw).hexdigest()[:8]


def _partial(value: Any, rule: MaskingRule) -> str:
    s = str(value)
    start = rule.partial_show_start
    end = rule.partial_show_end
    length = len(s)
    if length <= start + end:
        return "*" * length
    hidden = "*" * (length - start - end)
    return s[:start] + hidden + (s[-end:] if end else "")


def _tokenize(value: Any, rule: MaskingRule) -> str:
    raw = f"{rule.salt}{value}".encode()
    digest = hashlib.sha256(raw).hexdigest()
    # Deterministic UUID-shaped token
    return str(uuid.UUID(digest[:32]))


_STRATEGY_FN = {
    "redact": _redact,
    "hash": _hash,
    "partial": _partial,
    "tokenize": _tokenize,
}


class AttrMasker:
    """``replace_attr`` callable masking attributes according to *rules*.

    The first matching rule wins. Sequences are masked as a whole. A rule
    matching an enclosing group masks every leaf inside it, so
    ``token={"access": ...}`` is caught by a ``token`` rule.
    """

    def __init__(self, rules: Sequence[MaskingRule]) -> None:
        self._rules = tuple(rules)

    def __call__(self, groups: list[str], attr: Attr) -> Attr:
        rule = self._match(groups, attr.key)
        if rule is None or attr.value.is_empty():
            return attr
        value = attr.value
        raw = value.payload
        if value.kind is Kind.SEQUENCE:
            raw = [v.payload for v in value.payload]
        return Attr.of(attr.key, _STRATEGY_FN[rule.strategy](raw, rule))

    def _match(self, groups: list[str], key: str) -> MaskingRule | None:
        segments = [s.lower() for s in (*groups, key)]
        for rule in self._rules:
            pattern = rule.field_pattern.lower()
            for depth in range(1, len(segments) + 1):
                target = ".".join(segments[:depth]) if "." in pattern else segments[depth - 1]
                if fnmatch.fnmatchcase(target, pattern):
                    return rule
        return None


def masking_replace_attr(rules: Sequence[MaskingRule] | None = None) -> ReplaceAttr:
    """Build a ``replace_attr`` for :class:`JournalOptions` (default rules redact common secrets)."""
    return AttrMasker(MaskingRule.defaults() if rules is None else rules)


__all__ = ["REDACTED", "AttrMasker", "masking_replace_attr"]
