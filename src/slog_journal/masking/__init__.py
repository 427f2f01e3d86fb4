"""Masking – ``replace_attr`` builders that redact sensitive attributes."""
from slog_journal.masking.masker import AttrMasker, masking_replace_attr
from slog_journal.masking.rules import DEFAULT_SENSITIVE_FIELDS, MaskingRule, MaskingStrategy

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "AttrMasker",
    "MaskingRule",
    "MaskingStrategy",
    "masking_replace_attr",
]
