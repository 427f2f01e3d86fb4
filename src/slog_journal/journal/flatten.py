"""Journal – flatten a nested value tree into single-level journal fields."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from slog_journal.kernel.attrs import MAX_DEPTH, NIL


def stringify(value: Any) -> str:
    if value is None:
        return NIL
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    try:
        return str(value)
    except Exception as exc:  # noqa: BLE001
        return f"<{type(value).__qualname__}: str() failed: {exc!r}>"


def flatten(tree: Mapping[str, Any] | None, max_depth: int = MAX_DEPTH) -> dict[str, str]:
    """Flatten *tree* depth-first, joining path segments with ``_``.

    Mappings contribute their keys, lists and tuples their zero-based index.
    Traversal follows insertion order, so when two paths produce the same
    key the last one visited wins. Below *max_depth* a subtree is kept as a
    single stringified leaf.

    >>> flatten({"user": {"id": 1, "tags": ["a", "b"]}})
    {'user_id': '1', 'user_tags_0': 'a', 'user_tags_1': 'b'}
    """
    flat: dict[str, str] = {}
    if not tree:
        return flat

    def walk(prefix: str, value: Any, depth: int) -> None:
        if depth < max_depth:
            if isinstance(value, Mapping):
                for k, child in value.items():
                    walk(f"{prefix}_{k}" if prefix else str(k), child, depth + 1)
                return
            if isinstance(value, (list, tuple)):
                for i, child in enumerate(value):
                    walk(f"{prefix}_{i}" if prefix else str(i), child, depth + 1)
                return
        flat[prefix] = stringify(value)

    for key, value in tree.items():
        walk(str(key), value, 1)
    return flat


__all__ = ["NIL", "flatten", "stringify"]
