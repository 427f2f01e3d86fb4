"""Kernel attrs – Kind, Value, Attr, Level, SourceLocation, Record."""
from __future__ import annotations

import dataclasses
import enum
import logging
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any, ClassVar

#: Nesting depth beyond which values are kept as opaque scalars.
MAX_DEPTH = 64

BAD_KEY = "!BADKEY"

#: Rendering of an absent value, e.g. the stack of an exception never raised.
NIL = "<nil>"


class Kind(enum.Enum):
    """Tag of a :class:`Value`."""

    SCALAR = "scalar"
    GROUP = "group"
    SEQUENCE = "sequence"
    ERROR = "error"


@dataclasses.dataclass(frozen=True, slots=True)
class Value:
    """Tagged attribute value.

    ``payload`` depends on ``kind``:

    * ``SCALAR``   – any Python object (``None`` means empty)
    * ``GROUP``    – ``tuple[Attr, ...]``
    * ``SEQUENCE`` – ``tuple[Value, ...]``
    * ``ERROR``    – a :class:`BaseException`
    """

    kind: Kind
    payload: Any = None

    @classmethod
    def of(cls, obj: Any, _depth: int = 0) -> Value:
        """Classify a plain Python object."""
        if isinstance(obj, Value):
            return obj
        if _depth >= MAX_DEPTH:
            return cls(Kind.SCALAR, obj)
        if isinstance(obj, BaseException):
            return cls(Kind.ERROR, obj)
        if isinstance(obj, Mapping):
            return cls(
                Kind.GROUP,
                tuple(Attr(str(k), cls.of(v, _depth + 1)) for k, v in obj.items()),
            )
        if isinstance(obj, (list, tuple)):
            return cls(Kind.SEQUENCE, tuple(cls.of(v, _depth + 1) for v in obj))
        return cls(Kind.SCALAR, obj)

    @classmethod
    def group(cls, *attrs: Attr) -> Value:
        return cls(Kind.GROUP, tuple(attrs))

    @property
    def attrs(self) -> tuple[Attr, ...]:
        """Members of a group value (empty for any other kind)."""
        return self.payload if self.kind is Kind.GROUP else ()

    def is_empty(self) -> bool:
        return self.kind is Kind.SCALAR and self.payload is None


@dataclasses.dataclass(frozen=True, slots=True)
class Attr:
    """A key paired with a :class:`Value`."""

    key: str
    value: Value

    @classmethod
    def of(cls, key: str, obj: Any) -> Attr:
        return cls(key, Value.of(obj))

    def is_group(self) -> bool:
        return self.value.kind is Kind.GROUP


def group(key: str, *members: Attr | Any) -> Attr:
    """Build a group attribute; non-``Attr`` members go through :func:`args_to_attrs`."""
    return Attr(key, Value.group(*args_to_attrs(members)))


def args_to_attrs(args: Iterable[Any]) -> list[Attr]:
    """Turn ``("k1", v1, Attr(...), "k2", v2)`` into a list of attrs.

    A dangling key or a non-string in key position is kept under ``!BADKEY``.
    """
    out: list[Attr] = []
    it = iter(args)
    for item in it:
        if isinstance(item, Attr):
            out.append(item)
        elif isinstance(item, str):
            try:
                out.append(Attr.of(item, next(it)))
            except StopIteration:
                out.append(Attr.of(BAD_KEY, item))
        else:
            out.append(Attr.of(BAD_KEY, item))
    return out


def kwargs_to_attrs(kwargs: Mapping[str, Any]) -> list[Attr]:
    return [v if isinstance(v, Attr) else Attr.of(k, v) for k, v in kwargs.items()]


_BASE_LEVELS = (
    (logging.CRITICAL, "CRITICAL"),
    (logging.ERROR, "ERROR"),
    (logging.WARNING, "WARNING"),
    (logging.INFO, "INFO"),
)


class Level(int):
    """Severity on the stdlib :mod:`logging` scale with a canonical name.

    Levels between the named ones are rendered relative to the closest lower
    one: ``Level(22).name == "INFO+2"``, ``Level(5).name == "DEBUG-5"``.
    """

    __slots__ = ()

    DEBUG: ClassVar[Level]
    INFO: ClassVar[Level]
    WARNING: ClassVar[Level]
    ERROR: ClassVar[Level]
    CRITICAL: ClassVar[Level]

    @property
    def name(self) -> str:
        value = int(self)
        for base, label in _BASE_LEVELS:
            if value >= base:
                return _offset_name(label, value - base)
        return _offset_name("DEBUG", value - logging.DEBUG)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Level({self.name})"


def _offset_name(base: str, delta: int) -> str:
    return base if delta == 0 else f"{base}{delta:+d}"


Level.DEBUG = Level(logging.DEBUG)
Level.INFO = Level(logging.INFO)
Level.WARNING = Level(logging.WARNING)
Level.ERROR = Level(logging.ERROR)
Level.CRITICAL = Level(logging.CRITICAL)


@dataclasses.dataclass(frozen=True, slots=True)
class SourceLocation:
    """Call site of a log record."""

    function: str = ""
    file: str = ""
    line: int = 0


@dataclasses.dataclass(slots=True)
class Record:
    """One log call: message, level and the attributes passed with it."""

    message: str
    level: Level
    attrs: list[Attr] = dataclasses.field(default_factory=list)
    time: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))
    source: SourceLocation | None = None

    def add(self, *args: Any, **kwargs: Any) -> None:
        self.attrs.extend(args_to_attrs(args))
        self.attrs.extend(kwargs_to_attrs(kwargs))


__all__ = [
    "BAD_KEY",
    "MAX_DEPTH",
    "NIL",
    "Attr",
    "Kind",
    "Level",
    "Record",
    "SourceLocation",
    "Value",
    "args_to_attrs",
    "group",
    "kwargs_to_attrs",
]
