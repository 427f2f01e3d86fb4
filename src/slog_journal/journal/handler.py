"""Journal – JournalOptions and JournalHandler."""
from __future__ import annotations

import contextvars
import dataclasses
from collections.abc import Sequence

from slog_journal.config.settings import JournalSettings
from slog_journal.journal.converter import Converter, JournalConverter
from slog_journal.journal.dispatch import BackgroundDispatcher, Dispatcher
from slog_journal.journal.sender import Sender, journal_send
from slog_journal.kernel.attrs import (
    Attr,
    AttrFromContext,
    Level,
    Record,
    ReplaceAttr,
    append_attrs_to_group,
    context_extractor,
)


@dataclasses.dataclass
class JournalOptions:
    """Handler options; unset fields are filled in by :meth:`new_journal_handler`.

    Attributes
    ----------
    level:
        Minimum level handled (default: DEBUG).
    converter:
        Builds ``(message, priority, fields)``. Defaults to a
        :class:`JournalConverter` over *settings*.
    attr_from_context:
        Extractors run against the caller's :class:`contextvars.Context`.
    add_source:
        Attach the call site under ``settings.source_key``.
    replace_attr:
        ``(groups, attr) -> attr`` applied to every attribute, e.g. masking.
    settings:
        Prefix, level table, error keys. Defaults to :class:`JournalSettings`.
    sender:
        Transmission primitive, used when *dispatcher* is not given.
    dispatcher:
        Fire-and-forget strategy. Defaults to a :class:`BackgroundDispatcher`
        sized from *settings*.
    """

    level: int = Level.DEBUG
    converter: Converter | None = None
    attr_from_context: Sequence[AttrFromContext] = ()
    add_source: bool = False
    replace_attr: ReplaceAttr | None = None
    settings: JournalSettings | None = None
    sender: Sender | None = None
    dispatcher: Dispatcher | None = None

    def new_journal_handler(self) -> JournalHandler:
        settings = self.settings or JournalSettings()
        options = dataclasses.replace(
            self,
            level=Level(self.level),
            settings=settings,
            converter=self.converter or JournalConverter(settings),
            attr_from_context=tuple(self.attr_from_context),
            dispatcher=self.dispatcher
            or BackgroundDispatcher(
                self.sender or journal_send,
                maxsize=settings.queue_size,
                workers=settings.workers,
            ),
        )
        return JournalHandler(options)


class JournalHandler:
    """Converts records and dispatches them to the journal.

    Instances are immutable: :meth:`with_attrs` and :meth:`with_group`
    return new handlers sharing the same options, converter and dispatcher.
    """

    def __init__(
        self,
        options: JournalOptions,
        attrs: Sequence[Attr] = (),
        groups: Sequence[str] = (),
    ) -> None:
        self.options = options
        self._attrs: tuple[Attr, ...] = tuple(attrs)
        self._groups: tuple[str, ...] = tuple(groups)

    @property
    def attrs(self) -> tuple[Attr, ...]:
        return self._attrs

    @property
    def groups(self) -> tuple[str, ...]:
        return self._groups

    def enabled(self, level: int) -> bool:
        return level >= self.options.level

    def handle(self, record: Record, context: contextvars.Context | None = None) -> None:
        """Convert *record* and hand it off.

        Never raises: a failing extractor, ``replace_attr`` or converter drops
        the entry, like a failed send does.
        """
        ctx = context if context is not None else contextvars.copy_context()
        options = self.options
        try:
            from_context = context_extractor(ctx, options.attr_from_context)
            message, priority, fields = options.converter(  # type: ignore[misc]
                options.add_source,
                options.replace_attr,
                [*self._attrs, *from_context],
                list(self._groups),
                record,
            )
        except Exception:  # noqa: BLE001
            return
        options.dispatcher.submit(message, priority, fields)  # type: ignore[union-attr]

    def with_attrs(self, attrs: Sequence[Attr]) -> JournalHandler:
        return JournalHandler(
            self.options,
            append_attrs_to_group(self._groups, self._attrs, *attrs),
            self._groups,
        )

    def with_group(self, name: str) -> JournalHandler:
        if not name:
            return self
        return JournalHandler(self.options, self._attrs, (*self._groups, name))

    def flush(self, timeout: float | None = None) -> bool:
        return self.options.dispatcher.flush(timeout)  # type: ignore[union-attr]

    def close(self, timeout: float = 5.0) -> None:
        self.options.dispatcher.close(timeout)  # type: ignore[union-attr]


__all__ = ["JournalHandler", "JournalOptions"]
