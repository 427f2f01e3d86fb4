"""Journal – fire-and-forget dispatch of converted entries.

The log call never waits on, or fails because of, the journal. Two
strategies are provided:

* :class:`BackgroundDispatcher` – bounded :class:`queue.Queue` drained by
  daemon worker threads. A full queue drops the entry and counts it in
  :attr:`BackgroundDispatcher.dropped`.
* :class:`SyncDispatcher` – sends inline. Useful in tests, or when the
  handler already sits behind a :class:`logging.handlers.QueueHandler`.

Both discard every exception raised by the sender.
"""
from __future__ import annotations

import atexit
import queue
import threading
import time
from collections.abc import Mapping
from typing import Protocol

from slog_journal.journal.sender import Sender, journal_send
from slog_journal.observability.logging import get_logger

_log = get_logger(__name__)

_Entry = tuple[str, int, Mapping[str, str]]


class Dispatcher(Protocol):
    def submit(self, message: str, priority: int, fields: Mapping[str, str]) -> None: ...

    def flush(self, timeout: float | None = None) -> bool: ...

    def close(self, timeout: float = 5.0) -> None: ...


def _send_quietly(sender: Sender, entry: _Entry) -> None:
    try:
        sender(*entry)
    except Exception:  # noqa: BLE001
        pass


class SyncDispatcher:
    """Calls the sender on the logging thread, swallowing failures."""

    def __init__(self, sender: Sender = journal_send) -> None:
        self._sender = sender

    def submit(self, message: str, priority: int, fields: Mapping[str, str]) -> None:
        _send_quietly(self._sender, (message, priority, fields))

    def flush(self, timeout: float | None = None) -> bool:  # noqa: ARG002
        return True

    def close(self, timeout: float = 5.0) -> None:  # noqa: ARG002
        pass


class BackgroundDispatcher:
    """Non-blocking dispatcher backed by a bounded queue and worker threads.

    Typical usage::

        dispatcher = BackgroundDispatcher(maxsize=10_000)
        handler = JournalOptions(dispatcher=dispatcher).new_journal_handler()

        # When shutting down:
        dispatcher.close()

    Parameters
    ----------
    sender:
        Performs the actual transmission. Defaults to :func:`journal_send`.
    maxsize:
        Maximum queue depth; entries beyond it are dropped.
    workers:
        Number of draining threads.
    autostart:
        Start the workers on the first :meth:`submit`. When ``False`` the
        caller runs :meth:`start` or drains with :meth:`drain_sync`.
    """

    def __init__(
        self,
        sender: Sender = journal_send,
        maxsize: int = 10_000,
        workers: int = 1,
        autostart: bool = True,
    ) -> None:
        self._sender = sender
        self._queue: queue.Queue[_Entry | None] = queue.Queue(maxsize=maxsize)
        self._workers = workers
        self._autostart = autostart
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()
        self._closed = False
        self.dropped = 0

    # ------------------------------------------------------------------
    # Dispatcher interface
    # ------------------------------------------------------------------

    def submit(self, message: str, priority: int, fields: Mapping[str, str]) -> None:
        """Enqueue an entry without blocking; drop it when full or closed."""
        if self._closed:
            self._drop()
            return
        if self._autostart and not self._threads:
            self.start()
        try:
            self._queue.put_nowait((message, priority, fields))
        except queue.Full:
            self._drop()

    def _drop(self) -> None:
        with self._lock:
            self.dropped += 1

    def flush(self, timeout: float | None = None) -> bool:
        """Wait until every queued entry was handed to the sender.

        Returns ``False`` if *timeout* elapsed first.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._queue.all_tasks_done:
            while self._queue.unfinished_tasks:
                if deadline is None:
                    self._queue.all_tasks_done.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
                self._queue.all_tasks_done.wait(remaining)
        return True

    def close(self, timeout: float = 5.0) -> None:
        """Flush pending entries, then stop the workers."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            threads = list(self._threads)
        if threads:
            self.flush(timeout)
            for _ in threads:
                try:
                    self._queue.put(None, timeout=timeout)
                except queue.Full:
                    break
            for thread in threads:
                thread.join(timeout)
            atexit.unregister(self._at_exit)
        if self.dropped:
            _log.warning("journal_entries_dropped", dropped=self.dropped)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        with self._lock:
            if self._threads or self._closed:
                return
            for i in range(self._workers):
                thread = threading.Thread(
                    target=self._drain, name=f"slog-journal-{i}", daemon=True
                )
                thread.start()
                self._threads.append(thread)
            atexit.register(self._at_exit)

    def _at_exit(self) -> None:
        self.flush(timeout=1.0)

    def _drain(self) -> None:
        while True:
            entry = self._queue.get()
            try:
                if entry is None:
                    break
                _send_quietly(self._sender, entry)
            finally:
                self._queue.task_done()

    # ------------------------------------------------------------------
    # Sync drain helper (useful in tests)
    # ------------------------------------------------------------------

    def drain_sync(self) -> None:
        """Send every queued entry on the calling thread."""
        while True:
            try:
                entry = self._queue.get_nowait()
            except queue.Empty:
                break
            try:
                if entry is not None:
                    _send_quietly(self._sender, entry)
            finally:
                self._queue.task_done()


__all__ = ["BackgroundDispatcher", "Dispatcher", "SyncDispatcher"]
