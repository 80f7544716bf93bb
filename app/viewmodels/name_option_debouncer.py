"""Debounced commit of text-field name options."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer, Signal

DEFAULT_QUIET_MS = 1000


class NameOptionDebouncer(QObject):
    """Accumulates edits and commits them once typing has paused.

    Every `push` restarts a single-shot timer; when it fires, all pending
    edits are handed to `commit` in one call so the album is reprocessed once.
    """

    committed = Signal(dict)  # field -> text

    def __init__(
        self,
        commit: Callable[[dict[str, str]], None],
        quiet_ms: int = DEFAULT_QUIET_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._commit = commit
        self._pending: dict[str, str] = {}
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(quiet_ms)
        self._timer.timeout.connect(self.flush)

    def push(self, field_name: str, text: str) -> None:
        """Record a user edit for `field_name` and restart the quiet period."""
        self._pending[field_name] = text
        self._timer.start()

    @property
    def has_pending(self) -> bool:
        """True while edits are waiting for the quiet period to end."""
        return bool(self._pending)

    def flush(self) -> None:
        """Commit pending edits immediately."""
        self._timer.stop()
        if not self._pending:
            return
        changes, self._pending = self._pending, {}
        self._commit(changes)
        self.committed.emit(changes)
