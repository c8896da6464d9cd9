from collections import deque
from typing import Deque, Optional

from sudokit.common.constants import MAX_HISTORY_SIZE
from sudokit.core.board import BoardSnapshot


class MoveHistory:
    """Bounded undo/redo stacks of board snapshots."""

    def __init__(self, max_size: int = MAX_HISTORY_SIZE):
        self.max_size = max_size
        self._undo: Deque[BoardSnapshot] = deque(maxlen=max_size)
        self._redo: Deque[BoardSnapshot] = deque(maxlen=max_size)

    @property
    def can_undo(self) -> bool:
        return len(self._undo) > 0

    @property
    def can_redo(self) -> bool:
        return len(self._redo) > 0

    def push(self, snapshot: BoardSnapshot) -> None:
        """Record the state before a move; the oldest entry is dropped past `max_size` and redo is cleared."""
        self._undo.append(snapshot)
        self._redo.clear()

    def undo(self, current: BoardSnapshot) -> Optional[BoardSnapshot]:
        """Return the state to restore, parking `current` for redo, or None if there is nothing to undo."""
        if not self._undo:
            return None
        self._redo.append(current)
        return self._undo.pop()

    def redo(self, current: BoardSnapshot) -> Optional[BoardSnapshot]:
        if not self._redo:
            return None
        self._undo.append(current)
        return self._redo.pop()

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def __len__(self) -> int:
        return len(self._undo)
