"""
Observable History - reactive wrapper around HistoryStore.

Emits Qt signals whenever a mutator actually changes the history,
so views can re-render without polling.
"""

from typing import Any, Callable, Optional, Tuple
from PySide6.QtCore import QObject, Signal

from .history_store import DEFAULT_CAPACITY, HistoryStore


class ObservableHistory(QObject):
    """Reactive history model that emits signals on successful mutations."""

    # Сигналы изменений истории
    value_changed = Signal(object)  # Новое текущее значение
    pointer_changed = Signal(int)  # Новая позиция указателя
    history_changed = Signal()  # Общее изменение (таймлайн или указатель)

    def __init__(self, store: HistoryStore, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._store = store

    @classmethod
    def create(cls, initial: Any, capacity: int = DEFAULT_CAPACITY,
               equals: Optional[Callable[[Any, Any], bool]] = None,
               parent: Optional[QObject] = None) -> 'ObservableHistory':
        """Create a new store and wrap it.

        InvalidCapacity and factory errors propagate before any QObject exists.
        """
        store = HistoryStore(initial, capacity=capacity, equals=equals)
        return cls(store, parent)

    @property
    def store(self) -> HistoryStore:
        return self._store

    @property
    def current_value(self) -> Any:
        return self._store.current_value

    @property
    def timeline(self) -> Tuple[Any, ...]:
        return self._store.timeline

    @property
    def pointer(self) -> int:
        return self._store.pointer

    @property
    def capacity(self) -> int:
        return self._store.capacity

    def can_undo(self) -> bool:
        return self._store.can_undo()

    def can_redo(self) -> bool:
        return self._store.can_redo()

    def write(self, next_value: Any) -> bool:
        return self._notify(self._store.write(next_value))

    def undo(self) -> bool:
        return self._notify(self._store.undo())

    def redo(self) -> bool:
        return self._notify(self._store.redo())

    def goto(self, index: int) -> bool:
        return self._notify(self._store.goto(index))

    def _notify(self, changed: bool) -> bool:
        """Emit change signals only when the store reported a change."""
        if changed:
            self.pointer_changed.emit(self._store.pointer)
            self.value_changed.emit(self._store.current_value)
            self.history_changed.emit()
        return changed
