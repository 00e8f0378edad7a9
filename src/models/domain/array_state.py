"""
Array State - list container with common in-place operations.

Keeps a copy of the initial items so the list can be reset later.
"""

from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

T = TypeVar('T')


class ArrayState(Generic[T]):
    """Список с операциями push/pop/shift/unshift, фильтрацией и сбросом."""

    def __init__(self, initial: Optional[Iterable[T]] = None):
        self._initial: Tuple[T, ...] = tuple(initial or ())
        self._items: List[T] = list(self._initial)

    @property
    def items(self) -> Tuple[T, ...]:
        """Immutable snapshot of the current items."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(tuple(self._items))

    # ─── Ends ─────────────────────────────────────────────────────────────

    def push(self, value: T) -> int:
        """Добавить в конец. Возвращает новую длину."""
        self._items.append(value)
        return len(self._items)

    def pop(self) -> Optional[T]:
        """Remove and return the last item, or None when empty."""
        if not self._items:
            return None
        return self._items.pop()

    def unshift(self, value: T) -> int:
        """Добавить в начало. Возвращает новую длину."""
        self._items.insert(0, value)
        return len(self._items)

    def shift(self) -> Optional[T]:
        """Remove and return the first item, or None when empty."""
        if not self._items:
            return None
        return self._items.pop(0)

    # ─── Removal ──────────────────────────────────────────────────────────

    def remove_by_index(self, index: int) -> bool:
        if not 0 <= index < len(self._items):
            return False
        del self._items[index]
        return True

    def remove_by_value(self, value: T) -> int:
        """Удалить все элементы, равные value. Возвращает число удалённых."""
        before = len(self._items)
        self._items = [item for item in self._items if item != value]
        return before - len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def filter(self, predicate: Callable[[T, int, Tuple[T, ...]], Any]) -> None:
        """Keep only items for which ``predicate(value, index, items)`` is truthy."""
        snapshot = tuple(self._items)
        self._items = [item for i, item in enumerate(snapshot) if predicate(item, i, snapshot)]

    # ─── Replacement ──────────────────────────────────────────────────────

    def replace(self, items: Iterable[T]) -> None:
        self._items = list(items)

    def reset(self) -> None:
        """Вернуть начальный список."""
        self._items = list(self._initial)

    def update_by_index(self, index: int, value: T) -> bool:
        if not 0 <= index < len(self._items):
            return False
        self._items[index] = value
        return True

    def update_by_value(self, old_value: T, new_value: T) -> int:
        """Replace every item equal to old_value. Returns the number of replacements."""
        replaced = 0
        for i, item in enumerate(self._items):
            if item == old_value:
                self._items[i] = new_value
                replaced += 1
        return replaced
