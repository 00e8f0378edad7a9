"""
History Store - bounded undo/redo value container.

Holds a capacity-bounded timeline of values and a pointer into it.
The current value is always derived from the timeline, never stored
separately. Pure model without any UI dependencies.
"""

import operator
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar('T')

DEFAULT_CAPACITY = 10

# Типы, которые сравниваются по значению; всё остальное - по идентичности
_PRIMITIVE_TYPES = (type(None), bool, int, float, complex, str, bytes)
_NUMBER_TYPES = (int, float)


class InvalidCapacity(ValueError):
    """Ёмкость истории должна быть целым числом >= 1."""

    def __init__(self, capacity: Any):
        super().__init__(f"History capacity must be an integer >= 1, got {capacity!r}")
        self.capacity = capacity


def opaque_equals(a: Any, b: Any) -> bool:
    """Identity/primitive equality.

    Two distinct composite objects are never equal, even with the same
    contents. ``int`` and ``float`` compare by numeric value, so ``1``
    and ``1.0`` are the same write; ``bool`` only equals ``bool``, so
    ``1`` and ``True`` are different writes.
    """
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, _NUMBER_TYPES) and isinstance(b, _NUMBER_TYPES):
        return a == b
    if type(a) is not type(b) or not isinstance(a, _PRIMITIVE_TYPES):
        return False
    return a == b


class HistoryStore(Generic[T]):
    """Undo/redo container over a bounded timeline of values."""

    def __init__(self, initial: Any, capacity: int = DEFAULT_CAPACITY,
                 equals: Optional[Callable[[Any, Any], bool]] = None):
        # bool - подкласс int, но ёмкость True не имеет смысла
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise InvalidCapacity(capacity)

        # Фабрика вызывается ровно один раз; исключение пробрасывается наружу
        value = initial() if callable(initial) else initial

        self._capacity = capacity
        self._equals = equals or opaque_equals
        self._timeline: List[T] = [value]
        self._pointer = 0

    # ─── Read accessors ───────────────────────────────────────────────────

    @property
    def current_value(self) -> T:
        """Value at the pointer."""
        return self._timeline[self._pointer]

    @property
    def timeline(self) -> Tuple[T, ...]:
        """Immutable snapshot of the timeline."""
        return tuple(self._timeline)

    @property
    def pointer(self) -> int:
        return self._pointer

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._timeline)

    def can_undo(self) -> bool:
        return self._pointer > 0

    def can_redo(self) -> bool:
        return self._pointer < len(self._timeline) - 1

    # ─── Mutators ─────────────────────────────────────────────────────────

    def write(self, next_value: Any) -> bool:
        """Записать новое значение.

        A callable is applied to the current value as a transform.
        Returns False without touching the timeline when the resolved
        value equals the current one.
        """
        current = self.current_value
        resolved = next_value(current) if callable(next_value) else next_value

        if self._equals(resolved, current):
            return False

        # Отбросить ветку redo после указателя
        del self._timeline[self._pointer + 1:]
        self._timeline.append(resolved)

        # FIFO-вытеснение самых старых значений
        overflow = len(self._timeline) - self._capacity
        if overflow > 0:
            del self._timeline[:overflow]

        self._pointer = len(self._timeline) - 1
        return True

    def undo(self) -> bool:
        """Сдвинуть указатель на шаг назад."""
        if not self.can_undo():
            return False
        self._pointer -= 1
        return True

    def redo(self) -> bool:
        """Сдвинуть указатель на шаг вперёд."""
        if not self.can_redo():
            return False
        self._pointer += 1
        return True

    def goto(self, index: int) -> bool:
        """Jump to ``index``; out-of-range or non-integer requests are ignored.

        Any ``__index__`` type (numpy integers included) is accepted; bool is not.
        """
        if isinstance(index, bool):
            return False
        try:
            index = operator.index(index)
        except TypeError:
            return False
        if not 0 <= index < len(self._timeline):
            return False
        self._pointer = index
        return True

    def __repr__(self) -> str:
        return (f"HistoryStore(pointer={self._pointer}, size={len(self._timeline)}, "
                f"capacity={self._capacity})")


def create_history(initial: Any, capacity: int = DEFAULT_CAPACITY,
                   equals: Optional[Callable[[Any, Any], bool]] = None) -> HistoryStore:
    """Create a HistoryStore from an initial value or a zero-argument factory."""
    return HistoryStore(initial, capacity=capacity, equals=equals)
