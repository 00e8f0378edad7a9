from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class Previous(Generic[T]):
    """Remembers the value passed on the previous update."""

    def __init__(self):
        self._has_current = False
        self._current: Optional[T] = None
        self._previous: Optional[T] = None

    @property
    def value(self) -> Optional[T]:
        """Предыдущее значение (None до второго вызова update)."""
        return self._previous

    def update(self, value: T) -> Optional[T]:
        """Запомнить value и вернуть значение с прошлого вызова."""
        self._previous = self._current if self._has_current else None
        self._current = value
        self._has_current = True
        return self._previous
