from typing import Union

Number = Union[int, float]


class Counter:
    """Счётчик с шагом и сбросом к начальному значению."""

    def __init__(self, initial: Number = 0):
        self._initial = initial
        self._count = initial

    @property
    def count(self) -> Number:
        return self._count

    def increment(self) -> Number:
        return self.increment_by(1)

    def increment_by(self, value: Number) -> Number:
        self._count += value
        return self._count

    def decrement(self) -> Number:
        return self.decrement_by(1)

    def decrement_by(self, value: Number) -> Number:
        self._count -= value
        return self._count

    def reset(self) -> Number:
        """Вернуть счётчик к начальному значению."""
        self._count = self._initial
        return self._count
