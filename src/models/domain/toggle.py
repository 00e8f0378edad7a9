from typing import Optional


class Toggle:
    """Булево состояние с переключением."""

    def __init__(self, initial: bool = False):
        self._value = bool(initial)

    @property
    def value(self) -> bool:
        return self._value

    def toggle(self, value: Optional[bool] = None) -> bool:
        """Flip the state, or force it when a bool is given. Returns the new state."""
        # Не-bool аргументы игнорируются и трактуются как обычное переключение
        if isinstance(value, bool):
            self._value = value
        else:
            self._value = not self._value
        return self._value

    def __bool__(self) -> bool:
        return self._value
