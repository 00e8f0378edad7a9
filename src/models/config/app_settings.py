from dataclasses import dataclass, field
from typing import Dict

from models.domain.history_store import DEFAULT_CAPACITY


@dataclass
class AppSettings:
    """Модель настроек приложения."""

    # Ёмкость истории по умолчанию
    default_capacity: int = DEFAULT_CAPACITY

    # Ёмкость для именованных хранилищ истории
    capacities: Dict[str, int] = field(default_factory=dict)

    # Размер окна демо-редактора
    window_width: int = 480
    window_height: int = 360

    def capacity_for(self, name: str) -> int:
        """Capacity for a named store, falling back to the default."""
        return self.capacities.get(name, self.default_capacity)

    def to_dict(self) -> Dict:
        """Конвертировать в словарь."""
        return {
            'default_capacity': self.default_capacity,
            'capacities': dict(self.capacities),
            'window_width': self.window_width,
            'window_height': self.window_height,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'AppSettings':
        """Создать из словаря. Некорректные значения заменяются значениями по умолчанию."""
        defaults = cls()

        default_capacity = _positive_int(data, 'default_capacity', defaults.default_capacity)

        raw_capacities = data.get('capacities') or {}
        if not isinstance(raw_capacities, dict):
            print(f"Ignoring invalid capacities: {raw_capacities!r}")
            raw_capacities = {}

        capacities = {}
        for name, capacity in raw_capacities.items():
            if _is_positive_int(capacity):
                capacities[str(name)] = capacity
            else:
                print(f"Ignoring invalid capacity for '{name}': {capacity!r}")

        return cls(
            default_capacity=default_capacity,
            capacities=capacities,
            window_width=_positive_int(data, 'window_width', defaults.window_width),
            window_height=_positive_int(data, 'window_height', defaults.window_height),
        )


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def _positive_int(data: Dict, key: str, default: int) -> int:
    value = data.get(key, default)
    if not _is_positive_int(value):
        print(f"Ignoring invalid {key}: {value!r}")
        return default
    return value
