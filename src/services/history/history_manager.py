from typing import Any, Dict, List, Optional

from models.config.app_settings import AppSettings
from models.domain.observable_history import ObservableHistory


class HistoryManager:
    """Менеджер именованных историй значений для undo/redo."""

    def __init__(self, settings: Optional[AppSettings] = None):
        self.settings = settings or AppSettings()
        self._stores: Dict[str, ObservableHistory] = {}

    def create_store(self, name: str, initial: Any,
                     capacity: Optional[int] = None) -> ObservableHistory:
        """Создать историю и зарегистрировать её под именем.

        Without an explicit capacity the settings decide. An existing
        store with the same name is replaced.
        """
        if capacity is None:
            capacity = self.settings.capacity_for(name)

        store = ObservableHistory.create(initial, capacity=capacity)
        self._stores[name] = store
        return store

    def get_store(self, name: str) -> ObservableHistory:
        """Получить историю по имени (KeyError, если её нет)."""
        if name not in self._stores:
            raise KeyError(f"Unknown history store: {name}")
        return self._stores[name]

    def has_store(self, name: str) -> bool:
        return name in self._stores

    def remove_store(self, name: str) -> bool:
        return self._stores.pop(name, None) is not None

    def store_names(self) -> List[str]:
        return list(self._stores)

    def clear(self):
        """Удалить все истории."""
        self._stores.clear()
