"""Domain models - контейнеры состояния; только ObservableHistory зависит от Qt."""

from .history_store import HistoryStore, InvalidCapacity, create_history, opaque_equals
from .observable_history import ObservableHistory
from .toggle import Toggle
from .counter import Counter
from .array_state import ArrayState
from .previous import Previous

__all__ = [
    'HistoryStore', 'InvalidCapacity', 'create_history', 'opaque_equals',
    'ObservableHistory', 'Toggle', 'Counter', 'ArrayState', 'Previous'
]
