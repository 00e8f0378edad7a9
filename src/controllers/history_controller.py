from typing import Any

# Используем абсолютные импорты для совместимости с run_test.py
try:
    from models.domain.observable_history import ObservableHistory
except ImportError:
    # Для случаев, когда запускаем из src/
    from ..models.domain.observable_history import ObservableHistory


class HistoryController:
    """Контроллер, связывающий историю значений с окном редактора."""

    def __init__(self, history: ObservableHistory, view):
        self.history = history
        self.view = view

        # Подключить сигналы от View
        self.view.undo_requested.connect(self.undo)
        self.view.redo_requested.connect(self.redo)
        self.view.jump_requested.connect(self.jump_to)
        self.view.value_submitted.connect(self.submit_value)

        # Подключить сигналы модели
        self.history.history_changed.connect(self.refresh_view)

        self.refresh_view()

    def submit_value(self, value: Any) -> bool:
        """Записать значение, введённое пользователем."""
        return self.history.write(value)

    def undo(self) -> bool:
        return self.history.undo()

    def redo(self) -> bool:
        return self.history.redo()

    def jump_to(self, index: int) -> bool:
        return self.history.goto(index)

    def refresh_view(self) -> None:
        """Обновить View по текущему состоянию истории."""
        self.view.set_value(self.history.current_value)
        self.view.set_timeline(list(self.history.timeline), self.history.pointer)
        self.view.set_undo_enabled(self.history.can_undo())
        self.view.set_redo_enabled(self.history.can_redo())
