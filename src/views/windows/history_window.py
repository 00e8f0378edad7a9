"""
History Window - demo editor for a value history.

Shows the current value, the full timeline with the pointer highlighted,
and undo/redo buttons. Emits user intents as signals; the controller
decides what to do with them.
"""

from typing import Any, List, Optional
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton,
    QLabel, QLineEdit, QListWidget, QListWidgetItem
)
from PySide6.QtCore import Signal
from PySide6.QtGui import QFont, QKeySequence, QShortcut


class HistoryWindow(QMainWindow):
    """Главное окно демо-редактора истории."""

    # Signals
    undo_requested: Signal = Signal()
    redo_requested: Signal = Signal()
    jump_requested: Signal = Signal(int)  # Index in the timeline
    value_submitted: Signal = Signal(object)  # Value typed by the user

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("History Editor")
        self._updating_list = False
        self._setup_ui()
        self._setup_shortcuts()

    def _setup_ui(self) -> None:
        """Create the user interface."""
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setSpacing(6)

        # Текущее значение
        self.value_label = QLabel("")
        font = QFont()
        font.setPointSize(14)
        font.setBold(True)
        self.value_label.setFont(font)
        layout.addWidget(self.value_label)

        # Ввод нового значения
        input_row = QHBoxLayout()
        self.value_input = QLineEdit()
        self.value_input.setPlaceholderText("New value, Enter to write")
        self.value_input.returnPressed.connect(self._on_value_entered)
        input_row.addWidget(self.value_input)

        self.write_btn = QPushButton("Write")
        self.write_btn.clicked.connect(self._on_value_entered)
        input_row.addWidget(self.write_btn)
        layout.addLayout(input_row)

        # Таймлайн
        self.timeline_list = QListWidget()
        self.timeline_list.currentRowChanged.connect(self._on_row_changed)
        layout.addWidget(self.timeline_list)

        # Кнопки навигации
        nav_row = QHBoxLayout()
        self.undo_btn = QPushButton("Undo")
        self.undo_btn.setToolTip("Undo (Ctrl+Z)")
        self.undo_btn.clicked.connect(self.undo_requested)
        nav_row.addWidget(self.undo_btn)

        self.redo_btn = QPushButton("Redo")
        self.redo_btn.setToolTip("Redo (Ctrl+Y)")
        self.redo_btn.clicked.connect(self.redo_requested)
        nav_row.addWidget(self.redo_btn)
        nav_row.addStretch()
        layout.addLayout(nav_row)

        self.setCentralWidget(central)

    def _setup_shortcuts(self) -> None:
        self.undo_shortcut = QShortcut(QKeySequence(QKeySequence.StandardKey.Undo), self)
        self.undo_shortcut.activated.connect(self.undo_requested)
        self.redo_shortcut = QShortcut(QKeySequence(QKeySequence.StandardKey.Redo), self)
        self.redo_shortcut.activated.connect(self.redo_requested)

    def _on_value_entered(self) -> None:
        text = self.value_input.text()
        if text:
            self.value_submitted.emit(text)
            self.value_input.clear()

    def _on_row_changed(self, row: int) -> None:
        # Программное обновление списка не должно порождать переход
        if not self._updating_list and row >= 0:
            self.jump_requested.emit(row)

    # ─── View API for the controller ─────────────────────────────────────

    def set_value(self, value: Any) -> None:
        self.value_label.setText(str(value))

    def set_timeline(self, values: List[Any], pointer: int) -> None:
        """Перерисовать таймлайн и выделить позицию указателя."""
        self._updating_list = True
        try:
            self.timeline_list.clear()
            for index, value in enumerate(values):
                marker = "▶ " if index == pointer else "  "
                self.timeline_list.addItem(QListWidgetItem(f"{marker}{index}: {value}"))
            self.timeline_list.setCurrentRow(pointer)
        finally:
            self._updating_list = False

    def set_undo_enabled(self, enabled: bool) -> None:
        self.undo_btn.setEnabled(enabled)

    def set_redo_enabled(self, enabled: bool) -> None:
        self.redo_btn.setEnabled(enabled)
