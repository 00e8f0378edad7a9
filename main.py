#!/usr/bin/env python3
"""
History Editor - demo for the undo/redo value history
Main entry point
"""

import sys
import os

# Добавить src в путь для импортов
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from PySide6.QtWidgets import QApplication
from controllers.history_controller import HistoryController
from services.history import HistoryManager
from services.serialization import get_settings_manager
from views.windows import HistoryWindow


def main():
    """Запуск приложения."""
    app = QApplication(sys.argv)
    app.setApplicationName("History Editor")
    app.setApplicationVersion("1.0.0")

    settings = get_settings_manager().load_or_default()
    manager = HistoryManager(settings)
    history = manager.create_store("editor", "")

    window = HistoryWindow()
    window.resize(settings.window_width, settings.window_height)
    controller = HistoryController(history, window)

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
