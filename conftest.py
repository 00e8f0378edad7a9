import os
import sys

import pytest

# Окна создаются без дисплея
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))


@pytest.fixture(scope="session")
def app():
    """Один QApplication на весь прогон: виджетам нужен именно он, а не QCoreApplication."""
    from PySide6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])
