"""History System - именованные истории значений для Undo/Redo."""

from .history_manager import HistoryManager

__all__ = ['HistoryManager']
