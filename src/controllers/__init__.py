"""Controllers - связующее звено между Views и моделями истории."""

from .history_controller import HistoryController

__all__ = ['HistoryController']
