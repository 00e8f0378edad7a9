"""Windows - окна приложения."""

from .history_window import HistoryWindow

__all__ = ['HistoryWindow']
