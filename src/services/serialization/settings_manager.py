"""
Settings Manager - сервис для загрузки и сохранения настроек приложения.

Отвечает за сериализацию/десериализацию настроек в JSON формате
и за выбор ёмкости истории для именованных хранилищ. Повреждённый
файл настроек никогда не роняет приложение: используются значения
по умолчанию.
"""

import json
import os
from typing import Optional

from models.config.app_settings import AppSettings


DEFAULT_CONFIG_PATH = "history_editor.json"

# Global instance
_settings_manager: Optional['SettingsManager'] = None


def get_settings_manager() -> 'SettingsManager':
    """Get or create the shared SettingsManager used by main.py."""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager


class SettingsManager:
    """Сервис для загрузки и сохранения настроек приложения."""

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH):
        # Путь к JSON с ёмкостями историй и размером окна
        self.config_path = config_path

    def load_settings(self) -> Optional[AppSettings]:
        """Загрузить настройки из файла."""
        if not os.path.exists(self.config_path):
            return None

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            if not isinstance(data, dict):
                print(f"Error loading settings: expected a JSON object in {self.config_path}")
                return None

            return AppSettings.from_dict(data)

        except (OSError, ValueError) as e:
            print(f"Error loading settings: {e}")
            return None

    def load_or_default(self) -> AppSettings:
        """Загрузить настройки или вернуть настройки по умолчанию."""
        return self.load_settings() or AppSettings()

    def save_settings(self, settings: AppSettings) -> bool:
        """Сохранить настройки в файл."""
        try:
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(settings.to_dict(), f, indent=4, ensure_ascii=False)
            return True

        except (OSError, TypeError) as e:
            print(f"Error saving settings: {e}")
            return False

    def capacity_for(self, name: str) -> int:
        """Ёмкость истории для именованного хранилища."""
        return self.load_or_default().capacity_for(name)
