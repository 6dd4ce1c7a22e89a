import logging
from typing import Any, Dict, Optional

from PySide6.QtCore import QSettings

from src.core.strings import ServerStrings
from src.models.settings_models import SettingsMap

logger = logging.getLogger(__name__)


class SettingsStore:
    """
    Persists a SettingsMap with QSettings.

    Without a path the platform's native store is used
    (organization/application pair), with a path an INI file.
    Values are handed back as QSettings returns them; readers coerce.
    """

    def __init__(self, path: Optional[str] = None, organization: Optional[str] = None,
                 application: Optional[str] = None):
        s = ServerStrings.instance()
        if path:
            self._settings = QSettings(path, QSettings.IniFormat)
        else:
            self._settings = QSettings(organization or s.settings_organization,
                                       application or s.settings_application)

    @property
    def location(self) -> str:
        return self._settings.fileName()

    def save(self, settings: Dict[str, Any]):
        for key, value in settings.items():
            self._settings.setValue(key, value)
        self._settings.sync()
        logger.info(f"Settings saved to {self.location} ({len(settings)} keys)")

    def load(self) -> SettingsMap:
        m = SettingsMap()
        for key in self._settings.allKeys():
            m[key] = self._settings.value(key)
        logger.info(f"Settings loaded from {self.location} ({len(m)} keys)")
        return m

    def clear(self):
        self._settings.clear()
        self._settings.sync()
