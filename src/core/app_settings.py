"""
Application objects and their settings.

CoreApplication carries the settings every tool of the suite shares.
ServerApplication adds the script interpreter configuration and knows how to
build a fresh simulation project.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from src.core.executable_discovery import ExecutableDiscovery
from src.core.executable_resolver import ExecutableResolver
from src.core.project import Project
from src.core.project_factory import create_default_project
from src.core.strings import CoreStrings, ServerStrings
from src.models.settings_models import CoercionHook, SettingsMap, to_bool, to_str, to_str_list

logger = logging.getLogger(__name__)

MAX_RECENT_PROJECTS = 10


class CoreApplication:
    """Settings shared by all applications: log level and recent projects."""

    def __init__(self, name: str, on_coerce: Optional[CoercionHook] = None):
        s = CoreStrings.instance()
        self.name = name
        self.on_coerce = on_coerce
        self.log_level = s.default_log_level
        self._recent_projects: List[str] = []

    def recent_projects(self) -> List[str]:
        return list(self._recent_projects)

    def set_recent_projects(self, paths: Iterable[str]):
        self._recent_projects = list(dict.fromkeys(paths))[:MAX_RECENT_PROJECTS]

    def add_recent_project(self, path: str):
        self.set_recent_projects([path] + [p for p in self._recent_projects if p != path])

    def cached_settings(self) -> SettingsMap:
        s = CoreStrings.instance()
        m = SettingsMap()
        m[s.settings_log_level] = self.log_level
        m[s.settings_recent_projects] = self.recent_projects()
        return m

    def set_cached_settings(self, settings: Dict[str, Any]):
        s = CoreStrings.instance()
        key = s.settings_log_level
        if key in settings:
            self.log_level = to_str(settings[key], key, self.on_coerce) or s.default_log_level
        key = s.settings_recent_projects
        if key in settings:
            self.set_recent_projects(to_str_list(settings[key], key, self.on_coerce))


class ServerApplication(CoreApplication):
    """
    Modbus server simulator application.

    Interpreters are discovered once, when the application is created.
    """

    def __init__(self, discovery: Optional[ExecutableDiscovery] = None,
                 on_coerce: Optional[CoercionHook] = None):
        super().__init__(ServerStrings.instance().settings_application, on_coerce)
        self.script_enable = True
        discovery = discovery or ExecutableDiscovery()
        self.resolver = ExecutableResolver(auto_detected=discovery.discover())

    @staticmethod
    def create_guid() -> str:
        return ServerStrings.instance().GUID

    def create_project(self) -> Project:
        return create_default_project()

    # -- Script configuration ----------------------------------------------
    def script_auto_detected_executables(self) -> List[str]:
        return self.resolver.auto_detected_executables()

    def script_manual_executables(self) -> List[str]:
        return self.resolver.manual_executables()

    def script_set_manual_executables(self, paths: Iterable[str]):
        self.resolver.set_manual_executables(paths)

    def script_default_executable(self) -> str:
        return self.resolver.default_executable()

    def script_set_default_executable(self, path: str):
        self.resolver.set_default_executable(path)

    def script_available(self) -> bool:
        """True when scripts are enabled and an interpreter is known."""
        return self.script_enable and bool(self.script_default_executable())

    # -- Settings ------------------------------------------------------------
    def cached_settings(self) -> SettingsMap:
        s = ServerStrings.instance()
        m = super().cached_settings()
        m[s.settings_script_enable] = self.script_enable
        m[s.settings_script_manual] = self.script_manual_executables()
        m[s.settings_script_default] = self.script_default_executable()
        return m

    def set_cached_settings(self, settings: Dict[str, Any]):
        s = ServerStrings.instance()
        super().set_cached_settings(settings)

        key = s.settings_script_enable
        if key in settings:
            self.script_enable = to_bool(settings[key], key, self.on_coerce)
        key = s.settings_script_manual
        if key in settings:
            self.script_set_manual_executables(to_str_list(settings[key], key, self.on_coerce))
        key = s.settings_script_default
        if key in settings:
            self.script_set_default_executable(to_str(settings[key], key, self.on_coerce))
