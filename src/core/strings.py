"""
Immutable string tables.

Each owning type (project, project dialog, application) has one constant
record of the field names, titles and settings keys it uses. The record is
built on first access and shared for the rest of the process.
"""
from dataclasses import dataclass


class _StringTable:
    """Mixin providing a lazily created, per-class shared instance."""

    @classmethod
    def instance(cls):
        # Look in the class's own namespace so subclasses get their own record
        inst = cls.__dict__.get("_instance")
        if inst is None:
            inst = cls()
            setattr(cls, "_instance", inst)
        return inst


@dataclass(frozen=True)
class ProjectStrings(_StringTable):
    name: str = "name"
    author: str = "author"
    comment: str = "comment"
    default_name: str = "Project"


@dataclass(frozen=True)
class ProjectDialogStrings(_StringTable):
    title: str = "Project"
    settings_prefix: str = "Ui.Dialogs.Project."


@dataclass(frozen=True)
class CoreStrings(_StringTable):
    settings_log_level: str = "Core.LogLevel"
    settings_recent_projects: str = "Core.RecentProjects"
    default_log_level: str = "INFO"


@dataclass(frozen=True)
class ServerStrings(CoreStrings):
    GUID: str = "bcde38bb-2402-4b3f-9ddb-3abfd0986852"
    settings_application: str = "Server"
    settings_organization: str = "ModbusTools"
    settings_script_enable: str = "Script.Enable"
    settings_script_manual: str = "Script.Manual"
    settings_script_default: str = "Script.Default"
