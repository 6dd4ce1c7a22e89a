from src.core.app_settings import ServerApplication
from src.core.executable_discovery import ExecutableDiscovery, SearchProfile
from src.core.executable_resolver import ResolverPhase


class _StaticDiscovery(ExecutableDiscovery):
    def __init__(self, paths):
        super().__init__(SearchProfile(locations=()))
        self.paths = list(paths)

    def discover(self):
        return list(self.paths)


def _app(auto=(), **kw):
    return ServerApplication(discovery=_StaticDiscovery(auto), **kw)


def test_discovery_runs_at_construction():
    app = _app(["/usr/bin/python3"])
    assert app.script_auto_detected_executables() == ["/usr/bin/python3"]
    assert app.script_enable is True
    assert app.script_default_executable() == "/usr/bin/python3"


def test_save_contains_base_and_script_keys():
    app = _app(["/usr/bin/python3"])
    app.script_set_manual_executables(["/opt/py/bin/python3"])
    m = app.cached_settings()
    assert m["Script.Enable"] is True
    assert m["Script.Manual"] == ["/opt/py/bin/python3"]
    assert m["Script.Default"] == "/opt/py/bin/python3"
    assert m["Core.LogLevel"] == "INFO"
    assert m["Core.RecentProjects"] == []


def test_load_save_round_trip():
    app = _app(["/usr/bin/python3"])
    app.script_enable = False
    app.script_set_manual_executables(["/a", "/b"])
    app.script_set_default_executable("/c")
    app.add_recent_project("/tmp/p.mbsp")
    saved = app.cached_settings()

    other = _app(["/usr/bin/python3"])
    other.set_cached_settings(saved)
    assert other.script_enable is False
    assert other.script_manual_executables() == ["/a", "/b", "/c"]
    assert other.script_default_executable() == "/c"
    assert other.recent_projects() == ["/tmp/p.mbsp"]

    app.set_cached_settings(saved)
    assert app.cached_settings() == saved


def test_partial_load_leaves_other_state():
    app = _app()
    app.script_set_manual_executables(["/a"])
    app.set_cached_settings({"Script.Enable": "false"})
    assert app.script_enable is False
    assert app.script_manual_executables() == ["/a"]
    assert app.resolver.phase is ResolverPhase.UNRESOLVED


def test_ini_style_values_are_coerced():
    seen = []
    app = _app(on_coerce=lambda key, raw, new: seen.append(key))
    app.set_cached_settings({
        "Script.Enable": "true",
        "Script.Manual": "/only/one/python",
        "Script.Default": None,
        "Core.LogLevel": "debug",
    })
    assert app.script_enable is True
    assert app.script_manual_executables() == ["/only/one/python"]
    assert app.script_default_executable() == "/only/one/python"
    assert app.log_level == "debug"
    assert seen == ["Script.Default"]


def test_garbled_bool_becomes_false():
    app = _app()
    app.set_cached_settings({"Script.Enable": ["x"]})
    assert app.script_enable is False


def test_no_interpreter_means_scripts_unavailable():
    app = _app()
    assert app.script_default_executable() == ""
    assert not app.script_available()


def test_create_project_and_guid():
    app = _app()
    project = app.create_project()
    assert project.device_count() == 1 and project.port_count() == 1
    assert app.create_guid() == "bcde38bb-2402-4b3f-9ddb-3abfd0986852"


def test_recent_projects_are_bounded_and_unique():
    app = _app()
    for i in range(15):
        app.add_recent_project(f"/p{i}")
    app.add_recent_project("/p10")
    recent = app.recent_projects()
    assert len(recent) == 10
    assert recent[0] == "/p10"
    assert recent.count("/p10") == 1
