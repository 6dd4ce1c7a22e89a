from src.core.app_settings import ServerApplication
from src.core.executable_discovery import ExecutableDiscovery, SearchProfile
from src.core.settings_binder import PrefixedFieldBinder
from src.core.settings_store import SettingsStore
from src.models.settings_models import SettingsMap


def _app():
    return ServerApplication(discovery=ExecutableDiscovery(SearchProfile(locations=())))


def test_ini_round_trip_through_application(tmp_path):
    path = str(tmp_path / "server.ini")
    app = _app()
    app.script_enable = False
    app.script_set_manual_executables(["/opt/a/python3", "/opt/b/python3"])
    app.script_set_default_executable("/opt/b/python3")

    SettingsStore(path=path).save(app.cached_settings())

    restored = _app()
    restored.set_cached_settings(SettingsStore(path=path).load())
    assert restored.script_enable is False
    assert restored.script_manual_executables() == ["/opt/a/python3", "/opt/b/python3"]
    assert restored.script_default_executable() == "/opt/b/python3"


def test_several_owners_share_one_file(tmp_path):
    path = str(tmp_path / "server.ini")
    binder = PrefixedFieldBinder("Ui.Dialogs.Project.", {'name': str, 'author': str, 'comment': str})
    merged = SettingsMap().merge(_app().cached_settings())
    merged.merge(binder.to_cache({'name': "Plant", 'author': "ops", 'comment': "hello"}))

    SettingsStore(path=path).save(merged)
    loaded = SettingsStore(path=path).load()

    values = {'name': "", 'author': "", 'comment': ""}
    binder.from_cache(loaded, values)
    assert values == {'name': "Plant", 'author': "ops", 'comment': "hello"}
    assert "Script.Enable" in loaded


def test_clear(tmp_path):
    store = SettingsStore(path=str(tmp_path / "server.ini"))
    store.save({"Ui.Dialogs.Project.name": "x"})
    store.clear()
    assert store.load() == {}
