import json

from src.core.project_factory import create_default_project
from src.core.project_manager import ProjectManager


def test_save_adds_extension_and_load_restores(tmp_path):
    manager = ProjectManager()
    saved = []
    manager.project_saved.connect(saved.append)

    project = create_default_project()
    project.set_settings({'name': "Plant", 'author': "ops"})
    assert manager.save_project(project, str(tmp_path / "plant"))

    path = str(tmp_path / "plant.mbsp")
    assert saved == [path]
    with open(path) as f:
        assert json.load(f)['project']['name'] == "Plant"

    loaded = []
    manager.project_loaded.connect(loaded.append)
    restored = manager.load_project(path)
    assert loaded == [restored]
    assert restored.name == "Plant"
    port = restored.ports()[0]
    assert restored.resolve(port.device_refs[0]) is restored.devices()[0]
    assert manager.current_project_path == path


def test_load_missing_file_reports_error(tmp_path):
    manager = ProjectManager()
    errors = []
    manager.error_occurred.connect(errors.append)
    assert manager.load_project(str(tmp_path / "missing.mbsp")) is None
    assert len(errors) == 1


def test_load_corrupt_file_reports_error(tmp_path):
    path = tmp_path / "bad.mbsp"
    path.write_text("{ not json")
    manager = ProjectManager()
    errors = []
    manager.error_occurred.connect(errors.append)
    assert manager.load_project(str(path)) is None
    assert errors and errors[0].startswith("Failed to load project")
