import sys
import os

# Ensure src is in python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import argparse
import logging

logging.basicConfig(level=logging.INFO)

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Modbus server simulator")
    parser.add_argument("--settings", help="INI file to keep settings in (default: native store)")
    parser.add_argument("--project", help="Project file to open instead of a new default project")
    parser.add_argument("--save-project", help="Write the resulting project to this file")
    parser.add_argument("--edit-project", action="store_true", help="Show the project dialog")
    return parser.parse_args(argv)


def main(argv=None):
    """
    Application Entry Point.
    """
    args = parse_args(argv)

    # Defer Qt-backed imports until after argument parsing
    from src.core.app_settings import ServerApplication
    from src.core.project_manager import ProjectManager
    from src.core.settings_store import SettingsStore
    from src.models.settings_models import SettingsMap

    store = SettingsStore(path=args.settings)
    cached = store.load()

    application = ServerApplication()
    application.set_cached_settings(cached)
    level = logging.getLevelName(application.log_level.upper())
    if isinstance(level, int):
        logging.getLogger().setLevel(level)
    else:
        logger.warning(f"Unknown log level '{application.log_level}', keeping INFO")

    manager = ProjectManager()
    if args.project:
        project = manager.load_project(args.project)
        if project is None:
            return 1
        application.add_recent_project(os.path.abspath(args.project))
    else:
        project = application.create_project()

    settings = SettingsMap().merge(application.cached_settings())

    if args.edit_project:
        os.environ.setdefault("QT_STYLE_OVERRIDE", "Fusion")
        from PySide6.QtWidgets import QApplication
        from src.ui.dialogs.project_dialog import ProjectDialog

        app = QApplication.instance() or QApplication(sys.argv)
        app.setApplicationName(application.name)

        dialog = ProjectDialog()
        dialog.set_cached_settings(cached)
        result = dialog.get_settings(project.settings())
        if result:
            project.set_settings(result)
        settings.merge(dialog.cached_settings())

    logger.info(f"Project '{project.name}': {project.device_count()} device(s), {project.port_count()} port(s)")
    if application.script_available():
        logger.info(f"Script interpreter: {application.script_default_executable()}")
    elif application.script_enable:
        logger.warning("No Python interpreter found, script execution is disabled")

    if args.save_project:
        if not manager.save_project(project, args.save_project):
            return 1
        application.add_recent_project(os.path.abspath(manager.current_project_path))
        settings.merge(application.cached_settings())

    store.save(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
