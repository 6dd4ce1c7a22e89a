import logging
import json
import os
from typing import Optional

from PySide6.QtCore import QObject, Signal as QtSignal

from src.core.project import Project

logger = logging.getLogger(__name__)

PROJECT_EXTENSION = ".mbsp"
FORMAT_VERSION = "1.0"


class ProjectManager(QObject):
    """
    Saves and loads simulation projects.
    A project file is JSON holding the project's devices, ports and the
    references between them.
    """

    # Signals for UI feedback
    progress_updated = QtSignal(int, str)  # percentage, message
    project_loaded = QtSignal(object)  # Project
    project_saved = QtSignal(str)  # filepath
    error_occurred = QtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.current_project: Optional[Project] = None
        self.current_project_path: Optional[str] = None

    def save_project(self, project: Project, filepath: str) -> bool:
        """Write `project` to `filepath`, adding the project extension if missing."""
        try:
            self.progress_updated.emit(20, "Serializing project...")
            data = {
                'version': FORMAT_VERSION,
                'project': project.to_dict(),
            }

            if not filepath.endswith(PROJECT_EXTENSION):
                filepath += PROJECT_EXTENSION

            self.progress_updated.emit(60, "Writing project file...")
            with open(filepath, 'w') as f:
                json.dump(data, f, indent=4)

            self.current_project = project
            self.current_project_path = filepath
            self.progress_updated.emit(100, "Project saved successfully.")
            logger.info(f"Project '{project.name}' saved to {filepath}")
            self.project_saved.emit(filepath)
            return True

        except Exception as e:
            logger.exception(f"Failed to save project: {e}")
            self.error_occurred.emit(f"Failed to save project: {str(e)}")
            return False

    def load_project(self, filepath: str) -> Optional[Project]:
        """Read a project file. Returns None on failure."""
        try:
            self.progress_updated.emit(10, "Reading project file...")
            if not os.path.exists(filepath):
                raise FileNotFoundError(filepath)

            with open(filepath, 'r') as f:
                data = json.load(f)

            version = data.get('version', FORMAT_VERSION)
            if version != FORMAT_VERSION:
                logger.warning(f"Project file version {version} differs from {FORMAT_VERSION}")

            self.progress_updated.emit(50, "Restoring devices and ports...")
            project = Project.from_dict(data.get('project', {}))

            self.current_project = project
            self.current_project_path = filepath
            self.progress_updated.emit(100, "Project loaded successfully.")
            logger.info(f"Project '{project.name}' loaded from {filepath}")
            self.project_loaded.emit(project)
            return project

        except Exception as e:
            logger.exception(f"Failed to load project: {e}")
            self.error_occurred.emit(f"Failed to load project: {str(e)}")
            return None
