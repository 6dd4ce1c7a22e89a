from src.core.project import Project
from src.models.project_models import Device, Port


def create_default_project() -> Project:
    """
    Build the project a new session starts with.

    One device owned by the project, one port owned by the project, and a
    single reference from the port to that device.
    """
    project = Project()
    device = project.device_add(Device())

    port = Port()
    port.device_add(project.create_ref(device))
    project.port_add(port)
    return project
