class ProjectError(Exception):
    """Base class for project graph errors."""


class DanglingReferenceError(ProjectError):
    """A DeviceRef points at a device the project no longer owns."""

    def __init__(self, device_id: int):
        super().__init__(f"Device reference points at unknown device id {device_id}")
        self.device_id = device_id


class DuplicateDeviceError(ProjectError):
    """The device is already owned by a project."""
