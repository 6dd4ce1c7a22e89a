import itertools
import logging
from typing import Any, Dict, List, Optional

from src.core.errors import DanglingReferenceError, DuplicateDeviceError, ProjectError
from src.core.events import EventEmitter
from src.core.strings import ProjectStrings
from src.models.project_models import Device, DeviceRef, Port
from src.models.settings_models import SettingsMap, to_str

logger = logging.getLogger(__name__)

# Distinguishes refs issued by different projects
_project_tokens = itertools.count()


class Project(EventEmitter):
    """
    Owns the devices and ports of a simulation project.

    Devices live in an id-keyed arena. Ports refer to them through DeviceRef
    ids, so removing a device sweeps the refs of every port instead of
    leaving them dangling.

    Events: device_added(device), device_removed(device),
    port_added(port), port_removed(port), settings_changed().
    """

    def __init__(self, name: str = "", author: str = "", comment: str = ""):
        super().__init__()
        self.name = name or ProjectStrings.instance().default_name
        self.author = author
        self.comment = comment
        self._devices: Dict[int, Device] = {}
        self._ports: List[Port] = []
        self._next_id = 0
        self.token = next(_project_tokens)

    # -- Settings (bare keys, same map the project dialog edits) ----------
    def settings(self) -> SettingsMap:
        s = ProjectStrings.instance()
        return SettingsMap({s.name: self.name, s.author: self.author, s.comment: self.comment})

    def set_settings(self, settings: Dict[str, Any]):
        s = ProjectStrings.instance()
        if s.name in settings:
            self.name = to_str(settings[s.name], s.name)
        if s.author in settings:
            self.author = to_str(settings[s.author], s.author)
        if s.comment in settings:
            self.comment = to_str(settings[s.comment], s.comment)
        self.emit("settings_changed")

    # -- Devices -----------------------------------------------------------
    def devices(self) -> List[Device]:
        return list(self._devices.values())

    def device_count(self) -> int:
        return len(self._devices)

    def device(self, device_id: int) -> Optional[Device]:
        return self._devices.get(device_id)

    def device_index(self, device: Device) -> int:
        """Position of `device` in `devices()`, -1 if not owned."""
        for i, d in enumerate(self._devices.values()):
            if d is device:
                return i
        return -1

    def device_add(self, device: Device) -> Device:
        # A device owned by any project carries its id until removed
        if device.id != -1:
            raise DuplicateDeviceError(f"Device '{device.name}' is already owned by a project")
        device.id = self._next_id
        self._next_id += 1
        self._devices[device.id] = device
        logger.info(f"Device added: {device.name} (id={device.id})")
        self.emit("device_added", device)
        return device

    def device_remove(self, device: Device) -> bool:
        """Remove `device` and every port reference to it."""
        if self._devices.get(device.id) is not device:
            logger.warning(f"Device '{device.name}' is not part of project '{self.name}'")
            return False
        swept = sum(port.device_remove(device.id) for port in self._ports)
        del self._devices[device.id]
        device.id = -1
        logger.info(f"Device removed: {device.name} ({swept} port reference(s) cleared)")
        self.emit("device_removed", device)
        return True

    def create_ref(self, device: Device, units: Optional[List[int]] = None) -> DeviceRef:
        """Build a ref to an owned device."""
        if self._devices.get(device.id) is not device:
            raise DanglingReferenceError(device.id)
        return DeviceRef(device.id, [1] if units is None else list(units), owner=self.token)

    def resolve(self, ref: DeviceRef) -> Device:
        """Return the device `ref` points at. Refs issued by another project never resolve."""
        if ref.owner != self.token:
            raise DanglingReferenceError(ref.device_id)
        try:
            return self._devices[ref.device_id]
        except KeyError:
            raise DanglingReferenceError(ref.device_id) from None

    def port_device_add(self, port: Port, device: Device, units: Optional[List[int]] = None) -> DeviceRef:
        """Link an owned port to an owned device."""
        if not any(p is port for p in self._ports):
            raise ProjectError(f"Port '{port.name}' is not part of project '{self.name}'")
        ref = self.create_ref(device, units)
        port.device_add(ref)
        return ref

    # -- Ports -------------------------------------------------------------
    def ports(self) -> List[Port]:
        return list(self._ports)

    def port_count(self) -> int:
        return len(self._ports)

    def port_add(self, port: Port) -> Port:
        for ref in port.device_refs:
            self.resolve(ref)
        self._ports.append(port)
        logger.info(f"Port added: {port.name}")
        self.emit("port_added", port)
        return port

    def port_remove(self, port: Port) -> bool:
        for i, p in enumerate(self._ports):
            if p is port:
                del self._ports[i]
                logger.info(f"Port removed: {port.name}")
                self.emit("port_removed", port)
                return True
        return False

    # -- Serialization -----------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        devices = self.devices()
        index_of = {d.id: i for i, d in enumerate(devices)}
        ports = []
        for port in self._ports:
            data = port.to_dict()
            data['devices'] = []
            for ref in port.device_refs:
                if ref.owner != self.token or ref.device_id not in index_of:
                    logger.warning(f"Port '{port.name}' holds a dangling ref to device id {ref.device_id}, not saved")
                    continue
                data['devices'].append({'device': index_of[ref.device_id], 'units': list(ref.units)})
            ports.append(data)
        return {
            'name': self.name,
            'author': self.author,
            'comment': self.comment,
            'devices': [d.to_dict() for d in devices],
            'ports': ports,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Project':
        project = cls(
            name=data.get('name', ""),
            author=data.get('author', ""),
            comment=data.get('comment', ""),
        )
        devices = [project.device_add(Device.from_dict(d)) for d in data.get('devices', [])]
        for port_data in data.get('ports', []):
            port = Port.from_dict(port_data)
            for ref_data in port_data.get('devices', []):
                index = ref_data.get('device', -1)
                if not 0 <= index < len(devices):
                    logger.warning(f"Port '{port.name}' refers to unknown device #{index}, skipped")
                    continue
                port.device_add(project.create_ref(devices[index], ref_data.get('units')))
            project.port_add(port)
        return project
