from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

# Modbus address space per table (0..65535)
DEFAULT_TABLE_SIZE = 65536


class PortType(Enum):
    TCP = "TCP"
    RTU = "RTU"
    ASC = "ASC"


@dataclass(eq=False)
class Device:
    """A simulated Modbus slave with its four register tables."""
    name: str = "Device"
    coils_count: int = DEFAULT_TABLE_SIZE
    discrete_inputs_count: int = DEFAULT_TABLE_SIZE
    holding_registers_count: int = DEFAULT_TABLE_SIZE
    input_registers_count: int = DEFAULT_TABLE_SIZE
    description: str = ""
    # Assigned by the owning project, -1 while unowned
    id: int = -1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'coils_count': self.coils_count,
            'discrete_inputs_count': self.discrete_inputs_count,
            'holding_registers_count': self.holding_registers_count,
            'input_registers_count': self.input_registers_count,
            'description': self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Device':
        return cls(
            name=data.get('name', "Device"),
            coils_count=data.get('coils_count', DEFAULT_TABLE_SIZE),
            discrete_inputs_count=data.get('discrete_inputs_count', DEFAULT_TABLE_SIZE),
            holding_registers_count=data.get('holding_registers_count', DEFAULT_TABLE_SIZE),
            input_registers_count=data.get('input_registers_count', DEFAULT_TABLE_SIZE),
            description=data.get('description', ""),
        )


@dataclass
class DeviceRef:
    """
    Non-owning link from a port to a device of the same project.

    Holds the project-scoped device id and the token of the project that
    issued it; resolve it through `Project.resolve()`.
    """
    device_id: int
    units: List[int] = field(default_factory=lambda: [1])
    # Token of the issuing project, -1 for refs not built by a project
    owner: int = -1


@dataclass(eq=False)
class Port:
    """Network or serial endpoint the simulator listens on."""
    name: str = "Port"
    type: PortType = PortType.TCP
    host: str = "0.0.0.0"
    port: int = 502
    serial_port_name: str = ""
    baud_rate: int = 9600
    timeout: float = 3.0
    device_refs: List[DeviceRef] = field(default_factory=list)

    def device_add(self, ref: DeviceRef):
        """Append a ref. Ports owned by a project go through `Project.port_device_add()`."""
        self.device_refs.append(ref)

    def device_remove(self, device_id: int) -> int:
        """Drop every ref to `device_id`. Returns how many were removed."""
        before = len(self.device_refs)
        self.device_refs = [r for r in self.device_refs if r.device_id != device_id]
        return before - len(self.device_refs)

    def references(self, device_id: int) -> bool:
        return any(r.device_id == device_id for r in self.device_refs)

    def to_dict(self) -> Dict[str, Any]:
        # Refs are stored by the caller, they need the project's device order
        return {
            'name': self.name,
            'type': self.type.value,
            'host': self.host,
            'port': self.port,
            'serial_port_name': self.serial_port_name,
            'baud_rate': self.baud_rate,
            'timeout': self.timeout,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Port':
        port_type = PortType.TCP
        for pt in PortType:
            if pt.value == data.get('type'):
                port_type = pt
                break

        return cls(
            name=data.get('name', "Port"),
            type=port_type,
            host=data.get('host', "0.0.0.0"),
            port=data.get('port', 502),
            serial_port_name=data.get('serial_port_name', ""),
            baud_rate=data.get('baud_rate', 9600),
            timeout=data.get('timeout', 3.0),
        )
