"""Classification of devices into the inner and outer domains."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from organic_guard.kernel.integration_errors import DeviceAlreadyRegistered


class DomainLabel(Enum):
    """Inner devices couple directly to neural tissue; outer ones do not."""

    INNER = "inner"
    OUTER = "outer"

    def __str__(self) -> str:
        return self.value

    def allows_raw_neural_data(self) -> bool:
        return self is DomainLabel.INNER


@dataclass
class DeviceEntry:
    """A registered device path with its domain and permitted operations."""

    device_path: str
    domain: DomainLabel
    device_type: str
    allowed_operations: list[str] = field(default_factory=list)

    def add_allowed_operation(self, op: str) -> None:
        if op not in self.allowed_operations:
            self.allowed_operations.append(op)

    def is_operation_allowed(self, op: str) -> bool:
        return op in self.allowed_operations


@dataclass
class DeviceClassifier:
    """Registry that maps device paths to their domain."""

    devices: list[DeviceEntry] = field(default_factory=list)
    inner_domain_count: int = 0
    outer_domain_count: int = 0

    def register_device(self, entry: DeviceEntry) -> None:
        """Register a device; a path registered twice raises DeviceAlreadyRegistered."""
        if any(device.device_path == entry.device_path for device in self.devices):
            raise DeviceAlreadyRegistered(entry.device_path)
        if entry.domain is DomainLabel.INNER:
            self.inner_domain_count += 1
        else:
            self.outer_domain_count += 1
        self.devices.append(entry)

    def classify_path(self, path: str) -> DomainLabel:
        """Domain of the first device whose path prefixes ``path``; outer if none."""
        for device in self.devices:
            if path.startswith(device.device_path):
                return device.domain
        return DomainLabel.OUTER

    def inner_devices(self) -> list[DeviceEntry]:
        return [d for d in self.devices if d.domain is DomainLabel.INNER]

    def is_inner_domain_path(self, path: str) -> bool:
        return self.classify_path(path) is DomainLabel.INNER

    def to_hex_anchor(self) -> str:
        return f"0xdevclass{len(self.devices) & 0xFFFFFFFF:08x}"