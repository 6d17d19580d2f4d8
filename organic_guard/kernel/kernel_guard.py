"""Guard service that runs at kernel level and approves module loads."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from organic_guard.kernel.integration_errors import (
    GuardServiceNotActive,
    InvalidModuleHash,
    InvalidModuleSignature,
)

REALITY_OS_KERNEL_VERSION = "0.3.0"
"""Kernel version this integration layer is compatible with."""

INVARIANT_KERNEL_MODULE_LOADING = "no_module_without_guard_approval"
"""Non-derogable invariant: no module loads without guard approval."""

_DEFAULT_GUARDS = ("roh_guard", "rod_guard", "lifeforce_guard", "neurorights_guard")


class EvidenceAnchor(str, Enum):
    """Evidence bundle hex anchors for the kernel integration layer."""

    KERNEL_GUARD = "0xkernelg01"
    SYSCALL_GATE = "0xsysgate02"
    DEVICE_CLASS = "0xdevclass03"
    AUDIT_TRAIL = "0xaudit04"


class GuardServiceState(Enum):
    """Lifecycle of the guard service."""

    UNINITIALIZED = "Uninitialized"
    ACTIVE = "Active"
    HARD_STOP = "HardStop"
    RECOVERY_REQUIRED = "RecoveryRequired"


@dataclass
class GuardService:
    """The set of running guards and their health."""

    state: GuardServiceState = GuardServiceState.UNINITIALIZED
    active_guards: list[str] = field(default_factory=list)
    violation_count: int = 0
    last_heartbeat: int = 0

    def initialize(self) -> None:
        """Start the standard guards and become active."""
        self.active_guards.extend(_DEFAULT_GUARDS)
        self.state = GuardServiceState.ACTIVE
        self.last_heartbeat = 0

    def heartbeat(self) -> None:
        """Record liveness; raises unless the service is active."""
        if self.state is not GuardServiceState.ACTIVE:
            raise GuardServiceNotActive()
        self.last_heartbeat = 0

    def trigger_hardstop(self, reason: str) -> None:
        """Enter HardStop and count the violation."""
        self.state = GuardServiceState.HARD_STOP
        self.violation_count += 1

    def is_active(self) -> bool:
        return self.state is GuardServiceState.ACTIVE

    def active_guard_count(self) -> int:
        return len(self.active_guards)

    def to_hex_anchor(self) -> str:
        return f"0xguard{len(self.active_guards) & 0xFFFFFFFF:08x}"


@dataclass
class KernelGuard:
    """A loaded guard service together with the module that carries it."""

    service: GuardService
    kernel_module_hash: str = ""
    loaded_at: int = 0

    @classmethod
    def load(cls) -> KernelGuard:
        """Create a guard with an initialised, active service."""
        service = GuardService()
        service.initialize()
        return cls(service)

    def verify_module_signature(self, signature: str) -> bool:
        """Accept any non-empty signature; an empty one raises."""
        if not signature:
            raise InvalidModuleSignature()
        return True

    def approve_module_load(self, module_hash: str) -> None:
        """Allow a module to load; raises if inactive or the hash is empty."""
        if not self.service.is_active():
            raise GuardServiceNotActive()
        if not module_hash:
            raise InvalidModuleHash()

    def to_hex_anchor(self) -> str:
        return f"0xkguard{len(self.kernel_module_hash.encode()) & 0xFFFFFFFF:08x}"