"""Guard checks placed in front of syscalls that touch sensitive resources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from organic_guard.kernel.device_classifier import DomainLabel
from organic_guard.kernel.integration_errors import (
    GuardServiceNotActive,
    InnerDomainAccessDenied,
    InnerDomainMmapBlocked,
    RawSocketBlocked,
)
from organic_guard.kernel.kernel_guard import KernelGuard

SOCK_RAW = 3
_INNER_DEVICE_PREFIX = "/dev/bci_inner"


class WrappedSyscall(Enum):
    """Syscalls that pass through the guard."""

    OPEN = "open"
    READ = "read"
    WRITE = "write"
    MMAP = "mmap"
    IOCTL = "ioctl"
    SOCKET = "socket"
    CONNECT = "connect"
    SEND = "send"
    RECEIVE = "receive"

    def __str__(self) -> str:
        return self.value

    def requires_guard_check(self, domain: DomainLabel) -> bool:
        """Inner domain always needs a check; outer only for mmap, ioctl and socket."""
        if domain is DomainLabel.INNER:
            return True
        return self in _OUTER_CHECKED


_OUTER_CHECKED = frozenset(
    {WrappedSyscall.MMAP, WrappedSyscall.IOCTL, WrappedSyscall.SOCKET}
)


@dataclass
class SyscallWrapper:
    """Runs guard checks before syscalls and counts what it saw."""

    guard: KernelGuard
    wrapped_count: int = 0
    rejected_count: int = 0

    def _enter(self) -> None:
        self.wrapped_count += 1
        if not self.guard.service.is_active():
            raise GuardServiceNotActive()

    def wrap_open(self, path: str, domain: DomainLabel) -> None:
        """Allow an open; inner-domain paths must be known BCI devices."""
        self._enter()
        if domain is DomainLabel.INNER and not path.startswith(_INNER_DEVICE_PREFIX):
            raise InnerDomainAccessDenied(path)

    def wrap_mmap(self, addr: int, size: int, domain: DomainLabel) -> None:
        """Allow an mmap; inner-domain regions are never mapped."""
        self._enter()
        if domain is DomainLabel.INNER:
            raise InnerDomainMmapBlocked()

    def wrap_ioctl(self, fd: int, request: int, domain: DomainLabel) -> None:
        """Allow an ioctl while the guard is active."""
        self._enter()

    def wrap_socket(self, domain_type: int, socket_type: int) -> None:
        """Allow a socket; raw sockets are refused."""
        self._enter()
        if socket_type == SOCK_RAW:
            raise RawSocketBlocked()

    def reject_syscall(self, syscall: WrappedSyscall, reason: str) -> None:
        self.rejected_count += 1

    def rejection_rate(self) -> float:
        if self.wrapped_count == 0:
            return 0.0
        return self.rejected_count / self.wrapped_count

    def to_hex_anchor(self) -> str:
        return f"0xsyscall{self.wrapped_count & 0xFFFFFFFF:08x}"