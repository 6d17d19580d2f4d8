"""Append-only audit trail of guard decisions and syscall outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from organic_guard.kernel.integration_errors import InvalidAuditEntry

_ENTRY_HASH = "audit_hash_placeholder"


def _debug_option(value: str | None) -> str:
    if value is None:
        return "None"
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'Some("{escaped}")'


class AuditEntryType(Enum):
    """Kinds of event the audit log records."""

    SYSCALL_WRAPPED = "SyscallWrapped"
    SYSCALL_REJECTED = "SyscallRejected"
    GUARD_DECISION = "GuardDecision"
    NEURORIGHTS_VIOLATION = "NeurorightsViolation"
    MODULE_LOAD_APPROVED = "ModuleLoadApproved"
    MODULE_LOAD_REJECTED = "ModuleLoadRejected"
    BOOT_CHAIN_VERIFIED = "BootChainVerified"
    EVOLVE_TOKEN_CONSUMED = "EvolveTokenConsumed"


@dataclass
class AuditEntry:
    """One audited event."""

    entry_type: AuditEntryType
    did: str
    cpu_instance_id: str
    details: str
    timestamp: int = 0
    hash: str = ""
    anchored: bool = False
    anchor_hash: str | None = None

    def compute_hash(self) -> None:
        """Fill in the entry hash; an entry without details raises InvalidAuditEntry."""
        if not self.details:
            raise InvalidAuditEntry()
        self.hash = _ENTRY_HASH

    def mark_anchored(self, chain_hash: str) -> None:
        self.anchored = True
        self.anchor_hash = chain_hash


@dataclass
class KernelAuditLog:
    """Append-only log of audit entries, anchorable to a chain."""

    entries: list[AuditEntry] = field(default_factory=list)
    last_anchor_hash: str | None = None
    total_entries: int = 0
    anchored_entries: int = 0

    def append(self, entry: AuditEntry) -> None:
        """Hash and stamp an entry, then add it to the log."""
        entry.compute_hash()
        entry.timestamp = self.total_entries
        self.entries.append(entry)
        self.total_entries += 1

    def log_syscall_wrapped(self, did: str, cpu_id: str, syscall: str) -> None:
        self.append(
            AuditEntry(
                AuditEntryType.SYSCALL_WRAPPED,
                did,
                cpu_id,
                f"Syscall wrapped: {syscall}",
            )
        )

    def log_syscall_rejected(
        self, did: str, cpu_id: str, syscall: str, reason: str
    ) -> None:
        self.append(
            AuditEntry(
                AuditEntryType.SYSCALL_REJECTED,
                did,
                cpu_id,
                f"Syscall rejected: {syscall} - {reason}",
            )
        )

    def log_neurorights_violation(self, did: str, cpu_id: str, violation: str) -> None:
        self.append(
            AuditEntry(
                AuditEntryType.NEURORIGHTS_VIOLATION,
                did,
                cpu_id,
                f"Neurorights violation: {violation}",
            )
        )

    def anchor_to_chain(self, chain_hash: str) -> None:
        """Anchor every not-yet-anchored entry to the given chain hash."""
        self.last_anchor_hash = chain_hash
        for entry in self.entries:
            if not entry.anchored:
                entry.mark_anchored(chain_hash)
                self.anchored_entries += 1

    def entries_by_type(self, entry_type: AuditEntryType) -> list[AuditEntry]:
        return [e for e in self.entries if e.entry_type is entry_type]

    def unanchored_entries(self) -> list[AuditEntry]:
        return [e for e in self.entries if not e.anchored]

    def export_audit_trail(self) -> str:
        return (
            f"AuditTrail: {self.total_entries} total, "
            f"{self.anchored_entries} anchored, "
            f"last_anchor: {_debug_option(self.last_anchor_hash)}"
        )

    def to_hex_anchor(self) -> str:
        return f"0xaudit{self.total_entries & 0xFFFFFFFF:08x}"