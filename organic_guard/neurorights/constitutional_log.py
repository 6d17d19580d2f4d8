"""Constitutional log of neurorights violations."""

from __future__ import annotations

from dataclasses import dataclass, field

from organic_guard.neurorights.invariants import InvariantViolation, NeurorightType

_CRITICAL_SEVERITY = 8


def _debug_option(value: str | None) -> str:
    if value is None:
        return "None"
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'Some("{escaped}")'


@dataclass
class ViolationRecord:
    """A violation bound to the DID and CPU instance it concerns."""

    violation: InvariantViolation
    did: str
    cpu_instance_id: str
    anchored: bool = False
    anchor_hash: str | None = None

    def mark_anchored(self, hash: str) -> None:
        self.anchored = True
        self.anchor_hash = hash


@dataclass
class ConstitutionalLog:
    """Append-only record of constitutional violations."""

    records: list[ViolationRecord] = field(default_factory=list)
    last_anchor_hash: str | None = None

    def log_violation(self, record: ViolationRecord) -> None:
        self.records.append(record)

    def violations_by_right(self, right: NeurorightType) -> list[ViolationRecord]:
        return [r for r in self.records if r.violation.right_type is right]

    def critical_violations(self) -> list[ViolationRecord]:
        return [r for r in self.records if r.violation.severity >= _CRITICAL_SEVERITY]

    def anchor_to_chain(self, hash: str) -> None:
        """Remember the latest chain anchor; records keep their own state."""
        self.last_anchor_hash = hash

    def export_audit_trail(self) -> str:
        return (
            f"AuditTrail: {len(self.records)} records, "
            f"last_anchor: {_debug_option(self.last_anchor_hash)}"
        )