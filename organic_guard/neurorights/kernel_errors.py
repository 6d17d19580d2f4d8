"""Errors raised by the neurorights kernel."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from organic_guard.neurorights.invariants import NeurorightType


class KernelError(Exception):
    """Base class for every neurorights kernel failure."""


class InvariantViolationError(KernelError):
    """A proposal breaks a non-derogable invariant."""

    def __init__(self, right_type: NeurorightType, details: str) -> None:
        self.right_type = right_type
        self.details = details
        super().__init__(
            f"Invariant violation [{right_type.to_invariant_string()}]: {details}"
        )


class InvariantSetUnlocked(KernelError):
    """The invariant set was found unlocked."""

    def __init__(self) -> None:
        super().__init__("Invariant set unlocked without authorization")


class PolicyDowngradeAttempted(KernelError):
    """A policy update would protect fewer rights than the active one."""

    def __init__(self) -> None:
        super().__init__(
            "Policy downgrade attempted (forbidden by non-derogable invariants)"
        )


class InvalidSignature(KernelError):
    """A DID signature was missing or invalid."""

    def __init__(self) -> None:
        super().__init__("Invalid DID signature")


class LegalRegimeConflict(KernelError):
    """Legal regimes conflict and could not be reconciled."""

    def __init__(self, regimes: str) -> None:
        self.regimes = regimes
        super().__init__(f"Legal regime conflict unresolved: {regimes}")


class AuditLogFailure(KernelError):
    """Writing to the audit log failed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Audit log write failed: {reason}")


class EvolveTokenMissing(KernelError):
    """No valid EVOLVE token accompanied the request."""

    def __init__(self) -> None:
        super().__init__("EVOLVE token missing or invalid")


class EvidenceBundleMissing(KernelError):
    """A proposal arrived without its evidence bundle."""

    def __init__(self) -> None:
        super().__init__("Proposal missing required 10-tag EvidenceBundle")