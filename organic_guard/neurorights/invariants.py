"""Non-derogable neurorights invariants and the enforcer interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from organic_guard.neurorights.kernel_errors import (
    InvalidSignature,
    InvariantSetUnlocked,
    InvariantViolationError,
)

if TYPE_CHECKING:
    from organic_guard.neurorights.constitutional_log import ViolationRecord
    from organic_guard.neurorights.policy import PolicyShard

INVARIANT_COGNITIVE_LIBERTY = "no_nonconsensual_modulation"
INVARIANT_MENTAL_PRIVACY = "no_raw_neural_export"
INVARIANT_AUGMENTATION_CONTINUITY = "no_guard_removal"
INVARIANT_PROJECT_CONTINUITY = "no_downgrade_without_consent"


class NeurorightType(Enum):
    """A protected neuroright, valued by its invariant string."""

    COGNITIVE_LIBERTY = INVARIANT_COGNITIVE_LIBERTY
    MENTAL_PRIVACY = INVARIANT_MENTAL_PRIVACY
    AUGMENTATION_CONTINUITY = INVARIANT_AUGMENTATION_CONTINUITY
    PROJECT_CONTINUITY = INVARIANT_PROJECT_CONTINUITY

    def to_invariant_string(self) -> str:
        return self.value

    @classmethod
    def from_invariant_string(cls, s: str) -> NeurorightType | None:
        """Return the right for an invariant string, or None if unknown."""
        try:
            return cls(s)
        except ValueError:
            return None


@dataclass
class InvariantViolation:
    """A recorded breach of an invariant; severity runs 1 to 10."""

    right_type: NeurorightType
    description: str
    proposal_hash: str
    timestamp: int = 0
    severity: int = 10


def _all_rights() -> list[NeurorightType]:
    return list(NeurorightType)


@dataclass
class InvariantSet:
    """The full set of non-derogable rights, locked by default."""

    rights: list[NeurorightType] = field(default_factory=_all_rights)
    locked: bool = True

    def verify(self, proposal: PolicyShard) -> bool:
        """Check that a proposal protects every right; raise on the first gap."""
        if not self.locked:
            raise InvariantSetUnlocked()
        for right in self.rights:
            if not proposal.protects_right(right):
                raise InvariantViolationError(
                    right,
                    f"Proposal fails to protect {right.to_invariant_string()}",
                )
        return True

    def is_locked(self) -> bool:
        return self.locked

    def lock(self, did_signature: str) -> None:
        """Lock the set; an empty signature raises InvalidSignature."""
        if not did_signature:
            raise InvalidSignature()
        self.locked = True


class NeurorightsEnforcer(ABC):
    """Interface every neurorights enforcement layer provides."""

    @abstractmethod
    def verify_invariants(self, proposal: PolicyShard) -> bool:
        """Verify that a proposal satisfies all non-derogable invariants."""

    @abstractmethod
    def is_right_protected(self, right: NeurorightType) -> bool:
        """Whether a right is protected under the current regime."""

    @abstractmethod
    def log_violation(self, record: ViolationRecord) -> None:
        """Record a constitutional violation."""

    @abstractmethod
    def approve_evolution(self, proposal: PolicyShard) -> None:
        """Approve an upgrade only if invariants are kept or tightened."""