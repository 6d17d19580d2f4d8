"""ALN particles: signed messages carrying evidence and corridor-safe metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from organic_guard.protocol.protocol_errors import (
    CorridorViolation,
    IncompleteEvidenceBundle,
    SigningFailed,
)

PROTOCOL_ID = "/aln/sovereign/1.0.0"
"""Protocol identifier of the ALN sovereign stack."""

REQUIRED_EVIDENCE_TAGS = 10

_ROH_MAX = 0.3
_ROD_HARDSTOP = 1.0
_HARD_STOP_BAND = "HardStop"
_PARTICLE_SIGNATURE = "signed_hash_placeholder"


class EvidenceAnchor(str, Enum):
    """Evidence bundle hex anchors for networking."""

    NETWORK_CORRIDOR = "0xnetcorr01"
    DID_ROUTING = "0xdidroute02"
    ENCRYPTION_LAYER = "0xencrypt03"


class ParticleType(Enum):
    """Purpose of an ALN particle."""

    PROPOSAL = "Proposal"
    STATUS_EXPORT = "StatusExport"
    GUARD_DECISION = "GuardDecision"
    AUDIT_ANCHOR = "AuditAnchor"


@dataclass
class EvidenceHeader:
    """Evidence bundle tags and biophysical snapshots attached to a particle."""

    bundle_tags: list[str] = field(default_factory=list)
    roh_snapshot: float = 0.0
    rod_snapshot: float = 0.0
    lifeforce_band: str = "Baseline"
    timestamp: int = 0
    evolve_token_hash: str | None = None

    def validate_completeness(self) -> None:
        """Raise IncompleteEvidenceBundle unless all ten tags are present."""
        if len(self.bundle_tags) < REQUIRED_EVIDENCE_TAGS:
            raise IncompleteEvidenceBundle(len(self.bundle_tags), REQUIRED_EVIDENCE_TAGS)

    def add_anchor(self, anchor: str) -> None:
        if anchor not in self.bundle_tags:
            self.bundle_tags.append(anchor)


@dataclass
class ALNParticle:
    """A message of the sovereign stack."""

    particle_type: ParticleType
    sender_did: str
    receiver_did: str
    payload_hash: str = ""
    evidence_header: EvidenceHeader = field(default_factory=EvidenceHeader)
    signature: str = ""
    corridor_safe: bool = False

    @classmethod
    def new_proposal(cls, sender_did: str, receiver_did: str) -> ALNParticle:
        """Create an unsigned proposal particle."""
        return cls(ParticleType.PROPOSAL, sender_did, receiver_did)

    def mark_corridor_safe(self, roh: float, rod: float, lifeforce: str) -> None:
        """Record the snapshots and mark safe; out-of-corridor values raise."""
        if roh > _ROH_MAX or rod >= _ROD_HARDSTOP or lifeforce == _HARD_STOP_BAND:
            raise CorridorViolation(roh, rod, lifeforce)
        self.evidence_header.roh_snapshot = roh
        self.evidence_header.rod_snapshot = rod
        self.evidence_header.lifeforce_band = lifeforce
        self.corridor_safe = True

    def sign(self, private_key: str) -> None:
        """Sign the particle; an empty key raises SigningFailed."""
        if not private_key:
            raise SigningFailed()
        self.signature = _PARTICLE_SIGNATURE

    def verify_signature(self, public_key: str) -> bool:
        """Whether the particle carries a signature."""
        return bool(self.signature)