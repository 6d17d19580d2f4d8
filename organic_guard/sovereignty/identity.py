"""Sovereign identity: a DID bound to an OrganicCPU instance."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from organic_guard.sovereignty.sovereignty_errors import (
    IdentityNotBound,
    IdentityNotVerified,
    InvalidBootHash,
    InvalidDIDFormat,
    MissingPublicKey,
)

DID_PREFIX = "did:bostrom:"


def _check_prefix(did: str) -> None:
    if not did.startswith(DID_PREFIX):
        raise InvalidDIDFormat(did, DID_PREFIX)


@dataclass
class DIDBinding:
    """A DID together with the public key it is bound to."""

    did: str
    public_key: str
    key_type: str = "Ed25519"
    created_at: int = 0

    def validate_format(self) -> None:
        """Raise if the DID prefix is wrong or the public key is missing."""
        _check_prefix(self.did)
        if not self.public_key:
            raise MissingPublicKey()

    def to_hex_anchor(self) -> str:
        return f"0xdid{len(self.did.encode()) & 0xFFFFFFFF:08x}"


class IdentityState(Enum):
    """Lifecycle of a sovereign identity."""

    UNBOUND = "Unbound"
    BOUND = "Bound"
    VERIFIED = "Verified"
    COMPROMISED = "Compromised"


class SovereignIdentity:
    """A DID tied to an OrganicCPU instance, with its evolution history."""

    def __init__(self, did: str, organic_cpu_id: str) -> None:
        _check_prefix(did)
        self.binding = DIDBinding(did, "")
        self.organic_cpu_id = organic_cpu_id
        self.state = IdentityState.UNBOUND
        self.evolution_history: list[str] = []
        self.last_verification = 0

    def __repr__(self) -> str:
        return (
            f"SovereignIdentity(did={self.binding.did!r}, "
            f"organic_cpu_id={self.organic_cpu_id!r}, state={self.state})"
        )

    def bind_to_did(self, public_key: str) -> None:
        """Attach a public key and move to the Bound state."""
        self.binding.public_key = public_key
        self.binding.validate_format()
        self.state = IdentityState.BOUND

    def verify(self, boot_hash: str) -> None:
        """Verify a bound identity against a boot hash."""
        if self.state is not IdentityState.BOUND:
            raise IdentityNotBound()
        if not boot_hash:
            raise InvalidBootHash()
        self.state = IdentityState.VERIFIED
        self.last_verification = 0

    def record_evolution(self, upgrade_hash: str) -> None:
        """Append an upgrade to the history; only verified identities may evolve."""
        if self.state is not IdentityState.VERIFIED:
            raise IdentityNotVerified()
        self.evolution_history.append(upgrade_hash)

    def is_sovereign(self) -> bool:
        return self.state is IdentityState.VERIFIED

    def evolution_count(self) -> int:
        return len(self.evolution_history)

    def to_hex_anchor(self) -> str:
        return f"0xsov{len(self.evolution_history) & 0xFFFFFFFF:08x}"