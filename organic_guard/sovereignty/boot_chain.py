"""DID-bound secure boot verification."""

from __future__ import annotations

from dataclasses import dataclass, field

from organic_guard.sovereignty.identity import SovereignIdentity
from organic_guard.sovereignty.sovereignty_errors import (
    BootChainViolation,
    DIDMismatch,
    IdentityNotVerified,
    NoCurrentBootHash,
    SigningFailed,
    UntrustedBootHash,
)

_BOOT_SIGNATURE = "boot_signature_placeholder"


@dataclass
class BootHash:
    """A boot image hash and the DID that signed it."""

    hash: str
    signer_did: str
    signature: str = ""
    timestamp: int = 0

    def sign(self, private_key: str) -> None:
        """Sign the hash; an empty key raises SigningFailed."""
        if not private_key:
            raise SigningFailed()
        self.signature = _BOOT_SIGNATURE

    def verify(self, public_key: str) -> bool:
        """Whether the hash carries a signature."""
        return bool(self.signature)


@dataclass
class SecureBootVerifier:
    """Trusted boot hashes and the hash of the running system."""

    trusted_hashes: list[BootHash] = field(default_factory=list)
    current_boot_hash: BootHash | None = None

    def add_trusted_hash(self, hash: BootHash) -> None:
        """Trust a signed boot hash; unsigned ones raise UntrustedBootHash."""
        if not hash.signature:
            raise UntrustedBootHash()
        self.trusted_hashes.append(hash)

    def verify_current_boot(self, identity: SovereignIdentity) -> bool:
        """Check the running boot hash is trusted and signed by the identity's DID."""
        current = self.current_boot_hash
        if current is None:
            raise NoCurrentBootHash()
        if not any(trusted.hash == current.hash for trusted in self.trusted_hashes):
            raise BootChainViolation()
        if current.signer_did != identity.binding.did:
            raise DIDMismatch(identity.binding.did, current.signer_did)
        return True

    def set_current_boot(self, hash: BootHash) -> None:
        self.current_boot_hash = hash


@dataclass
class BootChain:
    """A chain of boot hashes from genesis to the current one."""

    genesis_hash: BootHash
    current_hash: BootHash
    chain_length: int

    def to_hex_anchor(self) -> str:
        return f"0xboot{self.chain_length & 0xFFFFFFFF:08x}"


def verify_boot_chain(identity: SovereignIdentity) -> bool:
    """Accept the boot chain only for a verified identity."""
    if not identity.is_sovereign():
        raise IdentityNotVerified()
    return True