"""Errors raised by DID sovereignty operations."""


class SovereigntyError(Exception):
    """Base class for every sovereignty failure."""


class InvalidDIDFormat(SovereigntyError):
    """A DID does not carry the expected method prefix."""

    def __init__(self, did: str, expected_prefix: str) -> None:
        self.did = did
        self.expected_prefix = expected_prefix
        super().__init__(
            f"Invalid DID format: {did} (expected prefix: {expected_prefix})"
        )


class MissingPublicKey(SovereigntyError):
    """A DID binding has no public key."""

    def __init__(self) -> None:
        super().__init__("Missing public key")


class IdentityNotBound(SovereigntyError):
    """The identity has not been bound to its DID."""

    def __init__(self) -> None:
        super().__init__("Identity not bound to DID")


class IdentityNotVerified(SovereigntyError):
    """The identity has not been verified against a boot chain."""

    def __init__(self) -> None:
        super().__init__("Identity not verified")


class InvalidBootHash(SovereigntyError):
    """A boot hash was empty or malformed."""

    def __init__(self) -> None:
        super().__init__("Invalid boot hash")


class UntrustedBootHash(SovereigntyError):
    """A boot hash without a signature cannot be trusted."""

    def __init__(self) -> None:
        super().__init__("Untrusted boot hash")


class BootChainViolation(SovereigntyError):
    """The running boot hash is not in the trusted set."""

    def __init__(self) -> None:
        super().__init__("Boot chain violation detected")


class NoCurrentBootHash(SovereigntyError):
    """No boot hash has been recorded for the running system."""

    def __init__(self) -> None:
        super().__init__("No current boot hash")


class DIDMismatch(SovereigntyError):
    """A signer DID differs from the bound identity."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"DID mismatch: expected {expected}, got {actual}")


class SigningFailed(SovereigntyError):
    """Signing could not be performed."""

    def __init__(self) -> None:
        super().__init__("Signing failed")


class TokenAlreadyConsumed(SovereigntyError):
    """The EVOLVE token has already been used."""

    def __init__(self) -> None:
        super().__init__("EVOLVE token already consumed")


class TokenExpired(SovereigntyError):
    """The EVOLVE token has expired."""

    def __init__(self) -> None:
        super().__init__("EVOLVE token expired")


class TokenRevoked(SovereigntyError):
    """The EVOLVE token was revoked."""

    def __init__(self) -> None:
        super().__init__("EVOLVE token revoked")


class TokenNotActive(SovereigntyError):
    """The EVOLVE token is not active."""

    def __init__(self) -> None:
        super().__init__("EVOLVE token not active")


class TokenUpgradeMismatch(SovereigntyError):
    """The EVOLVE token names a different upgrade hash."""

    def __init__(self) -> None:
        super().__init__("EVOLVE token upgrade hash mismatch")


class TokenNotFound(SovereigntyError):
    """No such EVOLVE token exists."""

    def __init__(self) -> None:
        super().__init__("EVOLVE token not found")


class IncompleteEvidenceBundle(SovereigntyError):
    """The evidence bundle has fewer tags than required."""

    def __init__(self, current: int, required: int) -> None:
        self.current = current
        self.required = required
        super().__init__(f"Evidence bundle incomplete: {current} / {required}")


class UpgradeRejected(SovereigntyError):
    """An upgrade proposal was rejected."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Upgrade proposal rejected: {reason}")