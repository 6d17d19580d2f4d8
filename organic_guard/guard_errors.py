"""Errors raised by guard operations."""


class GuardError(Exception):
    """Base class for every guard failure."""


class RohThresholdExceeded(GuardError):
    """RoH went above its allowed maximum."""

    def __init__(self, current: float, max: float) -> None:
        self.current = current
        self.max = max
        super().__init__(f"RoH threshold exceeded: {current} > {max}")


class RodHardStop(GuardError):
    """ROD reached the HardStop threshold."""

    def __init__(self, current: float) -> None:
        self.current = current
        super().__init__(f"ROD HardStop triggered: {current}")


class LifeforceViolation(GuardError):
    """The lifeforce band does not permit the operation."""

    def __init__(self, band: str, reason: str) -> None:
        self.band = band
        self.reason = reason
        super().__init__(f"LifeforceBand violation [{band}]: {reason}")


class NeurorightsViolation(GuardError):
    """A neurorights invariant was violated."""

    def __init__(self, clause: str, details: str) -> None:
        self.clause = clause
        self.details = details
        super().__init__(f"Neurorights violation [{clause}]: {details}")


class IncompleteEvidenceBundle(GuardError):
    """The evidence bundle lacks its ten required tags."""

    def __init__(self) -> None:
        super().__init__("Evidence bundle incomplete (requires 10 tags)")


class MissingDID(GuardError):
    """No DID is bound."""

    def __init__(self) -> None:
        super().__init__("Missing DID binding")


class InvalidCpuInstance(GuardError):
    """The OrganicCPU instance is invalid."""

    def __init__(self) -> None:
        super().__init__("Invalid OrganicCPU instance")


class InvalidBootChain(GuardError):
    """Boot chain validation failed."""

    def __init__(self) -> None:
        super().__init__("Boot chain validation failed")


class DeviceAccessDenied(GuardError):
    """Access to a protected device was refused."""

    def __init__(self, device_id: str, domain: str) -> None:
        self.device_id = device_id
        self.domain = domain
        super().__init__(f"Device access denied: {device_id} [{domain}]")


class NetworkExportBlocked(GuardError):
    """Raw neural data was not allowed onto the network."""

    def __init__(self, data_type: str) -> None:
        self.data_type = data_type
        super().__init__(f"Network export blocked for raw neural data: {data_type}")


class EvolveTokenInvalid(GuardError):
    """The EVOLVE token did not validate."""

    def __init__(self) -> None:
        super().__init__("EVOLVE token validation failed")


class UpgradeRejected(GuardError):
    """An upgrade proposal was rejected."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Upgrade proposal rejected: {reason}")


class AttestationFailed(GuardError):
    """Cryptographic attestation failed."""

    def __init__(self, signature: str) -> None:
        self.signature = signature
        super().__init__(f"Cryptographic attestation failed: {signature}")


class EcoMonotonicityViolation(GuardError):
    """Environmental impact grew."""

    def __init__(self, delta: float) -> None:
        self.delta = delta
        super().__init__(f"Eco-monotonicity violation: delta = {delta}")