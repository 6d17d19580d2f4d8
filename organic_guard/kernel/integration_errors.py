"""Errors raised by the kernel integration layer."""


class IntegrationError(Exception):
    """Base class for every kernel integration failure."""


class GuardServiceNotActive(IntegrationError):
    """The guard service is not running."""

    def __init__(self) -> None:
        super().__init__("Guard service not active")


class InvalidModuleSignature(IntegrationError):
    """A kernel module signature is missing or invalid."""

    def __init__(self) -> None:
        super().__init__("Invalid kernel module signature")


class InvalidModuleHash(IntegrationError):
    """A kernel module hash is missing or invalid."""

    def __init__(self) -> None:
        super().__init__("Invalid kernel module hash")


class InnerDomainAccessDenied(IntegrationError):
    """An inner-domain path is not on the allowed list."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Inner domain access denied: {path}")


class InnerDomainMmapBlocked(IntegrationError):
    """Mapping inner-domain memory is forbidden."""

    def __init__(self) -> None:
        super().__init__("Inner domain mmap blocked")


class RawSocketBlocked(IntegrationError):
    """Raw sockets are forbidden."""

    def __init__(self) -> None:
        super().__init__("Raw socket blocked for security")


class DeviceAlreadyRegistered(IntegrationError):
    """A device path is already registered."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Device already registered: {path}")


class InvalidAuditEntry(IntegrationError):
    """An audit entry lacks required content."""

    def __init__(self) -> None:
        super().__init__("Invalid audit entry")


class AuditLogWriteFailed(IntegrationError):
    """Writing the audit log failed."""

    def __init__(self) -> None:
        super().__init__("Audit log write failed")


class ChainAnchorFailed(IntegrationError):
    """Anchoring to the chain failed."""

    def __init__(self) -> None:
        super().__init__("Chain anchor failed")


class DIDBindingMissing(IntegrationError):
    """No DID binding is present."""

    def __init__(self) -> None:
        super().__init__("DID binding missing")


class BootChainVerificationFailed(IntegrationError):
    """The boot chain did not verify."""

    def __init__(self) -> None:
        super().__init__("Boot chain verification failed")


class EvolveTokenValidationFailed(IntegrationError):
    """The EVOLVE token did not validate."""

    def __init__(self) -> None:
        super().__init__("EVOLVE token validation failed")


class SyscallWrapperInitFailed(IntegrationError):
    """The syscall wrapper could not start."""

    def __init__(self) -> None:
        super().__init__("Syscall wrapper initialization failed")