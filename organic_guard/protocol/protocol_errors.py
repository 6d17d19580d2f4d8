"""Errors raised by the ALN networking stack."""


class ProtocolError(Exception):
    """Base class for every protocol failure."""


class CorridorViolation(ProtocolError):
    """RoH, ROD or lifeforce band fell outside the safe corridor."""

    def __init__(self, roh: float, rod: float, lifeforce: str) -> None:
        self.roh = roh
        self.rod = rod
        self.lifeforce = lifeforce
        super().__init__(
            f"Corridor violation: RoH={roh}, ROD={rod}, Lifeforce={lifeforce}"
        )


class IncompleteEvidenceBundle(ProtocolError):
    """The evidence bundle has fewer tags than required."""

    def __init__(self, current: int, required: int) -> None:
        self.current = current
        self.required = required
        super().__init__(f"Evidence bundle incomplete: {current} / {required}")


class LegacyTranslationBlocked(ProtocolError):
    """A particle may not be handed to a legacy protocol."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Legacy translation blocked: {reason}")


class LegacyMtuExceeded(ProtocolError):
    """A particle is too large for the legacy protocol's MTU."""

    def __init__(self) -> None:
        super().__init__("Legacy protocol MTU exceeded")


class SignatureVerificationFailed(ProtocolError):
    """A DID signature did not verify."""

    def __init__(self) -> None:
        super().__init__("DID signature verification failed")


class SigningFailed(ProtocolError):
    """Signing could not be done because the key is missing."""

    def __init__(self) -> None:
        super().__init__("Signing failed (missing key)")


class ChannelAccessDenied(ProtocolError):
    """A channel was used across the inner/outer domain boundary."""

    def __init__(self, channel_type: str, requested_domain: str) -> None:
        self.channel_type = channel_type
        self.requested_domain = requested_domain
        super().__init__(
            f"Channel access denied: {channel_type} requested {requested_domain}"
        )


class RoutingRejected(ProtocolError):
    """The router refused the particle."""

    def __init__(self, verdict: str) -> None:
        self.verdict = verdict
        super().__init__(f"Routing rejected: {verdict}")


class TimestampOutOfOrder(ProtocolError):
    """A packet arrived with an out-of-order timestamp."""

    def __init__(self) -> None:
        super().__init__("Packet timestamp out of order")