"""Errors raised by biophysical envelope calculations."""


class EnvelopeError(Exception):
    """Base class for every biophysical envelope failure."""


class RoHThresholdExceeded(EnvelopeError):
    """Risk of Harm went above the 0.3 ceiling."""

    def __init__(self, current: float) -> None:
        self.current = current
        super().__init__(f"RoH threshold exceeded: {current} > 0.3")


class RodHardStop(EnvelopeError):
    """Risk of Danger reached the HardStop threshold."""

    def __init__(self, current: float) -> None:
        self.current = current
        super().__init__(f"ROD HardStop triggered: {current}")


class LifeforceHardStop(EnvelopeError):
    """The lifeforce band entered HardStop."""

    def __init__(self, band: str) -> None:
        self.band = band
        super().__init__(f"LifeforceBand HardStop: {band}")


class EcoMonotonicityViolation(EnvelopeError):
    """Environmental impact grew compared with the previous score."""

    def __init__(self, delta: float) -> None:
        self.delta = delta
        super().__init__(f"Eco-monotonicity violation: delta = {delta}")


class NeurorightsViolation(EnvelopeError):
    """A neurorights clause was breached or is unknown."""

    def __init__(self, clause: str, details: str) -> None:
        self.clause = clause
        self.details = details
        super().__init__(f"Neurorights violation [{clause}]: {details}")


class InvalidTelemetry(EnvelopeError):
    """Telemetry from a source could not be used."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"Invalid telemetry data from: {source}")


class CalibrationRequired(EnvelopeError):
    """A metric must be calibrated before use."""

    def __init__(self, metric: str) -> None:
        self.metric = metric
        super().__init__(f"Calibration required for: {metric}")


class TimestampOutOfOrder(EnvelopeError):
    """A sample arrived with an unexpected timestamp."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Timestamp out of order: expected {expected}, got {actual}")