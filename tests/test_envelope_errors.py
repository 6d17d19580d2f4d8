import pytest

from organic_guard.envelopes.envelope_errors import (
    CalibrationRequired,
    EcoMonotonicityViolation,
    EnvelopeError,
    InvalidTelemetry,
    LifeforceHardStop,
    NeurorightsViolation,
    RodHardStop,
    RoHThresholdExceeded,
    TimestampOutOfOrder,
)


def test_roh_threshold_message_and_field():
    err = RoHThresholdExceeded(0.5)
    assert err.current == 0.5
    assert str(err).startswith("RoH threshold exceeded: 0.5")
    assert str(err).endswith("> 0.3")


def test_rod_hardstop_message():
    err = RodHardStop(1.0)
    assert err.current == 1.0
    assert str(err).startswith("ROD HardStop triggered: ")
    assert "1.0" in str(err)


def test_lifeforce_hardstop_message():
    err = LifeforceHardStop("HardStop")
    assert err.band == "HardStop"
    assert str(err).startswith("LifeforceBand HardStop: ")
    assert str(err).endswith("HardStop")


def test_eco_violation_message():
    err = EcoMonotonicityViolation(0.25)
    assert err.delta == 0.25
    assert str(err).startswith("Eco-monotonicity violation: delta = ")
    assert "0.25" in str(err)


def test_neurorights_violation_fields():
    err = NeurorightsViolation("mind_reading", "Unknown right")
    assert err.clause == "mind_reading"
    assert err.details == "Unknown right"
    assert "[mind_reading]" in str(err)
    assert str(err).endswith("Unknown right")


def test_invalid_telemetry_and_calibration():
    assert str(InvalidTelemetry("eeg")).endswith("eeg")
    assert InvalidTelemetry("eeg").source == "eeg"
    assert str(CalibrationRequired("hrv")).startswith("Calibration required for: ")
    assert CalibrationRequired("hrv").metric == "hrv"


def test_timestamp_out_of_order_fields():
    err = TimestampOutOfOrder(10, 7)
    assert (err.expected, err.actual) == (10, 7)
    assert "expected 10" in str(err)
    assert "got 7" in str(err)


@pytest.mark.parametrize(
    "error_class, args, prefix",
    [
        (RoHThresholdExceeded, (0.4,), "RoH threshold exceeded: "),
        (RodHardStop, (1.0,), "ROD HardStop triggered: "),
        (LifeforceHardStop, ("HardStop",), "LifeforceBand HardStop: HardStop"),
        (EcoMonotonicityViolation, (0.1,), "Eco-monotonicity violation: delta = "),
        (NeurorightsViolation, ("a", "b"), "Neurorights violation [a]: b"),
        (InvalidTelemetry, ("x",), "Invalid telemetry data from: x"),
        (CalibrationRequired, ("y",), "Calibration required for: y"),
        (TimestampOutOfOrder, (1, 2), "Timestamp out of order: expected 1, got 2"),
    ],
)
def test_all_errors_are_envelope_errors(error_class, args, prefix):
    err = error_class(*args)
    assert isinstance(err, EnvelopeError)
    assert str(err).startswith(prefix)