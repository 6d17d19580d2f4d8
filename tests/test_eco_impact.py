import pytest

from organic_guard.envelopes.eco_impact import CEIM, EcoImpactScore, NanoKarma
from organic_guard.envelopes.envelope_errors import (
    EcoMonotonicityViolation,
    EnvelopeError,
)


def test_eco_monotonicity_preserved():
    eco = EcoImpactScore(CEIM(0.2, 0.1, 0.15), NanoKarma(100, 0.01, 0.9), 0.2)
    assert eco.verify_monotonicity() is True
    assert eco.delta() <= 0.0


def test_eco_monotonicity_violated():
    eco = EcoImpactScore(CEIM(0.5, 0.4, 0.45), NanoKarma(500, 0.05, 0.3), 0.1)
    with pytest.raises(EcoMonotonicityViolation) as info:
        eco.verify_monotonicity()
    assert eco.delta() > 0.0
    assert info.value.delta == eco.delta()


def test_eco_monotonicity_enforcement():
    ceim = CEIM(0.2, 0.15, 0.18)
    nanokarma = NanoKarma(100, 0.02, 0.9)

    eco = EcoImpactScore(ceim, nanokarma, 0.25)
    assert eco.verify_monotonicity() is True
    assert eco.delta() <= 0.0

    eco_violation = EcoImpactScore(ceim, nanokarma, 0.05)
    with pytest.raises(EnvelopeError):
        eco_violation.verify_monotonicity()
    assert eco_violation.delta() > 0.0


def test_equal_scores_are_monotone():
    eco = EcoImpactScore(CEIM(0.0, 0.0, 0.0), NanoKarma(0, 0.0, 0.0), 0.0)
    assert eco.verify_monotonicity() is True
    assert eco.delta() == 0.0


def test_current_score_combines_ceim_and_nanokarma():
    ceim = CEIM(0.2, 0.1, 0.15)
    nanokarma = NanoKarma(100, 0.01, 0.9)
    eco = EcoImpactScore(ceim, nanokarma, 0.2)
    assert eco.current_score == pytest.approx(
        (ceim.aggregate_score() + nanokarma.impact_score()) / 2.0
    )


def test_fully_biodegradable_swarm_has_no_impact():
    assert NanoKarma(1000, 5.0, 1.0).impact_score() == 0.0


def test_ceim_aggregate_of_equal_parts():
    assert CEIM(1.0, 1.0, 1.0).aggregate_score() == 1.0


def test_hex_anchor():
    eco = EcoImpactScore(CEIM(1.0, 1.0, 1.0), NanoKarma(0, 0.0, 0.0), 1.0)
    assert eco.to_hex_anchor() == "0xeco000001f4"


def test_hex_anchor_saturates_negative_to_zero():
    eco = EcoImpactScore(CEIM(-1.0, -1.0, -1.0), NanoKarma(0, 0.0, 0.0), 0.0)
    assert eco.to_hex_anchor() == "0xeco00000000"