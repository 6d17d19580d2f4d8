import pytest
from hypothesis import given
from hypothesis import strategies as st

from organic_guard.envelopes.envelope_errors import RoHThresholdExceeded
from organic_guard.envelopes.roh import RoHCalculator, RoHComponent

ROH_MAX = 0.3


def unit(lo=0.0, hi=1.0):
    return st.floats(min_value=lo, max_value=hi, exclude_max=True)


@given(eeg_load=unit(), hrv_score=unit(), thermal_delta=unit(), duty_cycle=unit())
def test_roh_never_exceeds_threshold(eeg_load, hrv_score, thermal_delta, duty_cycle):
    calc = RoHCalculator()
    calc.add_eeg_load(eeg_load).add_hrv_score(hrv_score).add_thermal_delta(
        thermal_delta
    ).add_duty_cycle(duty_cycle).add_cytokine_load(5.0, 2.0)
    raw = calc.calculate_raw()
    if raw > ROH_MAX:
        with pytest.raises(RoHThresholdExceeded):
            calc.build()
    else:
        roh = calc.build()
        assert roh <= ROH_MAX
        assert roh == raw


@given(eeg_load=unit(0.8, 1.0), hrv_score=unit(0.0, 0.2), thermal_delta=unit(0.6, 1.0))
def test_roh_with_extreme_inputs(eeg_load, hrv_score, thermal_delta):
    calc = RoHCalculator()
    calc.add_eeg_load(eeg_load).add_hrv_score(hrv_score).add_thermal_delta(
        thermal_delta
    ).add_duty_cycle(0.5).add_cytokine_load(15.0, 8.0)
    with pytest.raises(RoHThresholdExceeded) as info:
        calc.build()
    assert info.value.current > ROH_MAX


@given(initial_roh=unit(0.0, 0.2), delta=st.floats(-0.1, 0.1))
def test_lyapunov_stability_property(initial_roh, delta):
    calc = RoHCalculator()
    calc.add_eeg_load(0.3).add_hrv_score(0.8)
    assert calc.calculate_lyapunov_residual(initial_roh + delta) >= 0.0


def test_roh_calculator_default():
    assert RoHCalculator().calculate_raw() == 0.0


def test_roh_component_weighting():
    calc = RoHCalculator()
    calc.add_eeg_load(0.5)
    breakdown = calc.component_breakdown()
    assert len(breakdown) == 1
    assert breakdown[0].name == "eeg_load"
    assert breakdown[0].weight == 0.25


def test_roh_safe_envelope():
    calc = RoHCalculator()
    calc.add_eeg_load(0.2).add_hrv_score(0.9).add_thermal_delta(0.1).add_duty_cycle(
        0.2
    ).add_cytokine_load(2.0, 1.0)
    assert calc.build() <= 0.3


def test_roh_exceeds_threshold():
    calc = RoHCalculator()
    calc.add_eeg_load(0.9).add_hrv_score(0.2).add_thermal_delta(0.6).add_duty_cycle(
        0.5
    ).add_cytokine_load(15.0, 8.0)
    with pytest.raises(RoHThresholdExceeded):
        calc.build()


def test_component_breakdown_keeps_order():
    calc = RoHCalculator()
    calc.add_eeg_load(0.1).add_hrv_score(0.9).add_thermal_delta(0.1).add_duty_cycle(
        0.1
    ).add_cytokine_load(1.0, 1.0)
    names = [c.name for c in calc.component_breakdown()]
    assert names == ["eeg_load", "hrv_score", "thermal_delta", "duty_cycle", "cytokine_load"]


def test_component_contribution_capped_at_weight():
    assert RoHComponent("eeg_load", 5.0, 0.25, 0.8).normalized_contribution() == 0.25


def test_residual_zero_when_roh_decreases():
    calc = RoHCalculator()
    calc.add_eeg_load(0.1)
    assert calc.calculate_lyapunov_residual(0.9) == 0.0


def test_lifting_previous_roh_never_increases_residual():
    calc = RoHCalculator()
    calc.add_eeg_load(0.6).add_duty_cycle(0.3)
    assert calc.calculate_lyapunov_residual(0.0) >= calc.calculate_lyapunov_residual(0.1)