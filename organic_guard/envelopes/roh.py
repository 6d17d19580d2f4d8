"""Risk of Harm: a weighted, instantaneous harm score capped at 0.3."""

from dataclasses import dataclass

from organic_guard.envelopes.envelope_errors import RoHThresholdExceeded

_ROH_MAX = 0.3


@dataclass
class RoHComponent:
    """One weighted input to the RoH score."""

    name: str
    value: float
    weight: float
    threshold: float

    def normalized_contribution(self) -> float:
        return min(self.value / self.threshold, 1.0) * self.weight


class RoHCalculator:
    """Accumulates weighted components and derives the RoH score."""

    def __init__(self) -> None:
        self._components: list[RoHComponent] = []
        self._lyapunov_residual = 0.0
        self._timestamp = 0

    def _add(self, name: str, value: float, weight: float, threshold: float) -> "RoHCalculator":
        self._components.append(RoHComponent(name, value, weight, threshold))
        return self

    def add_eeg_load(self, load: float) -> "RoHCalculator":
        return self._add("eeg_load", load, 0.25, 0.8)

    def add_hrv_score(self, hrv: float) -> "RoHCalculator":
        return self._add("hrv_score", 1.0 - hrv, 0.20, 0.5)

    def add_thermal_delta(self, delta: float) -> "RoHCalculator":
        return self._add("thermal_delta", delta, 0.20, 0.5)

    def add_duty_cycle(self, duty: float) -> "RoHCalculator":
        return self._add("duty_cycle", duty, 0.15, 0.4)

    def add_cytokine_load(self, il6: float, crp: float) -> "RoHCalculator":
        cytokine_score = (il6 / 10.0 + crp / 5.0) / 2.0
        return self._add("cytokine_load", cytokine_score, 0.20, 1.0)

    def calculate_lyapunov_residual(self, previous_roh: float) -> float:
        """Return the non-negative increase of RoH over a previous value."""
        self._lyapunov_residual = max(self.calculate_raw() - previous_roh, 0.0)
        return self._lyapunov_residual

    def calculate_raw(self) -> float:
        if not self._components:
            return 0.0
        weighted_sum = sum(c.normalized_contribution() for c in self._components)
        total_weight = sum(c.weight for c in self._components)
        if total_weight == 0.0:
            return 0.0
        return weighted_sum / total_weight

    def build(self) -> float:
        """Return the RoH score, raising if it exceeds the ceiling."""
        raw_roh = self.calculate_raw()
        if raw_roh > _ROH_MAX:
            raise RoHThresholdExceeded(raw_roh)
        return raw_roh

    def component_breakdown(self) -> tuple[RoHComponent, ...]:
        return tuple(self._components)