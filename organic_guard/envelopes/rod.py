"""Risk of Danger: cumulative pain debt and neurorights budget consumption."""

from dataclasses import dataclass, field

from organic_guard.envelopes.envelope_errors import NeurorightsViolation, RodHardStop

_ROD_HARDSTOP = 1.0

_RIGHT_FIELDS = {
    "cognitive_liberty": "cognitive_liberty_remaining",
    "mental_privacy": "mental_privacy_remaining",
    "augmentation_continuity": "augmentation_continuity_remaining",
    "project_continuity": "project_continuity_remaining",
}


@dataclass
class PainDebt:
    """Accumulated pain signal that decays over time."""

    current: float = 0.0
    decay_rate: float = 0.1
    threshold: float = 0.5

    def add(self, pain_signal: float) -> None:
        self.current = min(self.current + pain_signal, 1.0)

    def decay(self, time_delta: float) -> None:
        self.current = max(self.current - self.decay_rate * time_delta, 0.0)

    def contribution_to_rod(self) -> float:
        return self.current / self.threshold


@dataclass
class NeurorightsBudget:
    """Remaining budget for each protected neuroright."""

    cognitive_liberty_remaining: float = 1.0
    mental_privacy_remaining: float = 1.0
    augmentation_continuity_remaining: float = 1.0
    project_continuity_remaining: float = 1.0

    def consume(self, right: str, amount: float) -> None:
        """Spend budget on a right; unknown rights raise NeurorightsViolation."""
        attribute = _RIGHT_FIELDS.get(right)
        if attribute is None:
            raise NeurorightsViolation(right, "Unknown right")
        setattr(self, attribute, max(getattr(self, attribute) - amount, 0.0))

    def average_remaining(self) -> float:
        return (
            self.cognitive_liberty_remaining
            + self.mental_privacy_remaining
            + self.augmentation_continuity_remaining
            + self.project_continuity_remaining
        ) / 4.0

    def contribution_to_rod(self) -> float:
        return 1.0 - self.average_remaining()


@dataclass
class RoDCalculator:
    """Cumulative ROD tracker that never falls below its recorded maximum."""

    pain_debt: PainDebt = field(default_factory=PainDebt)
    neurorights_budget: NeurorightsBudget = field(default_factory=NeurorightsBudget)
    historical_max: float = 0.0
    timestamp: int = 0

    def add_pain_signal(self, pain: float) -> "RoDCalculator":
        self.pain_debt.add(pain)
        return self

    def consume_neuroright(self, right: str, amount: float) -> "RoDCalculator":
        self.neurorights_budget.consume(right, amount)
        return self

    def calculate_rod(self) -> float:
        pain_contribution = self.pain_debt.contribution_to_rod() * 0.5
        rights_contribution = self.neurorights_budget.contribution_to_rod() * 0.5
        raw_rod = min(pain_contribution + rights_contribution, 1.0)
        return max(raw_rod, self.historical_max)

    def check_hardstop(self) -> bool:
        return self.calculate_rod() >= _ROD_HARDSTOP

    def build(self) -> float:
        """Return the ROD value, raising RodHardStop at 1.0."""
        rod = self.calculate_rod()
        if rod >= _ROD_HARDSTOP:
            raise RodHardStop(rod)
        return rod

    def update_historical_max(self) -> None:
        self.historical_max = max(self.historical_max, self.calculate_rod())