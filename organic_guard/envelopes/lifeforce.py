"""LifeforceBand: the health envelope that gates XR, nanoswarm and BCI loads."""

from dataclasses import dataclass, field
from enum import Enum


class LifeforceBand(Enum):
    """Health band, from normal operation to a full stop."""

    BASELINE = "Baseline"
    SOFT_WARN = "SoftWarn"
    HARD_STOP = "HardStop"

    @classmethod
    def from_roh_rod(cls, roh: float, rod: float) -> "LifeforceBand":
        if roh > 0.25 or rod > 0.7:
            return cls.HARD_STOP
        if roh > 0.15 or rod > 0.4:
            return cls.SOFT_WARN
        return cls.BASELINE

    def allows_operation(self, operation_priority: int) -> bool:
        """Whether an operation of the given priority (higher is more urgent) may run."""
        if self is LifeforceBand.BASELINE:
            return True
        if self is LifeforceBand.SOFT_WARN:
            return operation_priority >= 5
        return operation_priority >= 10


@dataclass
class CytokineThresholds:
    """Inflammatory marker levels."""

    il6: float
    crp: float
    tnf_alpha: float

    def is_elevated(self) -> bool:
        return self.il6 > 10.0 or self.crp > 5.0 or self.tnf_alpha > 20.0

    def contribution_to_lifeforce(self) -> float:
        il6_score = min(self.il6 / 10.0, 1.0)
        crp_score = min(self.crp / 5.0, 1.0)
        tnf_score = min(self.tnf_alpha / 20.0, 1.0)
        return (il6_score + crp_score + tnf_score) / 3.0


_ANCHORS = {
    LifeforceBand.BASELINE: "0xlfb_baseline",
    LifeforceBand.SOFT_WARN: "0xlfb_warn",
    LifeforceBand.HARD_STOP: "0xlfb_stop",
}


@dataclass
class LifeforceEnvelope:
    """Lifeforce band derived from cytokines, HRV and subjective report."""

    cytokines: CytokineThresholds
    hrv_score: float
    thermal_baseline: float
    subjective_report: float
    band: LifeforceBand = field(init=False)

    def __post_init__(self) -> None:
        cytokine_load = self.cytokines.contribution_to_lifeforce()
        combined_load = (
            cytokine_load + (1.0 - self.hrv_score) + (1.0 - self.subjective_report)
        ) / 3.0
        if combined_load > 0.7:
            self.band = LifeforceBand.HARD_STOP
        elif combined_load > 0.4:
            self.band = LifeforceBand.SOFT_WARN
        else:
            self.band = LifeforceBand.BASELINE

    def is_safe(self) -> bool:
        return self.band is not LifeforceBand.HARD_STOP

    def is_warning(self) -> bool:
        return self.band is LifeforceBand.SOFT_WARN

    def to_hex_anchor(self) -> str:
        return _ANCHORS[self.band]