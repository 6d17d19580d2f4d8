"""EcoImpactScore: environmental impact with a non-regression check."""

import math
from dataclasses import dataclass, field

from organic_guard.envelopes.envelope_errors import EcoMonotonicityViolation

_U32_MAX = 0xFFFFFFFF


def _as_u32(value: float) -> int:
    """Truncate to an unsigned 32-bit integer, saturating at the bounds."""
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return int(value)


@dataclass
class CEIM:
    """Cybernetic efficacy index metric."""

    energy_consumption: float
    carbon_footprint: float
    resource_utilization: float

    def aggregate_score(self) -> float:
        return (
            self.energy_consumption + self.carbon_footprint + self.resource_utilization
        ) / 3.0


@dataclass
class NanoKarma:
    """Environmental impact of a nanoswarm."""

    swarm_size: int
    energy_per_unit: float
    biodegradability_score: float

    def impact_score(self) -> float:
        raw_impact = (self.swarm_size * self.energy_per_unit) / 1000.0
        return raw_impact * (1.0 - self.biodegradability_score)


@dataclass
class EcoImpactScore:
    """Current impact score compared against the previous one."""

    ceim: CEIM
    nanokarma: NanoKarma
    previous_score: float
    current_score: float = field(init=False)

    def __post_init__(self) -> None:
        self.current_score = (
            self.ceim.aggregate_score() + self.nanokarma.impact_score()
        ) / 2.0

    def verify_monotonicity(self) -> bool:
        """Return True if impact did not grow; raise otherwise."""
        if self.current_score > self.previous_score:
            raise EcoMonotonicityViolation(self.current_score - self.previous_score)
        return True

    def delta(self) -> float:
        return self.current_score - self.previous_score

    def to_hex_anchor(self) -> str:
        return f"0xeco{_as_u32(self.current_score * 1000.0):08x}"