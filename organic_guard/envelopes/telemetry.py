"""Telemetry snapshots for EEG, HRV and thermal readings."""

from dataclasses import InitVar, dataclass, field


@dataclass
class EEGSnapshot:
    """EEG band powers at one moment."""

    alpha: float
    beta: float
    gamma: float
    theta: float
    delta: float
    timestamp: int = 0

    def theta_beta_ratio(self) -> float:
        if self.beta == 0.0:
            return 0.0
        return self.theta / self.beta

    def alpha_gamma_ratio(self) -> float:
        if self.gamma == 0.0:
            return 0.0
        return self.alpha / self.gamma

    def cognitive_load_score(self) -> float:
        return (self.theta_beta_ratio() + (1.0 - self.alpha_gamma_ratio())) / 2.0


@dataclass
class HRVSnapshot:
    """Heart rate variability in the time and frequency domains."""

    rmssd: float
    sdnn: float
    lf: float
    hf: float
    lf_hf_ratio: float = field(init=False)

    def __post_init__(self) -> None:
        self.lf_hf_ratio = 0.0 if self.hf == 0.0 else self.lf / self.hf

    def hrv_score(self) -> float:
        rmssd_normalized = min(self.rmssd / 100.0, 1.0)
        sdnn_normalized = min(self.sdnn / 150.0, 1.0)
        lf_hf_optimal = 1.0 if 1.0 < self.lf_hf_ratio < 3.0 else 0.5
        return (rmssd_normalized + sdnn_normalized + lf_hf_optimal) / 3.0


@dataclass
class ThermalSnapshot:
    """Core and skin temperature with the change from a baseline."""

    core_temp: float
    skin_temp: float
    baseline: InitVar[float]
    delta_from_baseline: float = field(init=False)

    def __post_init__(self, baseline: float) -> None:
        self.delta_from_baseline = self.core_temp - baseline

    def is_safe(self) -> bool:
        return self.delta_from_baseline <= 0.5


@dataclass
class BiophysicalTelemetry:
    """A bundle of EEG, HRV and thermal snapshots."""

    eeg: EEGSnapshot
    hrv: HRVSnapshot
    thermal: ThermalSnapshot
    timestamp: int = 0
    session_id: str = ""

    def validate(self) -> bool:
        return self.thermal.is_safe() and self.eeg.cognitive_load_score() < 0.8