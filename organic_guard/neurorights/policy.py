"""Policy shards and strictest-wins handling of overlapping legal regimes."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum

from organic_guard.neurorights.invariants import NeurorightType
from organic_guard.neurorights.kernel_errors import PolicyDowngradeAttempted


class LegalRegime(Enum):
    """Legal regimes the kernel understands."""

    CALIFORNIA_SB1223 = "CaliforniaSB1223"
    COLORADO_HB241058 = "ColoradoHB241058"
    EU_AI_ARTICLE5 = "EUAIArticle5"
    CUSTOM_DID_BOUND = "CustomDIDBound"

    def protectiveness_score(self) -> int:
        """Higher scores protect neurorights more."""
        return _PROTECTIVENESS[self]


_PROTECTIVENESS = {
    LegalRegime.CALIFORNIA_SB1223: 8,
    LegalRegime.COLORADO_HB241058: 9,
    LegalRegime.EU_AI_ARTICLE5: 7,
    LegalRegime.CUSTOM_DID_BOUND: 10,
}


@dataclass
class PolicyShard:
    """A policy naming the rights it protects under a legal regime."""

    id: str
    regime: LegalRegime = LegalRegime.CUSTOM_DID_BOUND
    protected_rights: list[NeurorightType] = field(default_factory=list)
    allows_downgrade: bool = False
    requires_evolve_token: bool = True

    def add_right_protection(self, right: NeurorightType) -> None:
        if right not in self.protected_rights:
            self.protected_rights.append(right)

    def protects_right(self, right: NeurorightType) -> bool:
        return right in self.protected_rights

    def merge_strictest_wins(self, other: PolicyShard) -> None:
        """Fold another policy in, keeping whichever terms protect more."""
        if other.regime.protectiveness_score() > self.regime.protectiveness_score():
            self.regime = other.regime
        for right in other.protected_rights:
            self.add_right_protection(right)
        if not other.allows_downgrade:
            self.allows_downgrade = False


@dataclass
class StrictestWins:
    """Holds the active policy and the history of policies it replaced."""

    active_policy: PolicyShard
    history: list[PolicyShard] = field(default_factory=list)

    def apply_update(self, new_policy: PolicyShard) -> None:
        """Merge an update; one that protects fewer rights is refused."""
        if len(new_policy.protected_rights) < len(self.active_policy.protected_rights):
            raise PolicyDowngradeAttempted()
        self.history.append(copy.deepcopy(self.active_policy))
        self.active_policy.merge_strictest_wins(new_policy)

    def active_regime(self) -> LegalRegime:
        return self.active_policy.regime