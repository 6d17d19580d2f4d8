"""Sovereign channels and the strict split between inner and outer domains."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from organic_guard.protocol.packet import ALNParticle


class DomainType(Enum):
    """Where a channel lives: on the host only, or exportable."""

    INNER = "Inner"
    OUTER = "Outer"


class ChannelType(Enum):
    """Kinds of sovereign channel."""

    NEURO_INTRA_HOST = "NeuroIntraHost"
    NEURO_OUTER_CORRIDOR = "NeuroOuterCorridor"
    GUARD_DECISION = "GuardDecision"
    LEGACY_SHIM = "LegacyShim"

    def domain(self) -> DomainType:
        if self is ChannelType.NEURO_INTRA_HOST:
            return DomainType.INNER
        return DomainType.OUTER

    def allows_raw_neural_data(self) -> bool:
        return self is ChannelType.NEURO_INTRA_HOST


class SovereignChannel(ABC):
    """A channel that carries ALN particles."""

    @abstractmethod
    def channel_type(self) -> ChannelType:
        """The kind of this channel."""

    @abstractmethod
    def send(self, particle: ALNParticle) -> None:
        """Send a particle; raise a ProtocolError on refusal."""

    @abstractmethod
    def receive(self) -> ALNParticle:
        """Receive the next particle; raise a ProtocolError on failure."""

    def is_inner_domain(self) -> bool:
        return self.channel_type().domain() is DomainType.INNER


@dataclass
class InnerDomain:
    """A host-only channel bound to a device."""

    channel_id: str
    device_tag: str


@dataclass
class OuterDomain:
    """A network-exportable channel bound to a DID."""

    channel_id: str
    did_bound: str
    encryption_layer: str = "AES-256-GCM"