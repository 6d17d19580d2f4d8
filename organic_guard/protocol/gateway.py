"""Gateways that hand vetted ALN particles to untrusted legacy protocols."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from organic_guard.protocol.packet import ALNParticle, ParticleType
from organic_guard.protocol.protocol_errors import (
    LegacyMtuExceeded,
    LegacyTranslationBlocked,
)

BLE_MTU = 512
_HOST_DID = "did:bostrom:host"
_EXPORTABLE = (ParticleType.STATUS_EXPORT, ParticleType.GUARD_DECISION)


class LegacyProtocol(Enum):
    """Legacy protocols reachable through a shim."""

    ROS2 = "ROS2"
    BLE = "BLE"
    CAN = "CAN"
    USB = "USB"


def _export_bytes(particle: ALNParticle) -> bytes:
    if particle.particle_type not in _EXPORTABLE:
        raise LegacyTranslationBlocked(
            "Only export particles allowed to legacy protocols"
        )
    return particle.payload_hash.encode()


def _proposal_from(sender_did: str, data: bytes) -> ALNParticle:
    particle = ALNParticle.new_proposal(sender_did, _HOST_DID)
    particle.payload_hash = bytes(data).decode("utf-8", errors="replace")
    return particle


class LegacyShim(ABC):
    """Translation between ALN particles and a legacy protocol's frames."""

    @abstractmethod
    def protocol_type(self) -> LegacyProtocol:
        """The legacy protocol this shim speaks."""

    @abstractmethod
    def translate_to_legacy(self, particle: ALNParticle) -> bytes:
        """Turn an exportable particle into a legacy frame."""

    @abstractmethod
    def translate_from_legacy(self, data: bytes) -> ALNParticle:
        """Turn a legacy frame into a proposal awaiting guard vetting."""


@dataclass
class Ros2Shim(LegacyShim):
    """ROS2 compatibility shim."""

    topic_prefix: str
    qos_profile: str = "SENSOR_DATA"

    def protocol_type(self) -> LegacyProtocol:
        return LegacyProtocol.ROS2

    def translate_to_legacy(self, particle: ALNParticle) -> bytes:
        """Only status exports and guard decisions may leave."""
        return _export_bytes(particle)

    def translate_from_legacy(self, data: bytes) -> ALNParticle:
        return _proposal_from("did:legacy:shim", data)


@dataclass
class BleShim(LegacyShim):
    """BLE compatibility shim."""

    service_uuid: str
    characteristic_uuid: str

    def protocol_type(self) -> LegacyProtocol:
        return LegacyProtocol.BLE

    def translate_to_legacy(self, particle: ALNParticle) -> bytes:
        """Reject payloads above the BLE MTU, then translate like any export."""
        if len(particle.payload_hash.encode()) > BLE_MTU:
            raise LegacyMtuExceeded()
        return _export_bytes(particle)

    def translate_from_legacy(self, data: bytes) -> ALNParticle:
        return _proposal_from("did:ble:shim", data)