import pytest

from organic_guard.protocol.gateway import BleShim, LegacyProtocol, Ros2Shim
from organic_guard.protocol.packet import ALNParticle, ParticleType
from organic_guard.protocol.protocol_errors import (
    LegacyMtuExceeded,
    LegacyTranslationBlocked,
)


def _particle(particle_type=ParticleType.PROPOSAL, payload="") -> ALNParticle:
    particle = ALNParticle.new_proposal("did:test", "did:host")
    particle.particle_type = particle_type
    particle.payload_hash = payload
    return particle


def test_ros2_shim_translation():
    shim = Ros2Shim("aln_export")
    result = shim.translate_to_legacy(_particle(ParticleType.STATUS_EXPORT, "abc"))
    assert result == b"abc"


def test_ros2_shim_allows_guard_decision():
    shim = Ros2Shim("aln_export")
    result = shim.translate_to_legacy(_particle(ParticleType.GUARD_DECISION, "xyz"))
    assert result == b"xyz"


@pytest.mark.parametrize("particle_type", [ParticleType.PROPOSAL, ParticleType.AUDIT_ANCHOR])
def test_ros2_shim_blocks_non_export(particle_type):
    shim = Ros2Shim("aln_export")
    with pytest.raises(LegacyTranslationBlocked) as info:
        shim.translate_to_legacy(_particle(particle_type))
    assert info.value.reason == "Only export particles allowed to legacy protocols"


def test_ros2_defaults_and_protocol():
    shim = Ros2Shim("aln_export")
    assert shim.qos_profile == "SENSOR_DATA"
    assert shim.protocol_type() is LegacyProtocol.ROS2


def test_ros2_from_legacy_is_proposal():
    particle = Ros2Shim("aln_export").translate_from_legacy(b"hello")
    assert particle.particle_type is ParticleType.PROPOSAL
    assert particle.sender_did == "did:legacy:shim"
    assert particle.receiver_did == "did:bostrom:host"
    assert particle.payload_hash == "hello"
    assert not particle.corridor_safe


def test_from_legacy_replaces_invalid_utf8():
    particle = Ros2Shim("aln_export").translate_from_legacy(b"\xff")
    assert particle.payload_hash == "\ufffd"


def test_round_trip_through_ros2():
    shim = Ros2Shim("aln_export")
    incoming = shim.translate_from_legacy(b"status-frame")
    incoming.particle_type = ParticleType.STATUS_EXPORT
    assert shim.translate_to_legacy(incoming) == b"status-frame"


def test_ble_protocol_and_from_legacy():
    shim = BleShim("service", "characteristic")
    assert shim.protocol_type() is LegacyProtocol.BLE
    particle = shim.translate_from_legacy(b"ping")
    assert particle.sender_did == "did:ble:shim"
    assert particle.receiver_did == "did:bostrom:host"
    assert particle.payload_hash == "ping"


def test_ble_mtu_exceeded():
    shim = BleShim("service", "characteristic")
    with pytest.raises(LegacyMtuExceeded):
        shim.translate_to_legacy(_particle(ParticleType.STATUS_EXPORT, "a" * 513))


def test_ble_at_mtu_limit_translates():
    shim = BleShim("service", "characteristic")
    payload = "a" * 512
    assert shim.translate_to_legacy(_particle(ParticleType.STATUS_EXPORT, payload)) == payload.encode()


def test_ble_blocks_proposal():
    shim = BleShim("service", "characteristic")
    with pytest.raises(LegacyTranslationBlocked):
        shim.translate_to_legacy(_particle(ParticleType.PROPOSAL, "small"))