import pytest

from organic_guard.sovereignty.sovereignty_errors import (
    BootChainViolation,
    DIDMismatch,
    IdentityNotBound,
    IdentityNotVerified,
    IncompleteEvidenceBundle,
    InvalidBootHash,
    InvalidDIDFormat,
    MissingPublicKey,
    NoCurrentBootHash,
    SigningFailed,
    SovereigntyError,
    TokenAlreadyConsumed,
    TokenExpired,
    TokenNotActive,
    TokenNotFound,
    TokenRevoked,
    TokenUpgradeMismatch,
    UntrustedBootHash,
    UpgradeRejected,
)


@pytest.mark.parametrize(
    ("error_class", "message"),
    [
        (MissingPublicKey, "Missing public key"),
        (IdentityNotBound, "Identity not bound to DID"),
        (IdentityNotVerified, "Identity not verified"),
        (InvalidBootHash, "Invalid boot hash"),
        (UntrustedBootHash, "Untrusted boot hash"),
        (BootChainViolation, "Boot chain violation detected"),
        (NoCurrentBootHash, "No current boot hash"),
        (SigningFailed, "Signing failed"),
        (TokenAlreadyConsumed, "EVOLVE token already consumed"),
        (TokenExpired, "EVOLVE token expired"),
        (TokenRevoked, "EVOLVE token revoked"),
        (TokenNotActive, "EVOLVE token not active"),
        (TokenUpgradeMismatch, "EVOLVE token upgrade hash mismatch"),
        (TokenNotFound, "EVOLVE token not found"),
    ],
)
def test_plain_error_messages(error_class, message):
    error = error_class()
    assert isinstance(error, SovereigntyError)
    assert str(error) == message


def test_invalid_did_format_keeps_fields():
    error = InvalidDIDFormat("did:other:x", "did:bostrom:")
    assert error.did == "did:other:x"
    assert error.expected_prefix == "did:bostrom:"
    assert str(error).startswith("Invalid DID format: did:other:x")
    assert "did:bostrom:" in str(error)


def test_did_mismatch_keeps_fields():
    error = DIDMismatch("did:bostrom:a", "did:bostrom:b")
    assert error.expected == "did:bostrom:a"
    assert error.actual == "did:bostrom:b"
    assert str(error).startswith("DID mismatch: expected did:bostrom:a")
    assert str(error).endswith("did:bostrom:b")


def test_incomplete_evidence_bundle_fields():
    error = IncompleteEvidenceBundle(3, 10)
    assert (error.current, error.required) == (3, 10)
    assert str(error).startswith("Evidence bundle incomplete: 3")


def test_upgrade_rejected_reason():
    error = UpgradeRejected("too risky")
    assert error.reason == "too risky"
    assert str(error).endswith("too risky")
    assert isinstance(error, SovereigntyError)