# organic_guard

This is a library of safety guards for organic compute hosts. It does four jobs:

- It turns physiological telemetry into bounded risk figures.
- It checks policy proposals against a fixed set of neurorights.
- It binds a host to a sovereign DID and checks its boot hash.
- It gates device and syscall access behind an active guard service.

Every check that fails raises an exception. The exception carries the figures that caused the failure.

The package has no runtime dependencies.

## Contents

### `organic_guard.envelopes`

- `telemetry`: EEG, HRV and thermal snapshots, and `BiophysicalTelemetry`.
- `roh`: `RoHCalculator`, which computes Risk of Harm. Its hard ceiling is 0.3.
- `rod`: `PainDebt`, `NeurorightsBudget` and `RoDCalculator`, which computes cumulative Risk of Danger. It reaches HardStop at 1.0.
- `lifeforce`: `LifeforceBand`, with the bands `BASELINE`, `SOFT_WARN` and `HARD_STOP`, plus `CytokineThresholds` and `LifeforceEnvelope`.
- `eco_impact`: `CEIM`, `NanoKarma` and `EcoImpactScore`, which checks that environmental impact never grows.
- `envelope_errors`: `EnvelopeError` and its subclasses.

### `organic_guard.neurorights`

- `invariants`: `NeurorightType`, `InvariantViolation` and `InvariantSet`, which is locked by default. Also the abstract `NeurorightsEnforcer` interface.
- `policy`: `LegalRegime`, `PolicyShard` with strictest-wins merging, and `StrictestWins`, which refuses policy downgrades.
- `constitutional_log`: `ViolationRecord` and `ConstitutionalLog`.
- `kernel_errors`: `KernelError` and its subclasses.

### `organic_guard.sovereignty`

- `identity`: `DIDBinding`, `IdentityState` and `SovereignIdentity`. The identity moves through the states Unbound, then Bound, then Verified.
- `boot_chain`: `BootHash`, `SecureBootVerifier`, `BootChain` and `verify_boot_chain()`.
- `sovereignty_errors`: `SovereigntyError` and its subclasses.

### `organic_guard.protocol`

- `packet`: `ParticleType`, `EvidenceHeader`, which needs 10 tags, and `ALNParticle`.
- `channel`: `DomainType` and `ChannelType`, with inner/outer separation. Also the abstract `SovereignChannel`, and the `InnerDomain` and `OuterDomain` records.
- `gateway`: `LegacyProtocol`, the abstract `LegacyShim`, `Ros2Shim` and `BleShim`. A shim hands out only status-export and guard-decision particles, and `BleShim` enforces a 512-byte MTU. Frames that come in from a legacy protocol always become proposals.
- `protocol_errors`: `ProtocolError` and its subclasses.

### `organic_guard.kernel`

- `kernel_guard`: `GuardService`, `GuardServiceState` and `KernelGuard`.
- `device_classifier`: `DomainLabel`, `DeviceEntry` and `DeviceClassifier`. A path that matches no registered device is classified as outer.
- `syscall_wrapper`: `WrappedSyscall` and `SyscallWrapper`. It applies three rules:
  - Inner-domain opens must be under `/dev/bci_inner`.
  - Inner-domain mmap is always refused.
  - Raw sockets are always refused.
- `audit_log`: `AuditEntryType`, `AuditEntry` and the append-only `KernelAuditLog`.
- `integration_errors`: `IntegrationError` and its subclasses.

## Risk of Harm

```python
from organic_guard.envelopes.roh import RoHCalculator
from organic_guard.envelopes.envelope_errors import RoHThresholdExceeded

calc = RoHCalculator()
calc.add_eeg_load(0.2).add_hrv_score(0.9).add_thermal_delta(0.1)
calc.add_duty_cycle(0.2).add_cytokine_load(2.0, 1.0)

roh = calc.build()          # a float, never above 0.3
assert roh <= 0.3

risky = RoHCalculator()
risky.add_eeg_load(0.9).add_hrv_score(0.2).add_thermal_delta(0.7)
try:
    risky.build()
except RoHThresholdExceeded as exc:
    print(exc.current)
```

## Risk of Danger and lifeforce

```python
from organic_guard.envelopes.rod import RoDCalculator
from organic_guard.envelopes.lifeforce import LifeforceBand

rod_calc = RoDCalculator()
rod_calc.add_pain_signal(0.1)
rod = rod_calc.build()      # raises RodHardStop once the figure reaches 1.0

band = LifeforceBand.from_roh_rod(0.1, rod)
band.allows_operation(3)
```

## Sovereign identity

```python
from organic_guard.sovereignty.identity import SovereignIdentity
from organic_guard.sovereignty.boot_chain import verify_boot_chain

identity = SovereignIdentity("did:bostrom:example", "organic_cpu_001")
identity.bind_to_did("public_key_placeholder")
identity.verify("boot_hash_placeholder")
assert identity.is_sovereign()
assert verify_boot_chain(identity)
```

A DID without the `did:bostrom:` prefix is rejected with `InvalidDIDFormat`.

## Guarded syscalls

```python
from organic_guard.kernel.kernel_guard import KernelGuard
from organic_guard.kernel.device_classifier import DomainLabel
from organic_guard.kernel.syscall_wrapper import SyscallWrapper
from organic_guard.kernel.integration_errors import RawSocketBlocked

wrapper = SyscallWrapper(KernelGuard.load())
wrapper.wrap_open("/dev/bci_inner_001", DomainLabel.INNER)
try:
    wrapper.wrap_socket(2, 3)   # raw sockets are always refused
except RawSocketBlocked:
    pass
```

## Errors

Each area has its own exception base class. Every specific failure is a subclass of that base:

- `envelope_errors.EnvelopeError`
- `guard_errors.GuardError`
- `kernel_errors.KernelError`
- `sovereignty_errors.SovereigntyError`
- `protocol_errors.ProtocolError`
- `integration_errors.IntegrationError`

Catch the base class to handle a whole area at once.

## What the package does not do

- **No cryptography.**
  - `ALNParticle.sign` and `BootHash.sign` set a fixed signature string whenever the key is not empty.
  - Signature verification only checks that a signature is present.
  - `AuditEntry.compute_hash` stores a fixed hash string.
- **No single envelope object.** Nothing combines RoH, ROD, lifeforce band and eco-impact. Use the calculators separately.
- **No network, routing or chain access.** Channels and shims are types and translations only. Anchoring a log records the given hash in memory.
- **No persistent storage.** Logs live in memory.
- **No command-line tool.**
- **No real kernel hooks.** The guard service and syscall wrapper are in-process checks.