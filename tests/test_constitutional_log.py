from organic_guard.neurorights.constitutional_log import ConstitutionalLog, ViolationRecord
from organic_guard.neurorights.invariants import InvariantViolation, NeurorightType


def _record(right, severity=10):
    violation = InvariantViolation(right, "Test violation", "hash123")
    violation.severity = severity
    return ViolationRecord(violation, "did:test", "cpu001")


def test_log_violation():
    log = ConstitutionalLog()
    log.log_violation(_record(NeurorightType.COGNITIVE_LIBERTY))
    assert len(log.records) == 1


def test_filter_critical():
    log = ConstitutionalLog()
    log.log_violation(_record(NeurorightType.MENTAL_PRIVACY, severity=10))
    critical = log.critical_violations()
    assert len(critical) == 1


def test_critical_threshold_excludes_lower_severity():
    log = ConstitutionalLog()
    log.log_violation(_record(NeurorightType.MENTAL_PRIVACY, severity=8))
    log.log_violation(_record(NeurorightType.MENTAL_PRIVACY, severity=7))
    critical = log.critical_violations()
    assert [r.violation.severity for r in critical] == [8]


def test_violations_by_right():
    log = ConstitutionalLog()
    log.log_violation(_record(NeurorightType.MENTAL_PRIVACY))
    log.log_violation(_record(NeurorightType.COGNITIVE_LIBERTY))
    log.log_violation(_record(NeurorightType.MENTAL_PRIVACY))
    found = log.violations_by_right(NeurorightType.MENTAL_PRIVACY)
    assert len(found) == 2
    assert all(r.violation.right_type is NeurorightType.MENTAL_PRIVACY for r in found)
    assert log.violations_by_right(NeurorightType.PROJECT_CONTINUITY) == []


def test_record_mark_anchored():
    record = _record(NeurorightType.COGNITIVE_LIBERTY)
    assert record.anchored is False
    record.mark_anchored("chain_hash")
    assert record.anchored is True
    assert record.anchor_hash == "chain_hash"


def test_anchor_to_chain_sets_last_hash_only():
    log = ConstitutionalLog()
    log.log_violation(_record(NeurorightType.COGNITIVE_LIBERTY))
    log.anchor_to_chain("chain_hash")
    assert log.last_anchor_hash == "chain_hash"
    assert log.records[0].anchored is False


def test_export_audit_trail():
    log = ConstitutionalLog()
    assert log.export_audit_trail() == "AuditTrail: 0 records, last_anchor: None"
    log.log_violation(_record(NeurorightType.COGNITIVE_LIBERTY))
    log.anchor_to_chain("abc")
    trail = log.export_audit_trail()
    assert trail.startswith("AuditTrail: 1 records")
    assert 'Some("abc")' in trail