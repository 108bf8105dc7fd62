"""Tests for audit logger module."""

from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

import jsonschema
import pytest

from isnkit.audit import AuditLogger, generate_run_id


@pytest.fixture
def logger(tmp_path: Path) -> Iterator[AuditLogger]:
    """Create a logger that auto-closes after test."""
    lg = AuditLogger(run_id="test_run", log_path=tmp_path / "events.jsonl")
    yield lg
    lg.close()

@pytest.mark.unit
def test_logger_init_creates_file(logger: AuditLogger) -> None:
    """Test logger creates the log file and sets initial state."""
    assert logger.log_path.exists()
    assert logger.current_stage is None
    assert logger.run_id == "test_run"

@pytest.mark.unit
def test_logger_creates_parent_dirs(tmp_path: Path) -> None:
    """Test missing parent directories are created."""
    with AuditLogger(run_id="r", log_path=tmp_path / "a" / "b" / "events.jsonl") as lg:
        assert lg.log_path.exists()

@pytest.mark.unit
def test_logger_event_writes_valid_jsonl(logger: AuditLogger, read_jsonl) -> None:
    """Test event() writes a valid JSONL line with correct envelope."""
    logger.event("test_event", data={"key": "value"}, level="INFO", line=3)

    events = read_jsonl(logger.log_path)

    assert len(events) == 1
    evt = events[0]
    assert evt["run_id"] == "test_run"
    assert evt["event"] == "test_event"
    assert evt["level"] == "INFO"
    assert evt["data"] == {"key": "value"}
    assert evt["line"] == 3
    assert evt["ts"].endswith("Z")

@pytest.mark.unit
def test_logger_rejects_unknown_level(logger: AuditLogger) -> None:
    """Test levels outside DEBUG/INFO/WARN/ERROR are rejected."""
    with pytest.raises(ValueError, match="Unknown log level"):
        logger.event("x", level="CRITICAL")

@pytest.mark.unit
def test_logger_stage_context_inheritance(logger: AuditLogger, read_jsonl) -> None:
    """Test stage set via set_stage propagates to events."""
    logger.set_stage("check")
    logger.event("ev1")
    logger.event("ev2", stage="override")
    logger.set_stage(None)
    logger.event("ev3")

    events = read_jsonl(logger.log_path)

    assert events[0]["stage"] == "check"
    assert events[1]["stage"] == "override"
    assert events[2]["stage"] is None

@pytest.mark.unit
@pytest.mark.parametrize(
    ("method", "kwargs", "expected_event", "expected_level"),
    [
        ("run_started", {"command": ["isnkit"], "parameters": {"k": 1}}, "run_started", "INFO"),
        (
            "run_finished",
            {"status": "success", "duration_seconds": 1.5, "counters": {"total": 2}},
            "run_finished",
            "INFO",
        ),
        (
            "identifier_rejected",
            {"line": 4, "raw": "0805071661", "reason": "invalid_check"},
            "identifier_rejected",
            "WARN",
        ),
        (
            "identifier_recovered",
            {"line": 9, "raw": "14664", "identifier_type": "ISSN"},
            "identifier_recovered",
            "INFO",
        ),
        (
            "artifact_written",
            {"path": "report.jsonl", "record_count": 2, "bytes_written": 10},
            "artifact_written",
            "INFO",
        ),
        ("error", {"exception_class": "OSError", "message": "boom"}, "error", "ERROR"),
    ],
)
def test_logger_convenience_methods(
    logger: AuditLogger,
    read_jsonl,
    event_schema: dict,
    method: str,
    kwargs: dict,
    expected_event: str,
    expected_level: str,
) -> None:
    """Test each convenience method writes a schema-valid event."""
    getattr(logger, method)(**kwargs)

    events = read_jsonl(logger.log_path)

    assert len(events) == 1
    assert events[0]["event"] == expected_event
    assert events[0]["level"] == expected_level
    jsonschema.validate(instance=events[0], schema=event_schema)

@pytest.mark.unit
def test_logger_close_is_idempotent(tmp_path: Path) -> None:
    """Test closing twice does not raise."""
    lg = AuditLogger(run_id="r", log_path=tmp_path / "events.jsonl")
    lg.close()
    lg.close()

@pytest.mark.unit
def test_logger_appends_across_instances(tmp_path: Path, read_jsonl) -> None:
    """Test a second logger on the same file appends."""
    path = tmp_path / "events.jsonl"
    with AuditLogger(run_id="r1", log_path=path) as lg:
        lg.event("first")
    with AuditLogger(run_id="r2", log_path=path) as lg:
        lg.event("second")

    assert [e["run_id"] for e in read_jsonl(path)] == ["r1", "r2"]

@pytest.mark.unit
def test_generate_run_id_format() -> None:
    """Test run id is a UTC timestamp plus an 8-hex suffix."""
    run_id = generate_run_id()
    timestamp, suffix = run_id.split("__")

    assert len(suffix) == 8
    int(suffix, 16)
    assert datetime.fromisoformat(timestamp.replace("Z", "+00:00")).utcoffset() is not None
    assert generate_run_id() != run_id
