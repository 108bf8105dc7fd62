"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from isnkit.audit.models import LOG_LEVELS, LogEvent
from isnkit.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    current_stage : str | None
        Current stage name for context.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        run_id : str
            Unique run identifier.
        log_path : Path
            Path to JSONL log file.
        """
        self.run_id = run_id
        self.log_path = Path(log_path)
        self.current_stage: str | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def set_stage(self, stage: str | None) -> None:
        """Set current stage context."""
        self.current_stage = stage

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        stage: str | None = None,
        line: int | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "run_started").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        stage : str | None, optional
            Stage identifier, uses current_stage if not provided.
        line : int | None, optional
            Input line number if event is identifier-specific.

        Raises
        ------
        ValueError
            If ``level`` is not a known log level.
        """
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level}")

        if data is None:
            data = {}

        if stage is None:
            stage = self.current_stage

        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data,
            stage=stage,
            line=line,
        )

        self._write_event(log_event)

    def _write_event(self, event: LogEvent) -> None:
        json.dump(asdict(event), self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def run_started(self, command: list[str], parameters: dict[str, Any]) -> None:
        """Log run_started event.

        Parameters
        ----------
        command : list[str]
            Command-line arguments.
        parameters : dict[str, Any]
            Configuration parameters.
        """
        self.event(
            "run_started",
            data={"command": command, "parameters": parameters},
        )

    def run_finished(
        self,
        status: str,
        duration_seconds: float,
        counters: dict[str, int] | None = None,
    ) -> None:
        """Log run_finished event.

        Parameters
        ----------
        status : str
            Run status ("success", "failed").
        duration_seconds : float
            Total execution time in seconds.
        counters : dict[str, int] | None, optional
            Final counters (total, valid, invalid, recovered).
        """
        data: dict[str, Any] = {
            "status": status,
            "duration_seconds": duration_seconds,
        }
        if counters:
            data["counters"] = counters

        self.event("run_finished", data=data)

    def identifier_rejected(self, line: int, raw: str, reason: str) -> None:
        """Log identifier_rejected event.

        Parameters
        ----------
        line : int
            Input line number.
        raw : str
            Identifier as read from the input.
        reason : str
            Short reason code ("invalid_check", "invalid_shape", "error").
        """
        self.event(
            "identifier_rejected",
            data={"raw": raw, "reason": reason},
            level="WARN",
            line=line,
        )

    def identifier_recovered(self, line: int, raw: str, identifier_type: str) -> None:
        """Log identifier_recovered event for an identifier missing leading zeroes."""
        self.event(
            "identifier_recovered",
            data={"raw": raw, "identifier_type": identifier_type},
            line=line,
        )

    def artifact_written(
        self,
        path: str,
        record_count: int | None = None,
        bytes_written: int | None = None,
    ) -> None:
        """Log artifact_written event.

        Parameters
        ----------
        path : str
            Path to artifact.
        record_count : int | None, optional
            Number of records in artifact.
        bytes_written : int | None, optional
            File size in bytes.
        """
        data: dict[str, Any] = {"path": path}
        if record_count is not None:
            data["record_count"] = record_count
        if bytes_written is not None:
            data["bytes"] = bytes_written

        self.event("artifact_written", data=data)

    def error(
        self,
        exception_class: str,
        message: str,
        line: int | None = None,
        traceback: str | None = None,
    ) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name.
        message : str
            Error message.
        line : int | None, optional
            Input line number if error is identifier-specific.
        traceback : str | None, optional
            Stack trace.
        """
        data: dict[str, Any] = {
            "exception_class": exception_class,
            "message": message,
        }
        if traceback is not None:
            data["traceback"] = traceback

        self.event("error", data=data, level="ERROR", line=line)
