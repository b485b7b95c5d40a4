"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle.
"""

import json
import uuid
from dataclasses import asdict
from pathlib import Path
from typing import Any

from bibfront.audit.models import LogEvent
from bibfront.utils import get_iso_timestamp

__all__ = ["AuditLogger", "new_run_id"]


def new_run_id() -> str:
    """Generate a run identifier (timestamp prefix plus random suffix)."""
    stamp = get_iso_timestamp()[:19].replace("-", "").replace(":", "")
    return f"{stamp}_{uuid.uuid4().hex[:8]}"


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes one JSON object per line; each write is flushed.

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
        self.log_path = log_path
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
        citekey: str | None = None,
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
        citekey : str | None, optional
            Citation key if event is entry-specific.
        """
        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            stage=stage if stage is not None else self.current_stage,
            citekey=citekey,
            data=data or {},
        )
        json.dump(asdict(log_event), self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def run_started(self, source: str, parameters: dict[str, Any]) -> None:
        self.event("run_started", data={"source": source, "parameters": parameters})

    def run_finished(self, status: str, duration_seconds: float, entries: int, failed: int) -> None:
        """Log run_finished event.

        Parameters
        ----------
        status : str
            Run status ("success", "failed", "partial").
        duration_seconds : float
            Total execution time in seconds.
        entries : int
            Entries read from the source.
        failed : int
            Entries that could not be converted.
        """
        self.event(
            "run_finished",
            data={
                "status": status,
                "duration_seconds": duration_seconds,
                "entries": entries,
                "failed": failed,
            },
        )

    def entry_rendered(self, citekey: str, entry_type: str) -> None:
        self.event("entry_rendered", data={"entry_type": entry_type}, citekey=citekey)

    def entry_failed(self, citekey: str, field: str, message: str) -> None:
        self.event(
            "entry_failed",
            data={"field": field, "message": message},
            level="ERROR",
            citekey=citekey,
        )

    def warning(self, message: str) -> None:
        self.event("warning", data={"message": message}, level="WARN")

    def error(self, exception_class: str, message: str) -> None:
        """Log an error that aborted the run."""
        self.event(
            "error",
            data={"exception_class": exception_class, "message": message},
            level="ERROR",
        )
