"""Data models for audit logging."""

from dataclasses import dataclass, field
from typing import Any

__all__ = ["LogEvent"]


@dataclass
class LogEvent:
    """Structured log event.

    Attributes
    ----------
    ts : str
        ISO8601 timestamp (UTC).
    run_id : str
        Run identifier.
    level : str
        Log level ("DEBUG", "INFO", "WARN", "ERROR").
    event : str
        Event type (e.g., "entry_rendered").
    stage : str | None
        Pipeline stage ("parse", "convert").
    citekey : str | None
        Citation key if the event concerns one entry.
    data : dict[str, Any]
        Event-specific payload.
    """

    ts: str
    run_id: str
    level: str
    event: str
    stage: str | None = None
    citekey: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
