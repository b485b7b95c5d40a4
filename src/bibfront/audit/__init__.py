"""Audit logging subsystem for bibfront."""

from bibfront.audit.logger import AuditLogger, new_run_id
from bibfront.audit.models import LogEvent

__all__ = ["AuditLogger", "LogEvent", "new_run_id"]
