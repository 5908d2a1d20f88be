"""Runtime support components: audit trail and logging setup."""

from .audit import AuditEntry, JobAuditLog
from .logconfig import configure_logging

__all__ = ["AuditEntry", "JobAuditLog", "configure_logging"]
