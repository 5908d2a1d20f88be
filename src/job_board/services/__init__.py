"""Service layer for the HTTP API."""

from .jobs import JobNotFoundError, JobService, JobValidationError, resolve_paging

__all__ = ["JobNotFoundError", "JobService", "JobValidationError", "resolve_paging"]
