"""Job listing HTTP service backed by a JSON file."""

from .models import Job, JobPayload
from .services import JobNotFoundError, JobService, JobValidationError
from .storage.json_file import JsonFileJobStore, StorageCorruptedError

__all__ = [
    "Job",
    "JobNotFoundError",
    "JobPayload",
    "JobService",
    "JobValidationError",
    "JsonFileJobStore",
    "StorageCorruptedError",
]
