from __future__ import annotations

import logging
import threading

from job_board.models import DEFAULT_MAX_FIELD_LENGTH, Job
from job_board.runtime import JobAuditLog
from job_board.storage.json_file import JsonFileJobStore


DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

logger = logging.getLogger("job_board.jobs")


class JobNotFoundError(RuntimeError):
    pass


class JobValidationError(RuntimeError):
    pass


def _parse_positive(raw: str | int | None, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return max(value, 1)


def resolve_paging(page: str | int | None, page_size: str | int | None) -> tuple[int, int]:
    """Turn raw ``page``/``pageSize`` query values into usable numbers.

    Missing or non-numeric values fall back to page 1 and 10 per page, and
    anything below 1 is raised to 1.
    """
    return (
        _parse_positive(page, DEFAULT_PAGE),
        _parse_positive(page_size, DEFAULT_PAGE_SIZE),
    )


class JobService:
    def __init__(
        self,
        store: JsonFileJobStore,
        *,
        audit_log: JobAuditLog | None = None,
        max_field_length: int = DEFAULT_MAX_FIELD_LENGTH,
    ) -> None:
        self.store = store
        self.audit_log = audit_log
        self.max_field_length = max_field_length
        self._lock = threading.Lock()
        self._jobs: list[Job] = store.load()
        self._next_id = max((job.id for job in self._jobs), default=0) + 1
        logger.info("Loaded %d job(s) from %s", len(self._jobs), store.path)

    @property
    def next_id(self) -> int:
        return self._next_id

    def list_jobs(self, page: int = DEFAULT_PAGE, page_size: int = DEFAULT_PAGE_SIZE) -> list[Job]:
        page = max(page, 1)
        page_size = max(page_size, 1)
        start = (page - 1) * page_size
        with self._lock:
            ordered = sorted(self._jobs, key=lambda job: job.id)
        return ordered[start : start + page_size]

    def get_job(self, job_id: int) -> Job:
        with self._lock:
            return self._jobs[self._index_of(job_id)]

    def create_job(self, *, title: str, description: str) -> Job:
        self._validate(title, description)
        with self._lock:
            job = Job(id=self._next_id, title=title, description=description)
            self._commit([*self._jobs, job])
            self._next_id = job.id + 1
        self._audit("created", job.id, job)
        return job

    def update_job(self, job_id: int, *, title: str, description: str) -> Job:
        with self._lock:
            index = self._index_of(job_id)
            self._validate(title, description)
            job = Job(id=job_id, title=title, description=description)
            updated = list(self._jobs)
            updated[index] = job
            self._commit(updated)
        self._audit("updated", job_id, job)
        return job

    def delete_job(self, job_id: int) -> None:
        with self._lock:
            index = self._index_of(job_id)
            self._commit(self._jobs[:index] + self._jobs[index + 1 :])
        self._audit("deleted", job_id)

    def _commit(self, jobs: list[Job]) -> None:
        # memory only changes once the file holds the new collection
        self.store.save(jobs)
        self._jobs = jobs

    def _index_of(self, job_id: int) -> int:
        for index, job in enumerate(self._jobs):
            if job.id == job_id:
                return index
        raise JobNotFoundError("Job not found")

    def _validate(self, title: str, description: str) -> None:
        if len(title) > self.max_field_length or len(description) > self.max_field_length:
            raise JobValidationError(
                f"Title or Description too long (max {self.max_field_length} characters)"
            )

    def _audit(self, action: str, job_id: int, job: Job | None = None) -> None:
        logger.info("Job %s %s", job_id, action)
        if self.audit_log:
            self.audit_log.record(action, job_id, job)
