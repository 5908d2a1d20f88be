from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path

from job_board.models import Job


@dataclass
class AuditEntry:
    at: str
    action: str
    job_id: int
    title: str | None = None
    description: str | None = None


class JobAuditLog:
    """Append-only trail of job mutations, one JSON object per line.

    Entries carry the job's fields as they were after the mutation; deletes
    record only the id.
    """

    def __init__(self, path: str) -> None:
        self.path = Path(path).expanduser().resolve()
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def record(self, action: str, job_id: int, job: Job | None = None) -> AuditEntry:
        entry = AuditEntry(
            at=datetime.now(timezone.utc).isoformat(),
            action=action,
            job_id=job_id,
            title=job.title if job else None,
            description=job.description if job else None,
        )
        with self.path.open("a", encoding="utf-8") as file:
            file.write(json.dumps(asdict(entry), ensure_ascii=True) + "\n")
        return entry

    def entries(self, *, job_id: int | None = None, action: str | None = None) -> list[AuditEntry]:
        return [
            entry
            for entry in self._iter_entries()
            if (job_id is None or entry.job_id == job_id)
            and (action is None or entry.action == action)
        ]

    def _iter_entries(self) -> Iterator[AuditEntry]:
        if not self.path.exists():
            return
        with self.path.open("r", encoding="utf-8") as file:
            for line in file:
                if line.strip():
                    yield AuditEntry(**json.loads(line))
