import json
from pathlib import Path

from job_board.models import Job
from job_board.runtime import JobAuditLog


def test_entries_are_appended_and_filtered(tmp_path: Path) -> None:
    audit = JobAuditLog(str(tmp_path / "nested" / "audit.log"))
    audit.record("created", 1, Job(id=1, title="a", description="b"))
    audit.record("created", 2, Job(id=2, title="c", description="d"))
    audit.record("deleted", 1)

    assert len(audit.entries()) == 3
    assert [entry.action for entry in audit.entries(job_id=1)] == ["created", "deleted"]
    assert [entry.job_id for entry in audit.entries(action="created")] == [1, 2]

    created = audit.entries(job_id=1, action="created")[0]
    assert (created.title, created.description) == ("a", "b")
    deleted = audit.entries(job_id=1, action="deleted")[0]
    assert deleted.title is None


def test_each_entry_is_one_json_line(tmp_path: Path) -> None:
    path = tmp_path / "audit.log"
    audit = JobAuditLog(str(path))
    audit.record("updated", 4, Job(id=4, title="x", description="y"))

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["job_id"] == 4


def test_missing_log_reads_as_empty(tmp_path: Path) -> None:
    assert JobAuditLog(str(tmp_path / "audit.log")).entries() == []
