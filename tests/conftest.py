from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))


@pytest.fixture(autouse=True)
def _isolate_job_board_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("JOB_BOARD_DATA_PATH", str(tmp_path / "jobs.json"))
    monkeypatch.setenv("JOB_BOARD_AUDIT_LOG_PATH", str(tmp_path / "audit.log"))
    monkeypatch.delenv("JOB_BOARD_MAX_FIELD_LENGTH", raising=False)
    monkeypatch.delenv("JOB_BOARD_URL", raising=False)
    monkeypatch.delenv("JOB_BOARD_LOG_LEVEL", raising=False)
