from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from job_board.models import Job
from job_board.serialization import DEFAULT_JSON_OPTIONS, JsonOptions


class StorageCorruptedError(RuntimeError):
    pass


class JsonFileJobStore:
    def __init__(self, path: str, options: JsonOptions | None = None) -> None:
        self.path = Path(path).expanduser().resolve()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.options = options or DEFAULT_JSON_OPTIONS

    def load(self) -> list[Job]:
        if not self.path.exists():
            return []
        raw = self.path.read_text(encoding="utf-8").strip()
        if not raw:
            return []
        try:
            payload = self.options.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageCorruptedError(f"invalid JSON in {self.path}: {exc}") from exc
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise StorageCorruptedError(f"expected a JSON array in {self.path}")
        try:
            context = {"options": self.options}
            return [Job.model_validate(record, context=context) for record in payload]
        except ValidationError as exc:
            raise StorageCorruptedError(f"invalid job record in {self.path}: {exc}") from exc

    def save(self, jobs: Iterable[Job]) -> None:
        encoded = self.options.dumps([job.to_record() for job in jobs])
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as file:
                file.write(encoded)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
