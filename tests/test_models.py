import pytest
from pydantic import ValidationError

from job_board.models import Job, JobPayload
from job_board.serialization import JsonOptions


def test_job_record_uses_stable_field_order() -> None:
    job = Job(id=3, title="Backend", description="Python")
    assert list(job.to_record()) == ["Id", "Title", "Description"]
    assert job.to_record() == {"Id": 3, "Title": "Backend", "Description": "Python"}


def test_job_is_immutable() -> None:
    job = Job(id=1, title="a", description="b")
    with pytest.raises(ValidationError):
        job.title = "changed"  # type: ignore[misc]


def test_payload_field_names_are_case_insensitive() -> None:
    payload = JobPayload.model_validate({"title": "a", "DESCRIPTION": "b", "iD": 9})
    assert payload.title == "a"
    assert payload.description == "b"
    assert payload.id == 9


def test_payload_ignores_unknown_fields_and_optional_id() -> None:
    payload = JobPayload.model_validate({"Title": "a", "Description": "b", "salary": 10})
    assert payload.id is None


def test_payload_requires_title_and_description() -> None:
    with pytest.raises(ValidationError):
        JobPayload.model_validate({"Title": "a"})
    with pytest.raises(ValidationError):
        JobPayload.model_validate({"Title": 5, "Description": "b"})
    with pytest.raises(ValidationError):
        JobPayload.model_validate(["Title", "Description"])


def test_case_sensitive_options_keep_exact_names_only() -> None:
    options = JsonOptions(case_insensitive=False)
    matched = options.match_fields({"title": "a", "Title": "b"}, ["Title"])
    assert matched == {"Title": "b"}


def test_dumps_is_indented() -> None:
    text = JsonOptions().dumps([{"Id": 1}])
    assert text == '[\n  {\n    "Id": 1\n  }\n]'
