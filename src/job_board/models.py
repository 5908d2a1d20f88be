from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, model_validator

from job_board.serialization import DEFAULT_JSON_OPTIONS, JsonOptions


JOB_FIELD_NAMES = ["Id", "Title", "Description"]
DEFAULT_MAX_FIELD_LENGTH = 100


def _match_job_fields(data: Any, info: ValidationInfo) -> Any:
    if not isinstance(data, dict):
        return data
    options: JsonOptions = (info.context or {}).get("options") or DEFAULT_JSON_OPTIONS
    return options.match_fields(data, JOB_FIELD_NAMES)


class Job(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(alias="Id")
    title: str = Field(alias="Title")
    description: str = Field(alias="Description")

    @model_validator(mode="before")
    @classmethod
    def match_field_names(cls, data: Any, info: ValidationInfo) -> Any:
        return _match_job_fields(data, info)

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class JobPayload(BaseModel):
    """Request body for create and update. ``Id`` is accepted and ignored."""

    id: int | None = Field(default=None, alias="Id")
    title: str = Field(alias="Title")
    description: str = Field(alias="Description")

    @model_validator(mode="before")
    @classmethod
    def match_field_names(cls, data: Any, info: ValidationInfo) -> Any:
        return _match_job_fields(data, info)
