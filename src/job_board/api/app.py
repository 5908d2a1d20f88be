from __future__ import annotations

import json
import logging
import os
import re
from typing import Any

from fastapi import FastAPI, HTTPException, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from job_board.api.middleware import register_request_logging
from job_board.models import DEFAULT_MAX_FIELD_LENGTH, JobPayload
from job_board.runtime import JobAuditLog
from job_board.serialization import DEFAULT_JSON_OPTIONS, JsonOptions
from job_board.services.jobs import (
    JobNotFoundError,
    JobService,
    JobValidationError,
    resolve_paging,
)
from job_board.storage.json_file import JsonFileJobStore

logger = logging.getLogger("job_board.api")

JOB_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class MalformedRequestError(ValueError):
    pass


def _env_text(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _default_data_path() -> str:
    return _env_text("JOB_BOARD_DATA_PATH") or "jobs.json"


def _default_audit_log_path() -> str:
    return _env_text("JOB_BOARD_AUDIT_LOG_PATH") or ".job_board/audit.log"


def _default_max_field_length() -> int:
    return int(_env_text("JOB_BOARD_MAX_FIELD_LENGTH") or DEFAULT_MAX_FIELD_LENGTH)


def parse_job_id(raw: str) -> int:
    if not JOB_ID_PATTERN.fullmatch(raw):
        raise MalformedRequestError("Invalid job ID")
    return int(raw)


async def read_job_payload(request: Request, options: JsonOptions) -> JobPayload:
    raw = await request.body()
    try:
        data = options.loads(raw.decode("utf-8"))
        return JobPayload.model_validate(data, context={"options": options})
    except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        raise MalformedRequestError("Invalid request body") from exc


def _json_response(payload: Any, options: JsonOptions, status_code: int = 200) -> Response:
    return Response(
        content=options.dumps(payload),
        status_code=status_code,
        media_type="application/json",
    )


def create_app(data_path: str | None = None, audit_log_path: str | None = None) -> FastAPI:
    options = DEFAULT_JSON_OPTIONS
    store = JsonFileJobStore(data_path or _default_data_path(), options=options)
    service = JobService(
        store,
        audit_log=JobAuditLog(audit_log_path or _default_audit_log_path()),
        max_field_length=_default_max_field_length(),
    )

    app = FastAPI(
        title="Job Board API",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.job_service = service
    register_request_logging(app)

    @app.exception_handler(StarletteHTTPException)
    async def http_exc_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        # unknown method on a known path is reported the same as an unknown path
        if exc.status_code == 405:
            return PlainTextResponse("Not Found", status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exc_handler(
        request: Request, exc: RequestValidationError
    ) -> PlainTextResponse:
        logger.warning("Invalid request body path=%s errors=%s", request.url.path, exc.errors())
        return PlainTextResponse("Invalid request body", status_code=400)

    @app.get("/jobs")
    async def list_jobs(
        request: Request,
        page: str | None = Query(default=None),
        page_size: str | None = Query(default=None, alias="pageSize"),
    ) -> Response:
        # servers may answer HEAD through GET routes; only GET lists jobs
        if request.method != "GET":
            raise HTTPException(status_code=404, detail="Not Found")
        resolved_page, resolved_size = resolve_paging(page, page_size)
        jobs = service.list_jobs(resolved_page, resolved_size)
        return _json_response([job.to_record() for job in jobs], options)

    @app.post("/jobs")
    async def create_job(payload: JobPayload) -> Response:
        try:
            job = service.create_job(title=payload.title, description=payload.description)
        except JobValidationError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _json_response(job.to_record(), options, status_code=201)

    @app.put("/jobs/{job_id}")
    async def update_job(job_id: str, request: Request) -> Response:
        try:
            parsed_id = parse_job_id(job_id)
            service.get_job(parsed_id)
            payload = await read_job_payload(request, options)
            job = service.update_job(
                parsed_id,
                title=payload.title,
                description=payload.description,
            )
        except MalformedRequestError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except JobNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except JobValidationError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _json_response(job.to_record(), options)

    @app.delete("/jobs/{job_id}")
    async def delete_job(job_id: str) -> PlainTextResponse:
        try:
            service.delete_job(parse_job_id(job_id))
        except MalformedRequestError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except JobNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return PlainTextResponse("Job deleted")

    return app
