from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("job_board.request")


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Logs every request and turns unhandled errors into a plain-text 500."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.perf_counter()
        method = request.method
        path = request.url.path
        try:
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000.0
            logger.exception(
                "method=%s path=%s status=500 duration_ms=%.2f UNHANDLED",
                method,
                path,
                duration_ms,
            )
            return PlainTextResponse(f"Internal Server Error: {exc}", status_code=500)

        duration_ms = (time.perf_counter() - start) * 1000.0
        logger.info(
            "method=%s path=%s status=%s duration_ms=%.2f",
            method,
            path,
            response.status_code,
            duration_ms,
        )
        return response


def register_request_logging(app: FastAPI) -> None:
    app.add_middleware(RequestLogMiddleware)
