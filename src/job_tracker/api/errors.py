from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..errors import ErrorKind, JobError

logger = logging.getLogger(__name__)

STATUS_CODE_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 400,
    ErrorKind.INVALID_ARGUMENT: 400,
}


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def job_error_handler(request: Request, exc: JobError) -> JSONResponse:
    return JSONResponse(
        status_code=STATUS_CODE_BY_KIND.get(exc.kind, 400),
        content={
            "error": {"code": exc.kind.value, "message": exc.message},
            "request_id": _request_id(request),
        },
    )


def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "error": {"code": "VALIDATION_ERROR", "message": "Invalid request"},
            "details": exc.errors(),
            "request_id": _request_id(request),
        },
    )


def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "UNEXPECTED_ERROR",
                "message": f"An unexpected error occurred: {exc}",
            },
            "request_id": _request_id(request),
        },
    )
