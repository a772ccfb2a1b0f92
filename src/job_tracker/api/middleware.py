from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response

from .errors import unexpected_error_handler

REQUEST_ID_HEADER = "X-Request-Id"

logger = logging.getLogger(__name__)


async def request_id_middleware(request: Request, call_next: Callable) -> Response:
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

    # endpoints and error handlers read it from request.state
    request.state.request_id = request_id

    started = time.perf_counter()
    try:
        response: Response = await call_next(request)
    except Exception as e:
        # unhandled errors are otherwise answered outside this middleware
        response = unexpected_error_handler(request, e)
    response.headers[REQUEST_ID_HEADER] = request_id
    logger.info(
        "%s %s -> %d (%.1fms) request_id=%s",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - started) * 1000.0,
        request_id,
    )
    return response
