from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from ..errors import JobError
from ..log import configure_logging
from ..policy import TimeoutPolicy
from ..settings import Settings
from ..store import JobStore
from .errors import (
    job_error_handler,
    unexpected_error_handler,
    validation_error_handler,
)
from .middleware import request_id_middleware
from .schemas import (
    GlobalTimeoutResponse,
    GlobalTimeoutUpdated,
    JobResponse,
    JobTimeoutResponse,
)

logger = logging.getLogger(__name__)


def get_store(request: Request) -> JobStore:
    return request.app.state.store


def create_app(
    store: JobStore | None = None, settings: Settings | None = None
) -> FastAPI:
    settings = settings or Settings.from_env()
    if store is None:
        store = JobStore(TimeoutPolicy(settings.default_timeout_ms))

    app = FastAPI(title="job-tracker API", version="0.1.0")
    app.state.store = store

    app.add_exception_handler(JobError, job_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
    app.middleware("http")(request_id_middleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    def _start_job(request: Request, store: JobStore) -> JobResponse:
        rec = store.create()
        return JobResponse(
            job_id=rec.job_id,
            status=rec.status,
            request_id=request.state.request_id,
        )

    @app.post("/api/jobs", response_model=JobResponse)
    def api_create_job(
        request: Request, store: JobStore = Depends(get_store)
    ) -> JobResponse:
        return _start_job(request, store)

    @app.get("/api/start", response_model=JobResponse)
    def api_start_job(
        request: Request, store: JobStore = Depends(get_store)
    ) -> JobResponse:
        return _start_job(request, store)

    def _job_status(job_id: str, request: Request, store: JobStore) -> JobResponse:
        return JobResponse(
            job_id=job_id,
            status=store.status(job_id),
            request_id=request.state.request_id,
        )

    @app.get("/api/status/{job_id}", response_model=JobResponse)
    def api_status(
        job_id: str, request: Request, store: JobStore = Depends(get_store)
    ) -> JobResponse:
        return _job_status(job_id, request, store)

    @app.get("/api/jobs/{job_id}", response_model=JobResponse)
    def api_job(
        job_id: str, request: Request, store: JobStore = Depends(get_store)
    ) -> JobResponse:
        return _job_status(job_id, request, store)

    @app.put("/api/jobs/{job_id}/timeout", response_model=JobTimeoutResponse)
    def api_set_job_timeout(
        job_id: str,
        request: Request,
        timeout: int = Query(..., description="milliseconds"),
        store: JobStore = Depends(get_store),
    ) -> JobTimeoutResponse:
        store.set_timeout(job_id, timeout)
        return JobTimeoutResponse(
            job_id=job_id,
            timeout=store.get(job_id).timeout,
            request_id=request.state.request_id,
        )

    @app.get("/api/global-timeout", response_model=GlobalTimeoutResponse)
    def api_global_timeout(
        request: Request, store: JobStore = Depends(get_store)
    ) -> GlobalTimeoutResponse:
        return GlobalTimeoutResponse(
            timeout=store.get_default_timeout(),
            request_id=request.state.request_id,
        )

    @app.post("/api/set-global-timeout", response_model=GlobalTimeoutUpdated)
    def api_set_global_timeout(
        request: Request,
        timeout: int = Query(..., description="milliseconds"),
        store: JobStore = Depends(get_store),
    ) -> GlobalTimeoutUpdated:
        store.set_default_timeout(timeout)
        return GlobalTimeoutUpdated(
            timeout=store.get_default_timeout(),
            request_id=request.state.request_id,
        )

    return app


_settings = Settings.from_env()
configure_logging(_settings.log_level)
app = create_app(settings=_settings)
