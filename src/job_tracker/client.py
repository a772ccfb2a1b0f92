"""HTTP client for the job-tracker API.

Mirrors what a front end does with the service: start a job, then poll its
status at a fixed interval until it reaches a terminal state or the retry
budget runs out.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

import requests

from .models import JobStatus

logger = logging.getLogger(__name__)


class JobClientError(RuntimeError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class JobStatusClient:
    def __init__(
        self,
        base_url: str,
        poll_interval: float = 2.0,
        max_retries: int = 10,
        timeout: float = 8.0,
        session: Any = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.poll_interval = poll_interval
        self.max_retries = max_retries
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.job_id: str | None = None

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            r = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise JobClientError(f"{method} {url} failed: {e}") from e

        try:
            data = r.json()
        except ValueError:
            data = None

        if r.status_code != 200:
            err = data.get("error") if isinstance(data, dict) else None
            message = err.get("message") if isinstance(err, dict) else None
            raise JobClientError(
                message or f"{method} {url} returned {r.status_code}",
                status_code=r.status_code,
            )
        if not isinstance(data, dict):
            raise JobClientError(
                f"{method} {url} returned a non-JSON body",
                status_code=r.status_code,
            )
        return data

    @staticmethod
    def _field(data: dict[str, Any], key: str) -> str:
        if key not in data:
            raise JobClientError(f"response is missing '{key}'")
        return str(data[key])

    def start_job(self) -> str:
        data = self._request("GET", "/api/start")
        self.job_id = self._field(data, "jobId")
        return self.job_id

    def get_status(self, job_id: str | None = None) -> str:
        job_id = job_id or self.job_id
        if not job_id:
            raise JobClientError("Job ID is not set.")
        data = self._request("GET", f"/api/status/{job_id}")
        return self._field(data, "status")

    def set_global_timeout(self, timeout: int) -> str:
        data = self._request(
            "POST", "/api/set-global-timeout", params={"timeout": timeout}
        )
        return str(data.get("message", ""))

    def poll(
        self,
        job_id: str | None = None,
        on_status: Callable[[str], None] | None = None,
    ) -> str:
        """Poll until terminal; returns ``pending`` if retries run out."""
        retries = 0
        while True:
            status = self.get_status(job_id)
            if on_status is not None:
                on_status(status)
            if status in (JobStatus.COMPLETED.value, JobStatus.ERROR.value):
                return status
            if retries >= self.max_retries:
                logger.warning(
                    "gave up polling job %s after %d retries",
                    job_id or self.job_id,
                    retries,
                )
                return JobStatus.PENDING.value
            retries += 1
            time.sleep(self.poll_interval)
