from __future__ import annotations

import logging
import threading
import time
import uuid
from typing import Callable

from .errors import JobNotFoundError, validate_timeout
from .models import JobRecord, JobStatus
from .policy import TimeoutPolicy
from .status import resolve

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


class JobStore:
    """In-memory, thread-safe registry of job records.

    The map is guarded by a store-wide lock; status resolution and per-job
    timeout updates take the lock of the record they touch.
    """

    def __init__(
        self,
        policy: TimeoutPolicy | None = None,
        clock: Clock = wall_clock_ms,
    ) -> None:
        self.policy = policy or TimeoutPolicy()
        self._clock = clock
        self._lock = threading.Lock()
        self._jobs: dict[str, JobRecord] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)

    def now(self) -> int:
        return self._clock()

    def create(self) -> JobRecord:
        with self._lock:
            job_id = uuid.uuid4().hex
            while job_id in self._jobs:
                job_id = uuid.uuid4().hex
            rec = JobRecord(
                job_id=job_id,
                status=JobStatus.PENDING,
                created_at=self._clock(),
                timeout=self.policy.default_timeout,
            )
            self._jobs[job_id] = rec
        logger.info("job %s created (timeout=%dms)", rec.job_id, rec.timeout)
        return rec

    def get(self, job_id: str) -> JobRecord:
        with self._lock:
            rec = self._jobs.get(job_id)
        if rec is None:
            raise JobNotFoundError(job_id)
        return rec

    def status(self, job_id: str, now: int | None = None) -> JobStatus:
        rec = self.get(job_id)
        with rec.lock:
            return resolve(rec, self._clock() if now is None else now)

    def set_timeout(self, job_id: str, timeout: int) -> None:
        rec = self.get(job_id)
        value = validate_timeout(timeout)
        with rec.lock:
            if rec.status.is_terminal:
                # terminal jobs keep the timeout they finished with
                logger.debug(
                    "ignoring timeout update for %s job %s",
                    rec.status.value,
                    job_id,
                )
                return
            rec.timeout = value
        logger.info("job %s timeout set to %dms", job_id, value)

    def get_default_timeout(self) -> int:
        return self.policy.default_timeout

    def set_default_timeout(self, timeout: int) -> None:
        self.policy.set_default(timeout)
