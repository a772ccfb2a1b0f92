from __future__ import annotations

from .errors import ErrorKind, InvalidTimeoutError, JobError, JobNotFoundError
from .models import JobRecord, JobStatus
from .policy import TimeoutPolicy
from .status import resolve
from .store import JobStore

__all__ = [
    "ErrorKind",
    "InvalidTimeoutError",
    "JobError",
    "JobNotFoundError",
    "JobRecord",
    "JobStatus",
    "JobStore",
    "TimeoutPolicy",
    "resolve",
]
