from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class JobError(Exception):
    """Base error raised by the job core.

    ``kind`` tells the transport what went wrong; choosing a status code for
    it is left to the caller.
    """

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind


class JobNotFoundError(JobError, LookupError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, job_id: str) -> None:
        super().__init__(f"Invalid jobId: {job_id}")
        self.job_id = job_id


class InvalidTimeoutError(JobError, ValueError):
    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, timeout: object) -> None:
        super().__init__(f"Timeout must be greater than zero (got {timeout!r}).")
        self.timeout = timeout


def validate_timeout(timeout: object) -> int:
    # bool is an int subclass; True would silently mean 1 ms
    if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
        raise InvalidTimeoutError(timeout)
    return timeout
