from __future__ import annotations

import pytest

from job_tracker.models import JobRecord, JobStatus
from job_tracker.status import derive, resolve


def _record(timeout: int, created_at: int = 0) -> JobRecord:
    return JobRecord(
        job_id="job-1",
        status=JobStatus.PENDING,
        created_at=created_at,
        timeout=timeout,
    )


@pytest.mark.parametrize("timeout", [1, 2, 1000, 15000])
def test_boundaries(timeout: int) -> None:
    cases = [
        (0, JobStatus.PENDING),
        (timeout, JobStatus.PENDING),
        (timeout + 1, JobStatus.COMPLETED),
        (2 * timeout, JobStatus.COMPLETED),
        (2 * timeout + 1, JobStatus.ERROR),
    ]
    for elapsed, expected in cases:
        assert derive(elapsed, timeout) is expected
        assert resolve(_record(timeout), elapsed) is expected


def test_pending_is_not_committed() -> None:
    rec = _record(1000)
    assert resolve(rec, 500) is JobStatus.PENDING
    assert rec.status is JobStatus.PENDING


def test_transition_is_committed_to_record() -> None:
    rec = _record(1000)
    assert resolve(rec, 1500) is JobStatus.COMPLETED
    assert rec.status is JobStatus.COMPLETED


@pytest.mark.parametrize(
    "first_now,expected",
    [(1001, JobStatus.COMPLETED), (2001, JobStatus.ERROR)],
)
def test_terminal_status_is_absorbing(first_now: int, expected: JobStatus) -> None:
    rec = _record(1000)
    assert resolve(rec, first_now) is expected

    for later in (first_now, 2000, 2001, 10_000, 10**9):
        assert resolve(rec, later) is expected


def test_clock_going_backwards_does_not_revert() -> None:
    rec = _record(1000)
    resolve(rec, 1500)
    assert resolve(rec, 0) is JobStatus.COMPLETED


def test_elapsed_uses_created_at() -> None:
    rec = _record(1000, created_at=5000)
    assert resolve(rec, 6000) is JobStatus.PENDING
    assert resolve(rec, 6001) is JobStatus.COMPLETED
