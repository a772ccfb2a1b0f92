"""Time-driven status derivation for job records.

A pending job stays pending while ``elapsed <= timeout``, becomes completed
once ``timeout < elapsed <= 2 * timeout`` and errors when
``elapsed > 2 * timeout``. Completed and error are absorbing: once written to
the record they are returned as-is, whatever the clock says.
"""

from __future__ import annotations

import logging

from .models import JobRecord, JobStatus

logger = logging.getLogger(__name__)


def derive(elapsed: int, timeout: int) -> JobStatus:
    """Status a pending job would have after ``elapsed`` ms."""
    if elapsed <= timeout:
        return JobStatus.PENDING
    if elapsed <= 2 * timeout:
        return JobStatus.COMPLETED
    return JobStatus.ERROR


def resolve(record: JobRecord, now: int) -> JobStatus:
    """Re-evaluate ``record`` at ``now`` and commit any transition to it.

    Caller must hold ``record.lock`` when the record is shared.
    """
    if record.status.is_terminal:
        return record.status

    new_status = derive(record.elapsed(now), record.timeout)
    if new_status is not JobStatus.PENDING:
        record.status = new_status
        logger.info(
            "job %s transitioned to %s (elapsed=%dms timeout=%dms)",
            record.job_id,
            new_status.value,
            record.elapsed(now),
            record.timeout,
        )
    return record.status
