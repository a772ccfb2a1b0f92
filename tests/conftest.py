from __future__ import annotations

import pytest

from job_tracker.policy import TimeoutPolicy
from job_tracker.store import JobStore


class FakeClock:
    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> JobStore:
    return JobStore(TimeoutPolicy(1000), clock=clock)
