from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum


class JobStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self is not JobStatus.PENDING


@dataclass
class JobRecord:
    job_id: str
    status: JobStatus
    created_at: int  # epoch ms
    timeout: int  # ms
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def elapsed(self, now: int) -> int:
        return now - self.created_at
