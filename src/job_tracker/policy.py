from __future__ import annotations

import logging
import threading

from .errors import validate_timeout

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 15000


class TimeoutPolicy:
    """Process-wide default timeout applied to newly created jobs."""

    def __init__(self, default_timeout: int = DEFAULT_TIMEOUT_MS) -> None:
        self._lock = threading.Lock()
        self._default = validate_timeout(default_timeout)

    @property
    def default_timeout(self) -> int:
        with self._lock:
            return self._default

    def set_default(self, timeout: int) -> None:
        value = validate_timeout(timeout)
        with self._lock:
            previous, self._default = self._default, value
        logger.info("default timeout changed %dms -> %dms", previous, value)
