from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Attach one stream handler to the package logger (idempotent)."""
    root = logging.getLogger("job_tracker")
    root.setLevel(level)
    if not any(getattr(h, "_job_tracker", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._job_tracker = True  # type: ignore[attr-defined]
        root.addHandler(handler)
