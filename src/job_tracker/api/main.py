from __future__ import annotations

import uvicorn

from ..log import configure_logging
from ..settings import Settings


def main(settings: Settings | None = None) -> None:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(
        "job_tracker.api.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
