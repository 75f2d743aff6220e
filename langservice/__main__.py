"""Run the service with uvicorn: ``python -m langservice`` or ``langservice``."""

from __future__ import annotations

import uvicorn

from langservice.config import settings


def main() -> None:
    uvicorn.run(
        "langservice.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
