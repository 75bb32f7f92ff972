"""Entrypoint: python -m gearup_service"""
from __future__ import annotations

import uvicorn

from gearup_service.config import settings
from gearup_service.logging_setup import configure_logging


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "gearup_service.app:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        log_level=settings.LOG_LEVEL,
    )


if __name__ == "__main__":
    main()
