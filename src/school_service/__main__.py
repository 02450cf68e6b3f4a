"""Entrypoint: python -m school_service"""
from __future__ import annotations

import uvicorn

from school_service.api.middleware.request_context import configure_logging
from school_service.config import settings


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "school_service.app:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
        log_config=None,
    )


if __name__ == "__main__":
    main()
