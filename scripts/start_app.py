#!/usr/bin/env python3
"""Serve the Inkwell API with uvicorn."""

import sys

import logfire
import uvicorn

from inkwell.config import Settings
from inkwell.util.logging import setup_logging
from inkwell.util.observability import configure_logfire

APP_PATH = "inkwell.interface.api.app:app"


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    # Must run before uvicorn imports APP_PATH, which builds the app
    configure_logfire(settings)

    logfire.info(
        "Starting Inkwell API",
        port=settings.port,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            APP_PATH,
            host="0.0.0.0",  # noqa: S104
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Inkwell API stopped with an error")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
