"""
FastAPI application entry point.
Mounts the single proxy route behind the recovery boundary; run() serves it with uvicorn.
"""

import logging
import sys

import uvicorn
from fastapi import FastAPI

from search_proxy.api.router import api_router
from search_proxy.config import get_settings
from search_proxy.core.dependencies import get_logger
from search_proxy.core.recovery import RecoveryMiddleware


def configure_logging(level: str) -> None:
    """Plain text to stdout. No-op when the root logger is already configured."""
    logging.basicConfig(
        stream=sys.stdout,
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(
        title=settings.app_name,
        description="Forwards search requests to an Elasticsearch cluster and relays the raw response.",
        version="1.0.0",
    )

    app.add_middleware(RecoveryMiddleware, logger=get_logger())

    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point. uvicorn logs and exits non-zero if the port cannot be bound."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
