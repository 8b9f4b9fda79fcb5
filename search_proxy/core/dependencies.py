"""
FastAPI dependencies - injection for logger and search backend (SOLID: Dependency Inversion).
Tests override get_backend_factory / get_logger via app.dependency_overrides.
"""

import logging
from typing import Annotated

from fastapi import Depends

from search_proxy.search.elasticsearch_client import open_backend
from search_proxy.services.search_proxy import BackendFactory, SearchProxyService


def get_logger() -> logging.Logger:
    return logging.getLogger("search_proxy")


def get_backend_factory() -> BackendFactory:
    """Real Elasticsearch clients; one per request."""
    return open_backend


def get_search_proxy(
    backend_factory: Annotated[BackendFactory, Depends(get_backend_factory)],
    logger: Annotated[logging.Logger, Depends(get_logger)],
) -> SearchProxyService:
    return SearchProxyService(backend_factory=backend_factory, logger=logger)


SearchProxy = Annotated[SearchProxyService, Depends(get_search_proxy)]
