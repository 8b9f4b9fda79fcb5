"""
API router - the proxy exposes a single route, POST /elastic.
"""

from fastapi import APIRouter

from search_proxy.api.endpoints import elastic

api_router = APIRouter()

api_router.include_router(elastic.router, prefix="/elastic", tags=["elastic"])
