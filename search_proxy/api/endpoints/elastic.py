"""
Elastic endpoint - forwards a caller-supplied query to Elasticsearch.
The body is read raw so decode errors map to 400 (not FastAPI's 422).
"""

from fastapi import APIRouter, Request, Response

from search_proxy.core.dependencies import SearchProxy

router = APIRouter()


@router.post("")
async def elastic_search(request: Request, proxy: SearchProxy) -> Response:
    """Run the posted elasticquery against the given (or default) cluster and relay the result."""
    raw_body = await request.body()
    return await proxy.handle(raw_body)
