"""
Search proxy service - one inbound request, one outbound search.
Flow: decode body -> pick client config -> open client -> encode query -> search -> translate result.
Design: backend factory and logger are injected; easy to test with fakes.
"""

import json
import logging
from typing import Callable

from elastic_transport import TransportError
from pydantic import ValidationError
from starlette.responses import PlainTextResponse, Response

from search_proxy.schemas.search import SearchRequest
from search_proxy.search.elasticsearch_client import (
    ClientConfig,
    ClientConfigError,
    SearchBackend,
    SearchResult,
    client_config_from_request,
    string_to_array,
)

BackendFactory = Callable[[ClientConfig], SearchBackend]

GENERIC_ERROR_BODY = "error in getting data"


def describe_transport_error(exc: TransportError) -> str:
    """Error text with the underlying cause, e.g. 'Connection error: ... Connection refused'."""
    cause = exc.errors[-1] if exc.errors else exc.__cause__
    detail = str(cause) if cause is not None else str(exc.message)
    summary = str(exc)
    if not detail or detail == summary:
        return summary
    return f"{summary}: {detail}"


class SearchProxyService:
    """Handles POST /elastic: forwards the query and relays the cluster's answer."""

    def __init__(self, backend_factory: BackendFactory, logger: logging.Logger):
        self.backend_factory = backend_factory
        self.logger = logger

    async def handle(self, raw_body: bytes) -> Response:
        try:
            body = SearchRequest.model_validate_json(raw_body)
        except ValidationError as e:
            self.logger.error("unable to decode request body :: %s", e)
            return PlainTextResponse(str(e), status_code=400)

        config = client_config_from_request(body)
        try:
            backend = self.backend_factory(config)
        except ClientConfigError as e:
            self.logger.error("unable to create es client object :: %s", e)
            return PlainTextResponse(str(e), status_code=500)

        try:
            return await self._search(backend, body)
        finally:
            await backend.close()

    async def _search(self, backend: SearchBackend, body: SearchRequest) -> Response:
        try:
            query_body = json.dumps(body.elasticquery).encode("utf-8")
        except (TypeError, ValueError) as e:
            self.logger.error("Error encoding elastic search query : %s", e)
            return PlainTextResponse(str(e), status_code=500)

        indices = string_to_array(body.index) if body.index else []
        sort = string_to_array(body.sort) if body.sort else []
        try:
            result = await backend.search(indices, query_body, sort, body.size)
        except TransportError as e:
            message = describe_transport_error(e)
            self.logger.error("Error getting response from elastic search cluster : %s", message)
            return PlainTextResponse(message, status_code=400)

        if result.is_error:
            self._log_remote_error(result)
            return Response(content=result.body, status_code=500, media_type="text/plain")

        try:
            decoded = json.loads(result.body)
            if not isinstance(decoded, dict):
                raise ValueError(f"expected a JSON object, got {type(decoded).__name__}")
        except ValueError as e:
            self.logger.error("Error parsing the response body of elastic search : %s", e)
            return PlainTextResponse(str(e), status_code=500)

        try:
            content = json.dumps(decoded)
        except (TypeError, ValueError) as e:
            self.logger.error("error in json marshaling :: %s", e)
            return PlainTextResponse(GENERIC_ERROR_BODY, status_code=500)
        return Response(content=content)

    def _log_remote_error(self, result: SearchResult) -> None:
        """Log error.type/error.reason when present; any other shape is logged as a parse failure."""
        try:
            error = json.loads(result.body)["error"]
            self.logger.error("[%s] %s: %s", result.status, error["type"], error["reason"])
        except (ValueError, KeyError, TypeError) as e:
            self.logger.error("Error parsing the response body: %r", e)
