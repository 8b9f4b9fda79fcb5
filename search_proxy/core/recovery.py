"""
Recovery middleware - per-request error boundary.
Any exception escaping a route is logged with its stack and answered with an empty 500;
the server keeps serving later requests.
"""

import logging
import traceback

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp


class RecoveryMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, logger: logging.Logger | None = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger(__name__)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            self.logger.error("%r", exc)
            self.logger.error("%s", traceback.format_exc())
            return Response(status_code=500)
