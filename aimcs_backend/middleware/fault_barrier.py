"""
Fault barrier
Innermost middleware turning unhandled exceptions into the 500 response, so
fault replies still pass through CORS, access logging and security headers
"""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

from ..utils.errors import fault_response

logger = structlog.get_logger(__name__)


class FaultBarrierMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, expose_details: bool):
        super().__init__(app)
        self.expose_details = expose_details

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "Unhandled exception",
                error=str(exc),
                method=request.method,
                path=request.url.path,
                exc_info=True,
            )
            return fault_response(exc, self.expose_details)
