"""
Middleware chain

The chain is an ordered list, outermost first. Each element may answer the
request itself instead of calling the next one.
"""

from typing import List

from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware

from ..config import Settings
from .access_log import log_requests
from .body_parser import BodyParserMiddleware
from .cors import AllowListCORSMiddleware
from .fault_barrier import FaultBarrierMiddleware
from .security_headers import add_security_headers


def build_middleware(settings: Settings) -> List[Middleware]:
    """Build the gateway middleware chain for the given settings"""
    return [
        Middleware(BaseHTTPMiddleware, dispatch=add_security_headers),
        Middleware(BaseHTTPMiddleware, dispatch=log_requests),
        Middleware(BodyParserMiddleware, max_body_bytes=settings.max_body_bytes),
        Middleware(
            AllowListCORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=settings.cors_allow_methods,
            allow_headers=settings.cors_allow_headers,
            max_age=settings.cors_max_age,
        ),
        Middleware(FaultBarrierMiddleware, expose_details=settings.expose_error_details),
    ]


__all__ = [
    "build_middleware",
    "AllowListCORSMiddleware",
    "BodyParserMiddleware",
    "FaultBarrierMiddleware",
    "add_security_headers",
    "log_requests",
]
