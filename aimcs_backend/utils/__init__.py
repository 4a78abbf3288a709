"""
Shared utilities for the AIMCS gateway
"""

from .clock import utc_timestamp
from .errors import (
    ClientInputError,
    EndpointNotFoundError,
    GatewayError,
    PayloadTooLargeError,
    UpstreamTimeoutError,
)
from .logger import RequestLogger, get_logger, setup_logging

__all__ = [
    "utc_timestamp",
    "ClientInputError",
    "EndpointNotFoundError",
    "GatewayError",
    "PayloadTooLargeError",
    "UpstreamTimeoutError",
    "RequestLogger",
    "get_logger",
    "setup_logging",
]
