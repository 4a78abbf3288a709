"""
Access log
One structured event per request with method, path, status and latency
"""

import time

from starlette.requests import Request

from ..utils.logger import RequestLogger

request_logger = RequestLogger()


def _record(request: Request, status_code: int, started: float) -> None:
    request_logger.log_request(
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        duration_ms=(time.perf_counter() - started) * 1000,
        client_ip=request.client.host if request.client else "unknown",
        user_agent=request.headers.get("user-agent"),
    )


async def log_requests(request: Request, call_next):
    """Log every request once the downstream chain has answered"""
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        _record(request, 500, started)
        raise

    _record(request, response.status_code, started)
    return response
