"""
Gateway error types

Client-visible failures are raised as GatewayError subclasses and rendered
as {"error": message, ...}. Anything else is a fault and becomes a 500.
"""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

FAULT_ERROR = "Something went wrong!"
GENERIC_FAULT_MESSAGE = "Internal server error"


class GatewayError(Exception):
    """Base class for errors that map onto a JSON error response"""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None, **extra: Any):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, **self.extra}


class ClientInputError(GatewayError):
    """Missing or malformed client input"""

    status_code = 400


class PayloadTooLargeError(GatewayError):
    status_code = 413


class EndpointNotFoundError(GatewayError):
    status_code = 404

    def __init__(self, path: str):
        super().__init__("Endpoint not found", path=path)


class UpstreamTimeoutError(GatewayError):
    """A provider call exceeded its time budget"""

    status_code = 504

    def __init__(self, model: str):
        super().__init__("Upstream provider timed out", model=model)


def error_response(exc: GatewayError) -> JSONResponse:
    """Render a gateway error as a JSON response"""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def fault_response(exc: Exception, expose_details: bool) -> JSONResponse:
    """Render an unexpected exception without leaking internals in production"""
    if expose_details:
        message = str(exc) or exc.__class__.__name__
    else:
        message = GENERIC_FAULT_MESSAGE
    return JSONResponse(
        status_code=500,
        content={"error": FAULT_ERROR, "message": message},
    )
