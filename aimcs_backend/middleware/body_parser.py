"""
Body parser
Reads the request body once, bounded by a size limit, and decodes JSON and
form-encoded payloads onto request.state.body
"""

import json
from typing import Any, Dict, List, Union
from urllib.parse import parse_qsl

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

from ..utils.errors import ClientInputError, PayloadTooLargeError, error_response

FormValue = Union[str, List[str]]


class BodyParserMiddleware(BaseHTTPMiddleware):
    """Decode request bodies before they reach the router"""

    def __init__(self, app: ASGIApp, max_body_bytes: int):
        super().__init__(app)
        self.max_body_bytes = max_body_bytes

    async def dispatch(self, request: Request, call_next):
        try:
            raw = await self._read_body(request)
            request.state.body = parse_body(raw, request.headers.get("content-type", ""))
        except (ClientInputError, PayloadTooLargeError) as e:
            return error_response(e)

        return await call_next(request)

    async def _read_body(self, request: Request) -> bytes:
        declared = request.headers.get("content-length")
        if declared and declared.isdigit() and int(declared) > self.max_body_bytes:
            raise PayloadTooLargeError("Request body too large")

        chunks = []
        size = 0
        async for chunk in request.stream():
            size += len(chunk)
            if size > self.max_body_bytes:
                raise PayloadTooLargeError("Request body too large")
            chunks.append(chunk)
        return b"".join(chunks)


def parse_body(raw: bytes, content_type: str) -> Any:
    """
    Decode a raw body according to its content type

    Unknown content types and empty bodies yield an empty mapping.
    """
    media_type = content_type.split(";", 1)[0].strip().lower()

    if media_type == "application/json" or media_type.endswith("+json"):
        return _parse_json(raw)
    if media_type == "application/x-www-form-urlencoded":
        return _parse_form(raw)
    return {}


def _parse_json(raw: bytes) -> Any:
    if not raw.strip():
        return {}
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError):
        raise ClientInputError("Invalid JSON in request body") from None


def _parse_form(raw: bytes) -> Dict[str, FormValue]:
    try:
        pairs = parse_qsl(raw.decode("utf-8"), keep_blank_values=True, strict_parsing=False)
    except UnicodeDecodeError:
        raise ClientInputError("Invalid form body") from None

    fields: Dict[str, FormValue] = {}
    for key, value in pairs:
        if key not in fields:
            fields[key] = value
        elif isinstance(fields[key], list):
            fields[key].append(value)
        else:
            fields[key] = [fields[key], value]
    return fields
