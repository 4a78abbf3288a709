"""
CORS policy
Allow-list CORS where disallowed origins are answered without CORS headers
instead of being rejected
"""

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response
from starlette.types import Receive, Scope, Send


class AllowListCORSMiddleware(CORSMiddleware):
    """
    Starlette's CORSMiddleware with allow-list semantics:

    - every OPTIONS request is answered here with 204 and never routed;
    - allowed origins get the usual CORS headers;
    - disallowed or missing origins get no CORS headers at all, and the
      browser enforces the policy.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        origin = headers.get("origin")

        if scope["method"] == "OPTIONS":
            response = self.preflight_response(request_headers=headers)
            await response(scope, receive, send)
            return

        if origin is None or not self.is_allowed_origin(origin=origin):
            await self.app(scope, receive, send)
            return

        await self.simple_response(scope, receive, send, request_headers=headers)

    def preflight_response(self, request_headers: Headers) -> Response:
        origin = request_headers.get("origin")
        if origin is None or not self.is_allowed_origin(origin=origin):
            return Response(status_code=204, headers={"Vary": "Origin"})

        headers = dict(self.preflight_headers)
        headers["Access-Control-Allow-Origin"] = origin
        return Response(status_code=204, headers=headers)
