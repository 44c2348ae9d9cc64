"""
CORS middleware.

Starlette's CORSMiddleware only decorates requests that carry an Origin
header and answers preflights only when Access-Control-Request-Method is
present. This service instead stamps a fixed set of CORS headers on every
response outside the exempt paths, and answers every OPTIONS request with
204 before routing.
"""

from typing import Callable, Iterable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS, PUT, DELETE",
    "Access-Control-Allow-Headers": (
        "Accept, Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization"
    ),
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Apply the CORS policy to every non-exempt path."""

    def __init__(self, app, exempt_paths: Iterable[str] = ("/health",)):
        super().__init__(app)
        self.exempt_paths = frozenset(exempt_paths)

    async def dispatch(self, request: Request, call_next: Callable):
        if request.url.path in self.exempt_paths:
            return await call_next(request)

        # Preflight: answer here, never reach the routes or the store
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
