"""Static CORS headers middleware.

Adds the allow-origin/methods/headers triple to every response, including
error responses and requests without an Origin header.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from shared.config import get_cors_allow_origin

ALLOWED_METHODS = "POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type"


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that stamps CORS headers on every response."""

    def __init__(self, app: ASGIApp, allow_origin: str | None = None) -> None:
        super().__init__(app)
        self.allow_origin = allow_origin or get_cors_allow_origin()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)

        response.headers["Access-Control-Allow-Origin"] = self.allow_origin
        response.headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
        response.headers["Access-Control-Allow-Headers"] = ALLOWED_HEADERS

        return response
