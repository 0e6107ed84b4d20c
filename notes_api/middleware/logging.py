"""
Notes API: Access Log Middleware
=================================

What:  One line per API call naming the note operation that ran.
How:   After the router has handled the request, the matched route and its
       path parameters are read back from the ASGI scope, giving lines like:

           update_note note=3f2a… -> 404 (0.4ms)
           list_notes q='shop' -> 200 (0.2ms)
           GET /api/unknown -> 404 (0.1ms)

       The level follows the status class: 5xx → ERROR, 4xx → WARNING,
       everything else → INFO. The request id is added by RequestIDLogFilter.

Health checks (GET /) and the documentation pages are not logged. Request
bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("notes_api.access")

QUIET_PATHS = {"/", "/docs", "/redoc", "/openapi.json", "/docs/oauth2-redirect"}


def describe_call(request: Request) -> str:
    """Operation name plus the note id / search term the client sent."""
    route = request.scope.get("route")
    if route is None:
        return f"{request.method} {request.url.path}"

    parts = [getattr(route, "name", request.url.path)]
    note_id = request.scope.get("path_params", {}).get("note_id")
    if note_id is not None:
        parts.append(f"note={note_id}")
    q = request.query_params.get("q")
    if q:
        parts.append(f"q={q!r}")
    return " ".join(parts)


def level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.log(
            level_for(response.status_code),
            "%s -> %d (%.1fms)",
            describe_call(request),
            response.status_code,
            elapsed_ms,
        )
        return response
