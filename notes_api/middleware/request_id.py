"""
Notes API: Request ID Middleware
=================================

What:  Tags each request with an id, echoes it as X-Request-ID, and stamps it
       onto every log record emitted while the request is being served.
How:   A client-supplied X-Request-ID is reused when it is a short token
       (letters, digits, '-', '_', '.'); anything else is replaced with a
       fresh 8-character hex id. The id lives in a ContextVar read by
       RequestIDLogFilter, so log lines from the service layer and the
       exception handlers carry it without passing it around.
"""

import logging
import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Echoed into response headers and log lines, so keep it short and printable
_CLIENT_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


def resolve_request_id(header_value) -> str:
    """Reuse a well-formed client id, otherwise mint a new one."""
    if header_value and _CLIENT_ID_PATTERN.match(header_value):
        return header_value
    return uuid.uuid4().hex[:8]


class RequestIDLogFilter(logging.Filter):
    """Adds `request_id` to every record, "-" outside of a request."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request_id_var.set(rid)

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
