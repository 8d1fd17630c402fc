"""
WEB 420 API: Request ID Middleware
==================================

What:  Assigns a correlation id to each request, exposes it to every log
       record, and returns it in the X-Request-ID response header.
How:   The id lives in a ContextVar, so concurrent requests on the same
       event loop each see their own value.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDFilter(logging.Filter):
    """
    Adds `request_id` to every log record ("-" outside a request) so the
    root formatter can include it.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("") or "-"
        return True


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Uses the client's X-Request-ID when present, otherwise generates an
    8-character id from a UUID4.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        # Not reset afterwards: the catch-all 500 handler runs outside this
        # middleware and still reads the id. Each request has its own context.
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
