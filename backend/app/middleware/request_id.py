"""
Users API Backend — Request ID Middleware
===========================================

What:  Assigns a correlation ID to each request and returns it in the response.
How:   Reuses the client's X-Request-ID header if sent, otherwise generates a
       short UUID; stores it in a ContextVar and in request.state.
Who:   Applied to every request via Starlette middleware.

The ID is read back by the access log and by the error handlers in main.py,
so every log line written while serving a request carries the same ID.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header when present
        2. Otherwise generate the first 8 characters of a UUID4
        3. Store in the ContextVar and in request.state.request_id
        4. Echo it back in the response header
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
