"""
RecipeBox Backend: Request ID Middleware
==========================================

What:  Assigns a correlation ID to each request and echoes it in the response.
How:   Reuses a client-supplied X-Request-ID or generates a short UUID, stores
       it in a ContextVar (read by loggers and exception handlers) and in
       `request.state`, then sets the X-Request-ID response header.
When:  Outermost middleware, so every later log line can carry the ID.

Every error body includes the same ID, which lets a client report a failing
call and have it matched to the server log entry.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own value
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attaches a request ID to the context, the request state and the response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
