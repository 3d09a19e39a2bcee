"""
Request correlation and access logging.

X-Request-ID from the caller is reused, otherwise a new one is generated. The
ID is attached to every log event of the request, echoed on the response and
cleared once the request is done.
"""

from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ...infrastructure.logging import (
    Timer,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger()


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        token = set_correlation_id(request.headers.get(REQUEST_ID_HEADER) or str(uuid4()))
        try:
            with structlog.contextvars.bound_contextvars(
                correlation_id=get_correlation_id(),
                method=request.method,
                path=request.url.path,
            ):
                with Timer() as t:
                    response = await call_next(request)
                logger.info("Request completed", status_code=response.status_code, duration_ms=t.duration_ms)

            response.headers[REQUEST_ID_HEADER] = get_correlation_id()
        finally:
            reset_correlation_id(token)
        return response
