"""Request logging middleware with request-id correlation."""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("primekart.request")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Assigns a request id, echoes it back, and logs one line per request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            # The fallback handler answers outside this middleware
            self._log(request, 500, started, request_id)
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        self._log(request, response.status_code, started, request_id)
        return response

    @staticmethod
    def _log(request: Request, status_code: int, started: float, request_id: str) -> None:
        logger.info(
            "%s %s status=%s duration_ms=%.1f request_id=%s",
            request.method,
            request.url.path,
            status_code,
            (time.perf_counter() - started) * 1000,
            request_id,
        )
