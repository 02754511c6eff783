"""Middleware: request ID injection, access logging.

``RequestIDMiddleware`` is the outermost application middleware. It turns
unhandled exceptions into the 500 envelope itself, while the request id is
still bound, so that the error log and the response both carry the id.
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from outcome_envelope.core.error_handlers import unhandled_exception_handler
from outcome_envelope.core.logging import request_id_var

logger = logging.getLogger("outcome_envelope.access")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add a unique X-Request-ID header to every request/response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                response = await unhandled_exception_handler(request, exc)
        finally:
            request_id_var.reset(token)
        response.headers["X-Request-ID"] = request_id
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of every request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.monotonic()
        try:
            response = await call_next(request)
        except Exception:
            self._log(request, 500, start)
            raise
        self._log(request, response.status_code, start)
        return response

    @staticmethod
    def _log(request: Request, status_code: int, start: float) -> None:
        elapsed_ms = round((time.monotonic() - start) * 1000, 1)
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            status_code,
            elapsed_ms,
        )
