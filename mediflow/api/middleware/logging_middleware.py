"""
Request logging middleware for the clinic API.

Binds a RequestContext (correlation id plus the appointment the path
refers to, if any) for the duration of each request, logs the request
line tagged with both, and returns the correlation id to the caller.
"""

import logging
import re
import time
import uuid
from collections.abc import Callable
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from mediflow.core.request_context import RequestContext, reset_request_context, set_request_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# /appointments/{id} and /reminders/appointments/{id}[/schedule]
_APPOINTMENT_PATH = re.compile(r"/appointments/(\d+)(?:/|$)")


def appointment_id_from_path(path: str) -> int | None:
    """Appointment id addressed by a request path, if any."""
    match = _APPOINTMENT_PATH.search(path)
    return int(match.group(1)) if match else None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Per-request context binding and access logging.

    A caller-supplied X-Correlation-ID header is kept; otherwise a short
    random id is generated. Health checks are not logged but still get a
    correlation id.
    """

    QUIET_PATHS: tuple[str, ...] = ("/health", "/favicon.ico")

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        path = request.url.path
        context = RequestContext(
            correlation_id=request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:8],
            appointment_id=appointment_id_from_path(path),
        )
        request.state.correlation_id = context.correlation_id
        token = set_request_context(context)

        try:
            if path.startswith(self.QUIET_PATHS):
                response = await call_next(request)
            else:
                response = await self._logged_call(request, call_next, context)
        finally:
            reset_request_context(token)

        response.headers[CORRELATION_HEADER] = context.correlation_id
        return response

    async def _logged_call(
        self,
        request: Request,
        call_next: Callable[[Request], Any],
        context: RequestContext,
    ) -> Response:
        tag = f"[{context.correlation_id}]"
        if context.appointment_id is not None:
            tag += f" appointment={context.appointment_id}"
        line = f"{request.method} {request.url.path}"

        logger.info(f"{tag} --> {line}")
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"{tag} <-- {line} failed after {_elapsed_ms(started):.2f}ms: {e}")
            raise

        elapsed = _elapsed_ms(started)
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(level, f"{tag} <-- {line} {response.status_code} in {elapsed:.2f}ms")

        response.headers["X-Response-Time-Ms"] = f"{elapsed:.2f}"
        return response


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000
