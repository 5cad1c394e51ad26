"""
crudsuite — Request Logging Middleware
========================================

What:  One access-log line per HTTP request, with status and duration.
When:  Runs inside RequestIDMiddleware, so the request ID is available.

Log line:
    POST /api/projects/65f.../tasks 201 3.2ms [1f0c9a2e] from 127.0.0.1

Level follows the status class:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from crudsuite.middleware.request_id import request_id_var

logger = logging.getLogger("crudsuite.access")

# Probed every few seconds by container health checks
SKIPPED_PATHS = {"/health"}


def level_for_status(status: int) -> int:
    """Maps an HTTP status code to the log level of its access line."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status, duration and client address."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        status = response.status_code

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
