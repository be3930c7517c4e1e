# ABOUTME: Logging middleware for request/response tracking
# ABOUTME: Logs method, path, status, and response time for every request

import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log request/response metrics.

    This middleware captures:
    - Response time in milliseconds
    - Response status code
    - Adds an x-response-time-ms header to the response
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        response_time_ms = round((time.time() - start_time) * 1000, 2)
        response.headers["x-response-time-ms"] = str(response_time_ms)

        logger.info(
            "%s %s -> %s (%.2fms)",
            request.method,
            request.url.path,
            response.status_code,
            response_time_ms,
        )

        return response
