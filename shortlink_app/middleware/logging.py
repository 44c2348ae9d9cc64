"""
Logging middleware for request/response logging.

Logs one line per request:
- Request method and path
- Response status code
- Processing time
- Client IP address (X-Forwarded-For aware)
"""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("shortlink.access")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the "shortlink" logger tree once at startup.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
    """
    app_logger = logging.getLogger("shortlink")
    app_logger.setLevel(level.upper())

    if not app_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        app_logger.addHandler(handler)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses."""

    async def dispatch(self, request: Request, call_next):
        client_ip = self._get_client_ip(request)
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time

        # Format: METHOD PATH STATUS_CODE PROCESS_TIME_MS CLIENT_IP
        logger.info(
            "%s %s %s %.2fms IP:%s",
            request.method,
            request.url.path,
            response.status_code,
            process_time * 1000,
            client_ip,
        )
        return response

    def _get_client_ip(self, request: Request) -> str:
        """
        Extract client IP address from request.

        X-Forwarded-For can contain several addresses; the first one is the
        original client.
        """
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        return request.client.host if request.client else "unknown"
