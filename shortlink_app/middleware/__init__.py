from .cors import CORS_HEADERS, CORSHeadersMiddleware
from .logging import LoggingMiddleware, configure_logging

__all__ = [
    "CORS_HEADERS",
    "CORSHeadersMiddleware",
    "LoggingMiddleware",
    "configure_logging",
]
