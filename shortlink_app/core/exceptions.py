"""
Custom exceptions for the URL shortener.

Every exception carries the HTTP status code and the plain-text message
sent back to the caller. The exception handler registered in
``create_app`` renders them; nothing below the router builds responses.
"""

from typing import Optional


class URLShortenerException(Exception):
    """Base exception for the URL shortener service."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(URLShortenerException):
    """Raised when the request is malformed (bad JSON, empty URL, empty code)."""

    status_code = 400
    default_message = "Bad request"


class ShortCodeNotFoundError(URLShortenerException):
    """Raised when no mapping exists for a short code."""

    status_code = 404
    default_message = "URL not found"

    def __init__(self, short_code: str, message: Optional[str] = None):
        self.short_code = short_code
        super().__init__(message)


class MethodNotAllowedError(URLShortenerException):
    """Raised for HTTP methods the router does not dispatch."""

    status_code = 405
    default_message = "Method not allowed"


class StoreError(URLShortenerException):
    """
    Raised when the key-value backend fails.

    Covers unreachable backend, rejected reads/writes and items that
    cannot be decoded into a mapping. Distinct from "not found".
    """

    status_code = 500
    default_message = "Storage backend error"

    def __init__(self, message: Optional[str] = None, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(message)


class RequestBodyError(URLShortenerException):
    """Raised when the request body cannot be read from the connection."""

    status_code = 500
    default_message = "Error reading request body"
