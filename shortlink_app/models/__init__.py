"""
Data models for the URL shortener.

A single record type is persisted: the short code → long URL mapping.
"""

from .mapping import URLMapping

__all__ = ["URLMapping"]
