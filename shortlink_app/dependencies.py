"""
FastAPI dependencies for dependency injection.

The application context is built once at startup and stored on
``app.state``; these dependencies hand it (or pieces of it) to routes.

Pattern: Dependency Injection
- No module-level store or config globals
- Easy to test (build the app around an in-memory store)
"""

from fastapi import Depends, Request

from shortlink_app.context import AppContext
from shortlink_app.services.url_service import URLService


def get_context(request: Request) -> AppContext:
    """Return the context attached to the running app"""
    return request.app.state.context


def get_url_service(context: AppContext = Depends(get_context)) -> URLService:
    """
    Get URLService with the store and domain injected.

    Controllers depend on the service; the service depends on the store.
    """
    return URLService(
        store=context.store,
        domain_name=context.settings.domain_name,
        scheme=context.settings.short_url_scheme,
    )
