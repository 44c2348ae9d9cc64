"""
Application factory.

Builds the FastAPI app, wires middleware, exception handlers and routers.
Route order matters: /health first, then create (POST), then redirect
(GET) and the method-not-allowed catch-all, all of which match any path.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortlink_app.api import health, redirect, urls
from shortlink_app.config import load_settings
from shortlink_app.context import AppContext
from shortlink_app.core.exceptions import URLShortenerException
from shortlink_app.middleware import CORSHeadersMiddleware, LoggingMiddleware, configure_logging

logger = logging.getLogger("shortlink.app")

APP_NAME = "Shortlink"
APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Build the context from the environment when none was injected.

    Raising here aborts ASGI startup, so a server launched with missing
    configuration never starts accepting requests.
    """
    if getattr(app.state, "context", None) is None:
        settings = load_settings()
        configure_logging(settings.log_level)
        app.state.context = AppContext.from_settings(settings)
        logger.info("Context built from environment")
    yield


async def url_shortener_exception_handler(request: Request, exc: URLShortenerException):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        context: Prebuilt context (settings + store). When omitted, it is
            built from environment settings during startup.
    """
    app = FastAPI(
        title=APP_NAME,
        version=APP_VERSION,
        description="A hash-addressed URL shortener backed by a key-value store",
        lifespan=lifespan,
        # Every GET path is a short code lookup
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.context = context

    app.add_exception_handler(URLShortenerException, url_shortener_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Added last runs first: logging wraps CORS, so preflights are logged too
    app.add_middleware(CORSHeadersMiddleware, exempt_paths=("/health",))
    app.add_middleware(LoggingMiddleware)

    ######## Include routers
    app.add_route("/health", health.health_check, include_in_schema=False)
    app.include_router(urls.router)
    app.include_router(redirect.router)

    return app
