from fastapi import Request
from fastapi.responses import JSONResponse

from shortlink_app.schemas.url import HealthResponse


async def health_check(request: Request) -> JSONResponse:
    """
    Health check endpoint. Does not touch the store.

    Mounted with ``app.add_route`` and no method list, so every method
    (including TRACE and non-standard ones) reaches it.
    """
    return JSONResponse(HealthResponse().model_dump())
