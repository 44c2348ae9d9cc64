from fastapi import APIRouter, Depends, Request, status
from starlette.requests import ClientDisconnect

from shortlink_app.core.exceptions import RequestBodyError
from shortlink_app.dependencies import get_url_service
from shortlink_app.schemas.url import ShortenResponse
from shortlink_app.services.url_service import URLService

router = APIRouter(tags=["urls"])


@router.post(
    "/{path:path}",
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_short_url(
    request: Request,
    url_service: URLService = Depends(get_url_service)
):
    """
    Create a short URL. Accepted on any path.

    The body is parsed by hand rather than through a pydantic body
    parameter so that malformed input answers 400 in plain text instead
    of FastAPI's 422 JSON.
    """
    try:
        body = await request.body()
    except ClientDisconnect:
        raise RequestBodyError()

    shorten_request = url_service.parse_shorten_request(body)
    return await url_service.create_short_url(shorten_request.url)
