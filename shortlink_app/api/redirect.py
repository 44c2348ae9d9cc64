from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from shortlink_app.core.exceptions import MethodNotAllowedError
from shortlink_app.dependencies import get_url_service
from shortlink_app.services.url_service import URLService

router = APIRouter(tags=["redirect"])

# Everything the router does not dispatch. OPTIONS never gets here: the
# CORS middleware answers it first.
UNSUPPORTED_METHODS = ["PUT", "DELETE", "PATCH", "HEAD", "TRACE"]


@router.get("/{short_code:path}")
async def redirect_to_long_url(
    short_code: str,
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect to the original URL.

    The whole path (minus the leading "/") is the lookup key, so "/" gives
    an empty code and a 400.
    """
    long_url = await url_service.get_long_url_for_redirect(short_code)
    return RedirectResponse(url=long_url, status_code=status.HTTP_302_FOUND)


@router.api_route("/{path:path}", methods=UNSUPPORTED_METHODS, include_in_schema=False)
async def method_not_allowed(path: str):
    raise MethodNotAllowedError()
