from pydantic import BaseModel, Field


class ShortenRequest(BaseModel):
    """Body of a create request.

    url is a plain string: the service does not validate or
    normalize URLs, it only rejects empty input (checked in URLService).
    """
    url: str = Field("", description="The original URL to be shortened")


class ShortenResponse(BaseModel):
    short_url: str = Field(..., description="scheme://domain/short_code")


class HealthResponse(BaseModel):
    status: str = "ok"
