from pydantic import BaseModel, ConfigDict, Field


class URLMapping(BaseModel):
    """
    The persisted association between a short code and its long URL.

    This is the only record the service stores. The short code is derived
    from the long URL (see services.short_code), so writing the same URL
    twice produces the same record.

    Storage layout (one item per mapping):
    - ShortCode: primary key, 8 lowercase hex characters
    - LongURL:   the original URL, stored as given
    """

    short_code: str = Field(..., description="8-character lowercase hex key")
    long_url: str = Field(..., description="The original URL, stored verbatim")

    model_config = ConfigDict(frozen=True)

    def to_item(self) -> dict:
        """Encode into the backend item schema"""
        return {"ShortCode": self.short_code, "LongURL": self.long_url}

    @classmethod
    def from_item(cls, item: dict) -> "URLMapping":
        """
        Decode a backend item.

        Raises:
            pydantic.ValidationError: if ShortCode or LongURL is missing
                or not a string
        """
        return cls.model_validate(
            {"short_code": item.get("ShortCode"), "long_url": item.get("LongURL")}
        )
