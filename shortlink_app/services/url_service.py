import json
import logging

from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool

from shortlink_app.core.exceptions import (
    ShortCodeNotFoundError,
    StoreError,
    ValidationError,
)
from shortlink_app.models.mapping import URLMapping
from shortlink_app.schemas.url import ShortenRequest, ShortenResponse
from shortlink_app.services.short_code import generate_short_code
from shortlink_app.storage.strategies import MappingStore

logger = logging.getLogger("shortlink.service")


def replace_lone_surrogates(text: str) -> str:
    """
    Replace unpaired surrogates (from JSON escapes such as "\\ud800") with
    U+FFFD so the URL can be encoded as UTF-8 for hashing, storage and the
    Location header.
    """
    return text.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


class URLService:
    """
    URL Service with the mapping store injected.

    - The store is injected (not created internally)
    - Easy to test (inject an in-memory or failing store)
    - Stateless: one service per request, nothing cached between requests

    Every public method does at most one store round-trip. Store calls are
    blocking, so they run in Starlette's threadpool to keep the event loop
    free for other requests.
    """

    def __init__(self, store: MappingStore, domain_name: str, scheme: str = "http"):
        """
        Initialize URL service with dependencies.

        Args:
            store: Mapping store strategy
            domain_name: Public domain used to build short URLs
            scheme: Scheme of the short URLs
        """
        self.store = store
        self.domain_name = domain_name
        self.scheme = scheme

    @staticmethod
    def parse_shorten_request(body: bytes) -> ShortenRequest:
        """
        Parse a create request body.

        Raises:
            ValidationError: body is not a JSON object with a string "url",
                or "url" is empty/absent
        """
        try:
            payload = json.loads(body)
        except ValueError:
            raise ValidationError("Invalid JSON body")

        # null (whole body or a field value) means "not provided"
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            raise ValidationError("Invalid JSON body")

        # Keys match case-insensitively ("URL", "Url"); the last match wins
        fields = {}
        for key, value in payload.items():
            if key.lower() == "url" and value is not None:
                fields["url"] = value

        try:
            request = ShortenRequest.model_validate(fields)
        except PydanticValidationError:
            raise ValidationError("Invalid JSON body")

        if request.url == "":
            raise ValidationError("URL is required")
        return ShortenRequest(url=replace_lone_surrogates(request.url))

    def build_short_url(self, short_code: str) -> str:
        return f"{self.scheme}://{self.domain_name}/{short_code}"

    async def create_short_url(self, long_url: str) -> ShortenResponse:
        """
        Create (or overwrite) the mapping for a long URL.

        Process:
        1. Derive the short code from the URL (no DB lookup)
        2. Unconditional put (same URL → same record, so repeats are no-ops)
        3. Build the public short URL

        Raises:
            ValidationError: long_url is empty
            StoreError: the write failed
        """
        if not long_url:
            raise ValidationError("URL is required")

        mapping = URLMapping(short_code=generate_short_code(long_url), long_url=long_url)

        try:
            await run_in_threadpool(self.store.put, mapping)
        except StoreError as e:
            logger.error("Failed to store mapping %s: %s", mapping.short_code, e)
            raise StoreError("Failed to store URL", original_error=e) from e

        logger.debug("Stored mapping %s -> %s", mapping.short_code, mapping.long_url)
        return ShortenResponse(short_url=self.build_short_url(mapping.short_code))

    async def get_long_url_for_redirect(self, short_code: str) -> str:
        """
        Resolve a short code to its long URL.

        Raises:
            ValidationError: short_code is empty
            ShortCodeNotFoundError: no mapping for the code
            StoreError: the read failed
        """
        if not short_code:
            raise ValidationError("Short code is required")

        try:
            mapping = await run_in_threadpool(self.store.get, short_code)
        except StoreError as e:
            logger.error("Failed to retrieve mapping %s: %s", short_code, e)
            raise StoreError("Failed to retrieve URL", original_error=e) from e

        if mapping is None:
            raise ShortCodeNotFoundError(short_code)

        return mapping.long_url
