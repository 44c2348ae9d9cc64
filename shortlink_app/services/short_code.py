"""
Short code generation for URL shortener.

Codes are content-addressed: the code for a URL is a prefix of its SHA-1
hex digest, so the same URL always maps to the same code and no lookup is
needed to generate one.

Pros: deterministic, no DB round-trip, repeat submissions are idempotent
Cons: two URLs sharing a digest prefix overwrite each other (not detected)
"""

import hashlib

SHORT_CODE_LENGTH = 8


def generate_short_code(long_url: str) -> str:
    """
    Generate the short code for a URL.

    Process:
    1. Encode the URL as UTF-8
    2. SHA-1 digest, lowercase hex (40 characters)
    3. Keep the first 8 characters

    Total for any well-formed string, including the empty string. Lone
    surrogates are replaced upstream, in URLService.parse_shorten_request.
    """
    digest = hashlib.sha1(long_url.encode("utf-8")).hexdigest()
    return digest[:SHORT_CODE_LENGTH]
