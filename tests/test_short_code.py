"""
Tests for short code generation.
"""
import hashlib
import string

from shortlink_app.services.short_code import SHORT_CODE_LENGTH, generate_short_code

HEX_DIGITS = set(string.hexdigits.lower())


class TestGenerateShortCode:
    """Test the SHA-1 prefix generator"""

    def test_generates_correct_length(self):
        """Codes are always 8 characters"""
        code = generate_short_code("https://www.google.com/")

        assert len(code) == SHORT_CODE_LENGTH == 8

    def test_lowercase_hex(self):
        """Codes only use lowercase hex digits"""
        for url in ["https://a.example", "HTTP://UPPER.EXAMPLE/PATH", "x" * 5000]:
            code = generate_short_code(url)
            assert set(code) <= HEX_DIGITS

    def test_same_url_same_code(self):
        """Test that same URL generates same code (deterministic)"""
        code1 = generate_short_code("https://www.github.com/")
        code2 = generate_short_code("https://www.github.com/")

        assert code1 == code2

    def test_different_url_different_code(self):
        """Different URLs with different digest prefixes get different codes"""
        code1 = generate_short_code("https://example.com/1")
        code2 = generate_short_code("https://example.com/2")
        code3 = generate_short_code("https://example.com/3")

        assert len({code1, code2, code3}) == 3

    def test_known_vectors(self):
        """Prefixes of well-known SHA-1 digests"""
        assert generate_short_code("") == "da39a3ee"
        assert generate_short_code("abc") == "a9993e36"

    def test_matches_sha1_prefix_of_utf8(self):
        """Non-ASCII input is hashed as UTF-8"""
        url = "https://example.com/ünïcødé?q=日本"
        expected = hashlib.sha1(url.encode("utf-8")).hexdigest()[:8]

        assert generate_short_code(url) == expected

    def test_openai_example(self):
        url = "https://openai.com"

        assert generate_short_code(url) == hashlib.sha1(b"https://openai.com").hexdigest()[:8]

    def test_url_is_not_normalized(self):
        """A trailing slash is a different URL"""
        assert generate_short_code("https://example.com") != generate_short_code("https://example.com/")

    def test_replacement_character_hashes_as_utf8(self):
        """U+FFFD (what unpaired surrogates become) hashes as EF BF BD"""
        url = "https://example.com/\ufffd"
        expected = hashlib.sha1(b"https://example.com/\xef\xbf\xbd").hexdigest()[:8]

        assert generate_short_code(url) == expected
