"""
Tests for the Pwned Passwords range lookup.
"""

import asyncio

import httpx
import pytest

from secday.core.errors import BreachLookupError
from secday.password.breach import (
    PwnedPasswordsClient,
    parse_range_response,
    sha1_prefix_suffix,
)

# SHA-1("password") = 5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8
PASSWORD_PREFIX = "5BAA6"
PASSWORD_SUFFIX = "1E4C9B93F3F0682250B6CF8331B7EE68FD8"


def lookup(transport, password="password", **kwargs):
    async def _lookup():
        async with PwnedPasswordsClient(
            api_url="https://api.pwnedpasswords.test",
            transport=transport,
            **kwargs,
        ) as client:
            return await client.lookup(password)

    return asyncio.run(_lookup())


class TestRangeParsing:
    """Scanning SUFFIX:COUNT lines."""

    def test_matching_suffix(self):
        body = "0000A:1\r\nAAAA1:5\r\nFFFF2:9"
        assert parse_range_response(body, "AAAA1") == 5

    def test_no_matching_suffix(self):
        body = "0000A:1\r\nFFFF2:9\r\n"
        assert parse_range_response(body, "AAAA1") == 0

    def test_empty_body(self):
        assert parse_range_response("", "AAAA1") == 0

    def test_case_insensitive_suffix(self):
        assert parse_range_response("aaaa1:5", "AAAA1") == 5
        assert parse_range_response("AAAA1:5", "aaaa1") == 5

    def test_lines_without_colon_are_skipped(self):
        body = "\r\ngarbage\r\nAAAA1:5\r\n"
        assert parse_range_response(body, "AAAA1") == 5

    def test_malformed_count(self):
        with pytest.raises(BreachLookupError):
            parse_range_response("AAAA1:many", "AAAA1")

    def test_negative_count(self):
        with pytest.raises(BreachLookupError):
            parse_range_response("0000A:1\r\nAAAA1:-5", "AAAA1")


class TestHashing:
    """SHA-1 prefix/suffix split."""

    def test_known_digest(self):
        prefix, suffix = sha1_prefix_suffix("password")

        assert prefix == PASSWORD_PREFIX
        assert suffix == PASSWORD_SUFFIX
        assert len(prefix) == 5
        assert len(suffix) == 35

    def test_utf8_input(self):
        prefix, suffix = sha1_prefix_suffix("비밀번호")

        digest = prefix + suffix
        assert len(digest) == 40
        assert all(c in "0123456789ABCDEF" for c in digest)


class TestPwnedPasswordsClient:
    """Range queries against a mocked API."""

    def test_breached_password(self, make_transport):
        transport = make_transport(
            body=f"0018A45C4D1DEF81644B54AB7F969B88D65:1\r\n{PASSWORD_SUFFIX}:3861493\r\n"
        )

        result = lookup(transport)

        assert result.occurrences == 3861493
        assert result.hash_prefix == PASSWORD_PREFIX
        assert result.is_pwned

    def test_unbreached_password(self, make_transport):
        transport = make_transport(body="0018A45C4D1DEF81644B54AB7F969B88D65:1\r\n")

        result = lookup(transport)

        assert result.occurrences == 0
        assert not result.is_pwned

    def test_only_prefix_is_sent(self, make_transport):
        transport = make_transport(body="")

        lookup(transport)

        assert len(transport.requests) == 1
        request = transport.requests[0]
        assert request.method == "GET"
        assert request.url.path == f"/range/{PASSWORD_PREFIX}"
        assert PASSWORD_SUFFIX not in str(request.url)
        assert "password" not in request.url.path
        assert "password" not in str(request.url.query)

    def test_request_headers(self, make_transport):
        transport = make_transport(body="")

        lookup(transport, user_agent="SecDay-Test/1.0")

        request = transport.requests[0]
        assert request.headers["User-Agent"] == "SecDay-Test/1.0"
        assert request.headers["Add-Padding"] == "true"

    def test_padding_can_be_disabled(self, make_transport):
        transport = make_transport(body="")

        lookup(transport, add_padding=False)

        assert "Add-Padding" not in transport.requests[0].headers

    def test_http_error_status(self, make_transport):
        transport = make_transport(status_code=503)

        with pytest.raises(BreachLookupError):
            lookup(transport)

    def test_network_failure(self, make_transport):
        transport = make_transport(error=httpx.ConnectError("connection refused"))

        with pytest.raises(BreachLookupError):
            lookup(transport)
