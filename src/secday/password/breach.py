"""
Pwned Passwords client.

Implements the k-anonymity range query: only the first 5 characters of the
password's SHA-1 hash are sent, and the matching suffix is searched locally
in the returned `SUFFIX:COUNT` lines.
"""

import hashlib
import logging
from typing import Optional, Tuple

import httpx

from secday.core.errors import BreachLookupError

from .models import BreachLookupResult

logger = logging.getLogger(__name__)

PREFIX_LENGTH = 5


def sha1_prefix_suffix(password: str) -> Tuple[str, str]:
    """
    Hash a password and split the uppercase hex digest.

    Args:
        password: Password to hash (UTF-8 encoded)

    Returns:
        Tuple of (5-char prefix, 35-char suffix)
    """
    digest = hashlib.sha1(password.encode("utf-8")).hexdigest().upper()
    return digest[:PREFIX_LENGTH], digest[PREFIX_LENGTH:]


def parse_range_response(body: str, suffix: str) -> int:
    """
    Find the occurrence count for a hash suffix in a range response.

    Args:
        body: Newline-delimited `SUFFIX:COUNT` text
        suffix: Hash suffix to look for

    Returns:
        Occurrence count, or 0 if the suffix is absent

    Raises:
        BreachLookupError: If the matching line has no valid count
    """
    suffix = suffix.upper()

    for line in body.splitlines():
        if ":" not in line:
            continue

        line_suffix, _, count = line.partition(":")
        if line_suffix.strip().upper() != suffix:
            continue

        try:
            occurrences = int(count.strip())
        except ValueError as e:
            raise BreachLookupError("Malformed count in range response") from e

        if occurrences < 0:
            raise BreachLookupError("Negative count in range response")
        return occurrences

    return 0


class PwnedPasswordsClient:
    """
    Client for the Pwned Passwords range API.

    Usage:
        async with PwnedPasswordsClient() as client:
            result = await client.lookup("hunter2")
            print(result.occurrences)
    """

    def __init__(
        self,
        api_url: str = "https://api.pwnedpasswords.com",
        timeout: float = 10.0,
        user_agent: str = "SecDay-Password-Checker/1.0",
        add_padding: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Pwned Passwords client.

        Args:
            api_url: Base URL of the API
            timeout: HTTP request timeout in seconds
            user_agent: User-Agent header for requests
            add_padding: Request padded responses
            transport: Optional httpx transport (used for mocking)
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

        headers = {"User-Agent": user_agent}
        if add_padding:
            headers["Add-Padding"] = "true"

        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            headers=headers,
            transport=transport,
        )

    def range_url(self, prefix: str) -> str:
        """Build the range query URL for a hash prefix."""
        return f"{self.api_url}/range/{prefix}"

    async def fetch_range(self, prefix: str) -> str:
        """
        Fetch all hash suffixes sharing a prefix.

        Args:
            prefix: 5-character uppercase hex prefix

        Returns:
            Raw response body

        Raises:
            BreachLookupError: On network failure or non-200 status
        """
        try:
            response = await self.client.get(self.range_url(prefix))
        except httpx.HTTPError as e:
            logger.warning(f"Range query for prefix {prefix} failed: {e}")
            raise BreachLookupError(f"Range query failed: {e}") from e

        if response.status_code != 200:
            logger.warning(
                f"Range query for prefix {prefix} returned status {response.status_code}"
            )
            raise BreachLookupError(f"Range query returned HTTP {response.status_code}")

        return response.text

    async def lookup(self, password: str) -> BreachLookupResult:
        """
        Check how often a password appears in known breaches.

        Args:
            password: Password to check (never sent, stored or logged)

        Returns:
            BreachLookupResult with the occurrence count

        Raises:
            BreachLookupError: If the query fails or the response is malformed
        """
        prefix, suffix = sha1_prefix_suffix(password)

        body = await self.fetch_range(prefix)
        occurrences = parse_range_response(body, suffix)

        logger.debug(f"Range query for prefix {prefix}: {occurrences} occurrence(s)")

        return BreachLookupResult(hash_prefix=prefix, occurrences=occurrences)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        await self.close()


def create_pwned_client(
    api_url: Optional[str] = None,
    timeout: float = 10.0,
    user_agent: str = "SecDay-Password-Checker/1.0",
    add_padding: bool = True,
) -> PwnedPasswordsClient:
    """
    Factory function to create a PwnedPasswordsClient.

    Args:
        api_url: API base URL (defaults to https://api.pwnedpasswords.com)
        timeout: HTTP request timeout
        user_agent: User-Agent header
        add_padding: Request padded responses

    Returns:
        Configured PwnedPasswordsClient instance
    """
    return PwnedPasswordsClient(
        api_url=api_url or "https://api.pwnedpasswords.com",
        timeout=timeout,
        user_agent=user_agent,
        add_padding=add_padding,
    )
