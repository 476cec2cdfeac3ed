"""
Shared fixtures for SecDay tests.
"""

from typing import Callable, List

import httpx
import pytest

from secday.password.breach import PwnedPasswordsClient
from secday.password.calculator import PasswordScoreCalculator
from secday.password.service import PasswordCheckService


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, body: str = "", status_code: int = 200, error: Exception = None):
        self.requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if error is not None:
                raise error
            return httpx.Response(status_code, text=body)

        super().__init__(handler)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def make_service() -> Callable[..., PasswordCheckService]:
    def _make(transport: httpx.AsyncBaseTransport, calculator: PasswordScoreCalculator = None):
        client = PwnedPasswordsClient(
            api_url="https://api.pwnedpasswords.test",
            transport=transport,
        )
        return PasswordCheckService(client=client, calculator=calculator)

    return _make
