from typing import Any, Mapping, Optional

import pytest
from httpx import Response

from simple_client import AuthToken, RequestDescriptor


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in ("SIMPLE_CLIENT_BASE_URL", "SIMPLE_CLIENT_DEBUG"):
        # setenv first so values loaded from a .env file are removed on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


class StaticUser:
    def __init__(
        self,
        token: Any = None,
        client_headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.token = token
        self.client_headers = client_headers

    def get_token(self) -> Any:
        return self.token

    def get_client_headers(self) -> Optional[Mapping[str, str]]:
        return self.client_headers


class FakeTransport:
    """Records calls and answers with a fixed response or error."""

    def __init__(
        self,
        response: Optional[Response] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple[str, RequestDescriptor]] = []

    async def __call__(self, uri: str, descriptor: RequestDescriptor) -> Response:
        self.calls.append((uri, descriptor))
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


@pytest.fixture
def bearer_user() -> StaticUser:
    return StaticUser(
        token=AuthToken(scheme="Bearer", token="user-secret"),
        client_headers={"x-client": "tests", "pragma": "from-user"},
    )


@pytest.fixture
def make_user() -> type[StaticUser]:
    return StaticUser


@pytest.fixture
def make_transport() -> type[FakeTransport]:
    return FakeTransport
