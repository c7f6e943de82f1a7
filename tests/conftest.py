"""Shared fixtures for modelizer tests."""

import pytest

from modelizer.decoding.ports.http import (
    RawResponse,
    RequestDescriptor,
    ResponseDescriptor,
)

LISTING_URL = "https://api.example.test/listings/1"


def make_raw_response(
    body: bytes | None = None,
    status_code: int | None = 200,
    error: BaseException | None = None,
    url: str = LISTING_URL,
    headers: dict[str, str] | None = None,
) -> RawResponse:
    """Build a RawResponse the way the HTTP client would deliver it."""
    request = RequestDescriptor(method="GET", url=url)
    response = None
    if status_code is not None:
        response = ResponseDescriptor(
            status_code=status_code, headers=headers or {}, url=url
        )
    return RawResponse(request=request, response=response, body=body, error=error)


@pytest.fixture
def raw_response():
    """Factory fixture for RawResponse objects."""
    return make_raw_response


class FakeHttpClient:
    """IHttpClient stand-in returning a fixed RawResponse."""

    def __init__(self, raw: RawResponse):
        self.raw = raw
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    async def send(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append((method, url))
        return self.raw

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_http_client():
    """Factory fixture for FakeHttpClient."""
    return FakeHttpClient
