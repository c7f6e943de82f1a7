"""HTTP delivery abstractions.

Separates the HTTP transport layer from body decoding and model construction.
Transport failures are delivered as data on RawResponse, not raised, so the
serializer can classify them like any other decode failure.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class RequestDescriptor:
    """What was sent. Opaque to the decoder."""

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ResponseDescriptor:
    """Response metadata (status line and headers)."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    url: str = ""


@dataclass(frozen=True)
class RawResponse:
    """One completed HTTP exchange as delivered by the client.

    ``response`` is None when the transport failed before a response arrived.
    ``error`` holds the transport exception, if any.
    """

    request: RequestDescriptor
    response: ResponseDescriptor | None = None
    body: bytes | None = None
    error: BaseException | None = None

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None

    @property
    def url(self) -> str:
        if self.response is not None and self.response.url:
            return self.response.url
        return self.request.url


class IHttpClient(Protocol):
    """Abstraction for HTTP client.

    Single Responsibility: Execute HTTP requests and deliver RawResponse.
    Does NOT handle:
    - Body parsing
    - Model construction
    - Retry logic
    """

    async def send(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> RawResponse:
        """Execute a request.

        Args:
            method: HTTP method ("GET", "POST", ...)
            url: Full URL to request
            params: Query parameters
            json: JSON-serializable request body
            headers: HTTP headers
            timeout: Request timeout in seconds

        Returns:
            RawResponse; network failures are captured in ``error``
        """
        ...

    async def close(self) -> None:
        """Release connections held by the client."""
        ...
