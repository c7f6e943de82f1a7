"""Concrete HTTP client implementation for async requests.

Wraps aiohttp behind IHttpClient abstraction. Connection and timeout failures
are returned inside RawResponse.error instead of being raised.
"""

import asyncio
from typing import Any

import aiohttp

from modelizer.decoding.config.value_objects import DecoderConfig, HttpClientConfig
from modelizer.decoding.connectors.request import ModelRequest
from modelizer.decoding.ports.http import (
    IHttpClient,
    RawResponse,
    RequestDescriptor,
    ResponseDescriptor,
)
from modelizer.infrastructure.observability import bind_exchange, get_transport_logger


class AiohttpClient(IHttpClient):
    """HTTP client implementation using aiohttp."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        decoder_config: DecoderConfig | None = None,
    ):
        """Initialize HTTP client.

        Args:
            config: HTTP client configuration
            decoder_config: Default decoder configuration for requests built by this client
        """
        self.config = config or HttpClientConfig()
        self.decoder_config = decoder_config or DecoderConfig()
        self._session: aiohttp.ClientSession | None = None
        self._log = get_transport_logger("aiohttp-client")

    async def __aenter__(self) -> "AiohttpClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None:
            timeout = aiohttp.ClientTimeout(
                total=self.config.timeout, connect=self.config.connect_timeout
            )
            self._session = aiohttp.ClientSession(
                timeout=timeout, headers=self.config.default_headers
            )
        return self._session

    async def send(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> RawResponse:
        """Execute a request and deliver the completed exchange.

        Args:
            method: HTTP method
            url: Full URL
            params: Query parameters
            json: JSON request body
            headers: HTTP headers
            timeout: Request timeout override

        Returns:
            RawResponse with status, headers and body bytes, or with ``error``
            set when the exchange failed at the network level
        """
        request = RequestDescriptor(
            method=method.upper(),
            url=url,
            headers={**self.config.default_headers, **(headers or {})},
        )
        session = await self._get_session()
        timeout_obj = aiohttp.ClientTimeout(
            total=timeout or self.config.timeout,
            connect=self.config.connect_timeout,
        )

        log = bind_exchange(self._log, url, method=request.method)
        response: ResponseDescriptor | None = None
        try:
            async with session.request(
                request.method,
                url,
                params=params,
                json=json,
                headers=headers,
                timeout=timeout_obj,
                ssl=self.config.verify_ssl,
            ) as resp:
                response = ResponseDescriptor(
                    status_code=resp.status,
                    headers=resp.headers,
                    url=str(resp.url),
                )
                body = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log.warning(
                "transport_failed",
                error=str(e) or type(e).__name__,
            )
            return RawResponse(request=request, response=response, error=e)

        log.debug(
            "exchange_completed",
            status_code=response.status_code,
            size=len(body),
        )
        return RawResponse(request=request, response=response, body=body)

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> RawResponse:
        """Execute GET request."""
        return await self.send("GET", url, params=params, headers=headers, timeout=timeout)

    async def post(
        self,
        url: str,
        data: Any = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> RawResponse:
        """Execute POST request with a JSON body."""
        return await self.send("POST", url, json=data, headers=headers, timeout=timeout)

    def request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        decoder_config: DecoderConfig | None = None,
    ) -> ModelRequest:
        """Create a request handle to attach response serializers to.

        The exchange runs once, on the first awaited ``response_*`` call.
        """
        return ModelRequest(
            self,
            method,
            url,
            params=params,
            json=json,
            headers=headers,
            timeout=timeout,
            decoder_config=decoder_config or self.decoder_config,
        )

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
