"""Request handle with response attachment points.

A ModelRequest performs its exchange once and lets any number of
serializers consume the delivered RawResponse. Serializers run in a
worker thread so body parsing and model construction stay off the event
loop; completions are invoked back on the loop.
"""

import asyncio
from typing import Any, TypeVar

from modelizer.decoding.builders import ListingBuilder, UnitBuilder
from modelizer.decoding.config.value_objects import DecoderConfig
from modelizer.decoding.ports.decoders import (
    Completion,
    Modelizer,
    Serializer,
    UntypedCompletion,
)
from modelizer.decoding.ports.http import IHttpClient, RawResponse
from modelizer.decoding.serializers import (
    ModelSerializer,
    adapt_completion,
    json_serializer,
)
from modelizer.infrastructure.observability import get_transport_logger
from modelizer.shared.models import Listing, Unit

T = TypeVar("T")


class ModelRequest:
    """One HTTP exchange plus the serializers attached to it."""

    def __init__(
        self,
        http_client: IHttpClient,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        decoder_config: DecoderConfig | None = None,
    ):
        """Initialize request handle.

        Args:
            http_client: Client that performs the exchange
            method: HTTP method
            url: Full URL
            params: Query parameters
            json: JSON request body
            headers: HTTP headers
            timeout: Request timeout override
            decoder_config: Configuration for serializers built by this handle
        """
        self.http_client = http_client
        self.method = method
        self.url = url
        self.params = params
        self.json = json
        self.headers = headers
        self.timeout = timeout
        self.decoder_config = decoder_config or DecoderConfig()
        self._raw: RawResponse | None = None
        self._lock = asyncio.Lock()
        self._log = get_transport_logger("model-request", method=method, url=url)

    async def raw_response(self) -> RawResponse:
        """Perform the exchange on first call; return the cached delivery after."""
        async with self._lock:
            if self._raw is None:
                self._raw = await self.http_client.send(
                    self.method,
                    self.url,
                    params=self.params,
                    json=self.json,
                    headers=self.headers,
                    timeout=self.timeout,
                )
        return self._raw

    async def response(
        self,
        serializer: Serializer,
        completion: UntypedCompletion,
    ) -> "ModelRequest":
        """Run ``serializer`` off the loop and deliver its outcome untyped.

        Args:
            serializer: (RawResponse) -> DecodeResult
            completion: Called once with (request, response, value, error)

        Returns:
            This request, for chaining further serializers
        """
        raw = await self.raw_response()
        result = await asyncio.to_thread(serializer, raw)
        value, error = result.as_tuple()
        self._log.debug(
            "response_serialized",
            ok=error is None,
            status_code=raw.status_code,
        )
        completion(raw.request, raw.response, value, error)
        return self

    async def response_json(self, completion: Completion[Any]) -> "ModelRequest":
        """Deliver the parsed JSON body."""
        serializer = json_serializer(config=self.decoder_config)
        return await self.response(serializer, adapt_completion(completion, object))

    async def response_model(
        self,
        modelizer: Modelizer[T],
        completion: Completion[T],
        model_type: type[T],
    ) -> "ModelRequest":
        """Deliver a model built by ``modelizer``.

        Args:
            modelizer: (parsed JSON) -> (model?, error?)
            completion: Receives one DecodeResult[T]
            model_type: Type the delivered model is narrowed to
        """
        serializer = ModelSerializer(modelizer, config=self.decoder_config)
        return await self.response(serializer, adapt_completion(completion, model_type))

    async def response_listing(self, completion: Completion[Listing]) -> "ModelRequest":
        return await self.response_model(
            ListingBuilder.from_json, completion, model_type=Listing
        )

    async def response_unit(self, completion: Completion[Unit]) -> "ModelRequest":
        return await self.response_model(
            UnitBuilder.from_json, completion, model_type=Unit
        )
