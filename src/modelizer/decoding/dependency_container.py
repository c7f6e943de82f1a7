"""Dependency injection container for the decoding layer.

This is the single place where concrete implementations are chosen.

Usage:
    container = DecodingDependencyContainer.from_config(get_config())
    async with container.create_http_client() as client:
        await client.request("GET", url).response_listing(on_listing)
"""

from typing import TypeVar

from modelizer.config.state import ConfigState
from modelizer.decoding.config.value_objects import DecoderConfig, HttpClientConfig
from modelizer.decoding.connectors.aiohttp_client import AiohttpClient
from modelizer.decoding.ports import IBodyDecoder, Modelizer
from modelizer.decoding.serializers import JsonBodyDecoder, ModelSerializer
from modelizer.infrastructure.observability import setup_logging

T = TypeVar("T")


class DecodingDependencyContainer:
    """Dependency injection container for clients and serializers.

    Tests can subclass this and override methods to inject fakes.
    """

    def __init__(
        self,
        http_config: HttpClientConfig | None = None,
        decoder_config: DecoderConfig | None = None,
    ):
        """Initialize container with configuration.

        Args:
            http_config: HTTP client configuration (optional, uses defaults)
            decoder_config: Decoder configuration (optional, uses defaults)
        """
        self.http_config = http_config or HttpClientConfig()
        self.decoder_config = decoder_config or DecoderConfig()
        self.state: ConfigState | None = None

    @classmethod
    def from_config(cls, state: ConfigState) -> "DecodingDependencyContainer":
        """Build a container from loaded configuration state."""
        container = cls(
            http_config=state.to_http_config(),
            decoder_config=state.to_decoder_config(),
        )
        container.state = state
        return container

    def configure_logging(self) -> None:
        """Apply the logging section of the loaded configuration."""
        settings = self.state.logging if self.state is not None else None
        if settings is None:
            setup_logging()
            return
        setup_logging(
            level=settings.level,
            json_logs=settings.json_logs,
            include_timestamp=settings.include_timestamp,
        )

    def create_http_client(self) -> AiohttpClient:
        return AiohttpClient(self.http_config, decoder_config=self.decoder_config)

    def create_body_decoder(self) -> IBodyDecoder:
        return JsonBodyDecoder(self.decoder_config)

    def create_serializer(self, modelizer: Modelizer[T]) -> ModelSerializer[T]:
        """Create a serializer for ``modelizer`` sharing this container's decoder."""
        return ModelSerializer(
            modelizer,
            body_decoder=self.create_body_decoder(),
            config=self.decoder_config,
        )
