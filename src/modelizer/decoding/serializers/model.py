"""Generic model serializer.

Turns a modelizer ``(parsed JSON) -> (model?, error?)`` into a serializer
``(RawResponse) -> DecodeResult[T]``. The transport check, body parsing and
result classification are written here once; each model type only supplies
its own modelizer.
"""

from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from modelizer.decoding.config.value_objects import DecoderConfig
from modelizer.decoding.exceptions import (
    BodyParseError,
    DecodeError,
    InconsistentResultError,
    ModelError,
    TransportError,
)
from modelizer.decoding.ports.decoders import IBodyDecoder, Modelizer
from modelizer.decoding.ports.http import RawResponse
from modelizer.decoding.result import DecodeResult
from modelizer.decoding.serializers.body import JsonBodyDecoder
from modelizer.decoding.serializers.status import StatusErrorMapper
from modelizer.infrastructure.observability import bind_exchange, get_decoding_logger

T = TypeVar("T")


class ModelSerializer(Generic[T]):
    """Decode a RawResponse into a model of type ``T``.

    Dispatch order is fixed:
        1. transport error on the response -> TransportError
        2. status outside ``acceptable_status`` (if configured) -> UnacceptableStatusError
        3. body fails to parse, or parses to null -> BodyParseError
        4. modelizer reports or raises an error -> ModelError
        5. modelizer reports neither model nor error -> InconsistentResultError
        6. otherwise the model

    Instances hold only immutable configuration and may be shared across
    threads.
    """

    def __init__(
        self,
        modelizer: Modelizer[T],
        body_decoder: IBodyDecoder | None = None,
        config: DecoderConfig | None = None,
        model_name: str | None = None,
    ):
        """Initialize serializer.

        Args:
            modelizer: Builds the model from the parsed body
            body_decoder: Parses body bytes (defaults to JsonBodyDecoder)
            config: Decoder configuration
            model_name: Name used in log events (defaults to the modelizer's qualname)
        """
        self.modelizer = modelizer
        self.config = config or DecoderConfig()
        self.body_decoder = body_decoder or JsonBodyDecoder(self.config)
        self.model_name = model_name or getattr(
            modelizer, "__qualname__", type(modelizer).__name__
        )
        self._log = get_decoding_logger("model-serializer", model=self.model_name)

    def __call__(self, raw: RawResponse) -> DecodeResult[T]:
        result = self._decode(raw)
        log = bind_exchange(self._log, raw.url, raw.status_code)
        if result.is_ok:
            log.debug("response_decoded")
        else:
            log.debug(
                "response_decode_failed",
                error_kind=result.error.kind.value,
                error=result.error.message,
            )
        return result

    def _decode(self, raw: RawResponse) -> DecodeResult[T]:
        context = {"url": raw.url, "status_code": raw.status_code}

        if raw.error is not None:
            if isinstance(raw.error, TransportError):
                return DecodeResult.fail(raw.error)
            return DecodeResult.fail(TransportError.from_exception(raw.error, **context))

        acceptable = self.config.acceptable_status
        if acceptable is not None and raw.response is not None:
            if not StatusErrorMapper.is_acceptable(raw.response.status_code, acceptable):
                return DecodeResult.fail(
                    StatusErrorMapper.map_error(
                        raw.response.status_code,
                        raw.body,
                        raw.url,
                        raw.response.headers,
                    )
                )

        try:
            value = self.body_decoder.decode(raw.body)
        except BodyParseError as e:
            return DecodeResult.fail(BodyParseError(e.message, **context))
        if value is None:
            return DecodeResult.fail(
                BodyParseError("json parsing returned nil", **context)
            )

        try:
            model, error = self._build(value)
        except (ModelError, ValidationError) as e:
            return DecodeResult.fail(self._model_error(e, context))
        except Exception as e:
            # Unexpected modelizer failures are delivered as values too
            bind_exchange(self._log, raw.url, raw.status_code).warning(
                "modelizer_raised",
                error_type=type(e).__name__,
                error=str(e),
            )
            model_error = ModelError(
                f"modelizer {self.model_name} raised {type(e).__name__}: {e}",
                **context,
            )
            model_error.__cause__ = e
            return DecodeResult.fail(model_error)

        if error is not None:
            return DecodeResult.fail(self._model_error(error, context))
        if model is None:
            return DecodeResult.fail(
                InconsistentResultError("no model and no error", **context)
            )
        return DecodeResult.ok(model)

    def _build(self, value: Any) -> tuple[T | None, Exception | str | None]:
        outcome = self.modelizer(value)
        if not isinstance(outcome, tuple) or len(outcome) != 2:
            raise TypeError(
                f"modelizer {self.model_name} must return a (model, error) pair, "
                f"got {type(outcome).__name__}"
            )
        return outcome

    @staticmethod
    def _model_error(error: Exception | str, context: dict[str, Any]) -> ModelError:
        if isinstance(error, ModelError) and error.url is not None:
            return error
        message = error.message if isinstance(error, DecodeError) else str(error)
        model_error = ModelError(message, **context)
        if isinstance(error, BaseException):
            model_error.__cause__ = error
        return model_error


def model_serializer(
    modelizer: Modelizer[T],
    body_decoder: IBodyDecoder | None = None,
    config: DecoderConfig | None = None,
) -> ModelSerializer[T]:
    """Build a serializer for one model type from its modelizer."""
    return ModelSerializer(modelizer, body_decoder=body_decoder, config=config)


def _identity(value: Any) -> tuple[Any, None]:
    return value, None


def json_serializer(
    body_decoder: IBodyDecoder | None = None,
    config: DecoderConfig | None = None,
) -> ModelSerializer[Any]:
    """Serializer whose result is the parsed JSON value itself."""
    return ModelSerializer(
        _identity, body_decoder=body_decoder, config=config, model_name="json"
    )
