"""
Typed response decoding.

A serializer turns one RawResponse into a DecodeResult; a modelizer turns one
parsed JSON value into a model. ModelSerializer composes the two once for
every model type.
"""

from .exceptions import (
    BodyParseError,
    DecodeError,
    DecodeErrorKind,
    InconsistentResultError,
    ModelError,
    TransportError,
    TypeMismatchError,
    UnacceptableStatusError,
)
from .result import DecodeResult
from .ports import (
    IBodyDecoder,
    IHttpClient,
    Modelizer,
    RawResponse,
    RequestDescriptor,
    ResponseDescriptor,
)
from .serializers import (
    JsonBodyDecoder,
    ModelSerializer,
    adapt_completion,
    json_serializer,
    model_serializer,
)
from .builders import ListingBuilder, UnitBuilder, pydantic_modelizer
from .connectors import AiohttpClient, ModelRequest

__all__ = [
    # Errors
    "DecodeError",
    "DecodeErrorKind",
    "TransportError",
    "UnacceptableStatusError",
    "BodyParseError",
    "ModelError",
    "TypeMismatchError",
    "InconsistentResultError",
    # Results and ports
    "DecodeResult",
    "RawResponse",
    "RequestDescriptor",
    "ResponseDescriptor",
    "IBodyDecoder",
    "IHttpClient",
    "Modelizer",
    # Serializers
    "JsonBodyDecoder",
    "ModelSerializer",
    "adapt_completion",
    "json_serializer",
    "model_serializer",
    # Builders
    "ListingBuilder",
    "UnitBuilder",
    "pydantic_modelizer",
    # Transport
    "AiohttpClient",
    "ModelRequest",
]
