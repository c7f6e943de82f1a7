"""Ports for transport delivery and body decoding."""

from .decoders import (  # noqa: F401
    Completion,
    IBodyDecoder,
    Modelizer,
    Serializer,
    UntypedCompletion,
)
from .http import (  # noqa: F401
    IHttpClient,
    RawResponse,
    RequestDescriptor,
    ResponseDescriptor,
)

__all__ = [
    "IHttpClient",
    "RawResponse",
    "RequestDescriptor",
    "ResponseDescriptor",
    "IBodyDecoder",
    "Modelizer",
    "Serializer",
    "Completion",
    "UntypedCompletion",
]
