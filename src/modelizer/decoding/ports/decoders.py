"""Decoding abstractions.

A modelizer maps a parsed JSON value to a model, the same way a serializer
maps a raw response to a decoded value. Both are plain callables so they can
be passed per request instead of being registered globally.
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

from modelizer.decoding.ports.http import (
    RawResponse,
    RequestDescriptor,
    ResponseDescriptor,
)
from modelizer.decoding.result import DecodeResult

T = TypeVar("T")

# (parsed value) -> (model?, error?)
Modelizer = Callable[[Any], tuple[T | None, Exception | str | None]]

# (raw response) -> DecodeResult
Serializer = Callable[[RawResponse], DecodeResult[Any]]

# Typed user callback
Completion = Callable[[DecodeResult[T]], None]

# Callback shape used by ModelRequest.response(): (request, response, value?, error?)
UntypedCompletion = Callable[
    [RequestDescriptor, ResponseDescriptor | None, Any, BaseException | None], None
]


class IBodyDecoder(Protocol):
    """Abstraction for turning body bytes into a parsed value.

    Single Responsibility: Parse bytes. Does NOT know about models.
    """

    def decode(self, body: bytes | None) -> Any:
        """Parse a response body.

        Args:
            body: Raw body bytes, possibly None or empty

        Returns:
            Parsed value (never None)

        Raises:
            BodyParseError: If the body is absent, malformed or parses to null
        """
        ...
