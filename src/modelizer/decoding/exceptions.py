"""
Decode Error Hierarchy

Every way a typed decode can fail has its own exception type. They are
carried as values inside DecodeResult rather than raised, so a completion
always receives either a model or one of these.
"""

import enum


class DecodeErrorKind(str, enum.Enum):
    """Tag identifying which stage of the decode produced the error."""

    TRANSPORT = "transport"
    BODY_PARSE = "body_parse"
    MODEL = "model"
    TYPE_MISMATCH = "type_mismatch"
    INCONSISTENT = "inconsistent"


class DecodeError(Exception):
    """Base exception for all decode failures."""

    kind: DecodeErrorKind

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code

    def _key(self) -> tuple:
        return (self.kind, self.message, self.url, self.status_code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecodeError):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class TransportError(DecodeError):
    """Networking-layer failure, passed through from the HTTP client."""

    kind = DecodeErrorKind.TRANSPORT

    def __init__(self, message: str, cause: BaseException | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def from_exception(cls, exc: BaseException, **kwargs) -> "TransportError":
        message = str(exc) or type(exc).__name__
        return cls(message, cause=exc, **kwargs)


class UnacceptableStatusError(TransportError):
    """Response status outside the range the serializer accepts."""

    pass


class BodyParseError(DecodeError):
    """Body is absent, empty, or not valid JSON."""

    kind = DecodeErrorKind.BODY_PARSE


class ModelError(DecodeError):
    """Domain validation failure raised by a specific modelizer."""

    kind = DecodeErrorKind.MODEL


class TypeMismatchError(DecodeError):
    """Decoded value has the wrong runtime type for the expected model."""

    kind = DecodeErrorKind.TYPE_MISMATCH

    def __init__(
        self,
        message: str,
        expected: type | None = None,
        actual: type | None = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.expected = expected
        self.actual = actual


class InconsistentResultError(DecodeError):
    """Modelizer returned neither a model nor an error."""

    kind = DecodeErrorKind.INCONSISTENT
