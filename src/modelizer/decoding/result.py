"""Result container for a single decode attempt."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from modelizer.decoding.exceptions import DecodeError

T = TypeVar("T")


@dataclass(frozen=True)
class DecodeResult(Generic[T]):
    """Outcome of decoding one response.

    Exactly one of ``model`` and ``error`` is set. Use ``ok()`` and ``fail()``
    rather than the constructor.
    """

    model: T | None = None
    error: DecodeError | None = None

    def __post_init__(self):
        if self.error is not None and self.model is not None:
            raise ValueError("DecodeResult cannot carry both a model and an error")
        if self.error is None and self.model is None:
            raise ValueError("DecodeResult needs either a model or an error")
        if self.error is not None and not isinstance(self.error, DecodeError):
            raise TypeError(
                f"error must be a DecodeError, got {type(self.error).__name__}"
            )

    @classmethod
    def ok(cls, model: T) -> "DecodeResult[T]":
        return cls(model=model)

    @classmethod
    def fail(cls, error: DecodeError) -> "DecodeResult[T]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the model, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.model  # type: ignore[return-value]

    def as_tuple(self) -> tuple[T | None, DecodeError | None]:
        """Return the ``(model, error)`` pair."""
        return self.model, self.error
