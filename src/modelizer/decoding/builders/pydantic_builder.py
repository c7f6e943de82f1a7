"""Modelizers backed by pydantic validation."""

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from modelizer.decoding.exceptions import ModelError

M = TypeVar("M", bound=BaseModel)


def describe_validation_error(model_cls: type[BaseModel], error: ValidationError) -> str:
    """One-line summary of a pydantic ValidationError."""
    problems = [
        f"{'.'.join(str(loc) for loc in item['loc']) or '<root>'}: {item['msg']}"
        for item in error.errors()
    ]
    return f"invalid {model_cls.__name__}: " + "; ".join(problems)


def pydantic_modelizer(
    model_cls: type[M],
) -> Callable[[Any], tuple[M | None, ModelError | None]]:
    """Create a modelizer that validates a JSON object into ``model_cls``.

    Non-object values and validation failures come back in the error slot.
    """

    def from_json(json: Any) -> tuple[M | None, ModelError | None]:
        if not isinstance(json, dict):
            return None, ModelError(
                f"expected a JSON object for {model_cls.__name__}, "
                f"got {type(json).__name__}"
            )
        try:
            return model_cls.model_validate(json), None
        except ValidationError as e:
            return None, ModelError(describe_validation_error(model_cls, e))

    from_json.__qualname__ = f"{model_cls.__name__}.from_json"
    return from_json
