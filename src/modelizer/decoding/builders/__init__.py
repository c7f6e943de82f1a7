"""Modelizers for the shared models."""

from .listing import ListingBuilder
from .pydantic_builder import describe_validation_error, pydantic_modelizer
from .unit import UnitBuilder

__all__ = [
    "ListingBuilder",
    "UnitBuilder",
    "describe_validation_error",
    "pydantic_modelizer",
]
