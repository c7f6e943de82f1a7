"""Serializers: raw response -> parsed body -> typed model."""

from .body import JsonBodyDecoder
from .completion import adapt_completion
from .model import ModelSerializer, json_serializer, model_serializer
from .status import StatusErrorMapper

__all__ = [
    "JsonBodyDecoder",
    "ModelSerializer",
    "StatusErrorMapper",
    "adapt_completion",
    "json_serializer",
    "model_serializer",
]
