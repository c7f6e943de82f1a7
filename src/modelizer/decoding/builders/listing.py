"""Modelizer for Listing responses.

Kept apart from the Listing model so the model stays a plain data class.
"""

from typing import Any

from modelizer.decoding.builders.pydantic_builder import pydantic_modelizer
from modelizer.decoding.exceptions import ModelError
from modelizer.shared.models import Listing

_validate_listing = pydantic_modelizer(Listing)


class ListingBuilder:
    """Builds Listing models from parsed JSON."""

    @classmethod
    def from_json(cls, json: Any) -> tuple[Listing | None, ModelError | None]:
        return _validate_listing(json)
