"""Shared domain models."""

from modelizer.shared.models.listing import Listing
from modelizer.shared.models.unit import Unit

__all__ = [
    "Listing",
    "Unit",
]
