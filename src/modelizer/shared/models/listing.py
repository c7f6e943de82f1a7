# modelizer/shared/models/listing.py

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Listing(BaseModel):
    """
    A marketplace listing.

    Only ``id`` is required; everything else depends on which endpoint
    returned the listing.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(..., ge=1, description="Listing identifier")
    title: str | None = Field(default=None)
    price: Decimal | None = Field(default=None, ge=0)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    tags: tuple[str, ...] = Field(default_factory=tuple)
    created_at: datetime | None = Field(default=None)

    @field_validator("currency", mode="before")
    @classmethod
    def upper_currency(cls, v):
        """Normalize currency codes to upper case"""
        if isinstance(v, str):
            return v.upper()
        return v
