# modelizer/shared/models/unit.py

from pydantic import BaseModel, ConfigDict


class Unit(BaseModel):
    """Sentinel model for endpoints that answer with an empty JSON object."""

    model_config = ConfigDict(frozen=True, extra="forbid")
