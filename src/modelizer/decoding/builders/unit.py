"""Modelizer for empty-object responses."""

from typing import Any

from modelizer.decoding.exceptions import ModelError
from modelizer.shared.models import Unit


class UnitBuilder:
    """Builds the Unit sentinel; anything but ``{}`` is a model error."""

    @classmethod
    def from_json(cls, json: Any) -> tuple[Unit | None, ModelError | None]:
        if not isinstance(json, dict):
            return None, ModelError(
                f"expected an empty JSON object for Unit, got {type(json).__name__}"
            )
        if json:
            return None, ModelError(
                f"expected an empty JSON object for Unit, got keys {sorted(json)}"
            )
        return Unit(), None
