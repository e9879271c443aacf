"""Base model configuration for all Zermelo models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ZermeloModel(BaseModel):
    """Base model with common configuration.

    All Zermelo API models should inherit from this class to get:
    - populate_by_name: Allow both alias and field name in input
    - extra="ignore": Ignore unknown fields from API responses
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump the fields that were present, under their wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
