"""Base model with common configuration for backend records."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict


class BaseModel(PydanticBaseModel):
    """Base model with common configuration.

    Backend records keep fields the SDK does not model, so nothing the
    server returns is dropped.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        str_strip_whitespace=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary using backend field names."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_row(self, columns: list[str]) -> dict[str, Any]:
        """Convert model to row dict for table output."""
        data = self.model_dump()
        return {col: data.get(col, "") for col in columns}
