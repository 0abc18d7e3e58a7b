"""Pos — the point-of-sale record stored in the catalog.

A Pos without ``id`` is a candidate that has not been stored yet; the
repository assigns ``id``, ``created_at`` and ``updated_at`` on write.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from campuscoffee.domain.types import CampusType, PosType

# Postal codes are stored as signed 32-bit integers.
MAX_POSTAL_CODE = 2**31 - 1


class Pos(BaseModel):
    """A coffee or food vendor in the catalog."""

    model_config = {"frozen": True}

    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    name: str
    description: str
    type: PosType
    campus: CampusType
    street: str
    house_number: str
    postal_code: int = Field(gt=0, le=MAX_POSTAL_CODE)
    city: str

    @field_validator("name", "description", "street", "house_number", "city")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return value

    @property
    def is_new(self) -> bool:
        """True while the record has not been stored."""
        return self.id is None

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly dict for ServiceResult payloads."""
        return self.model_dump(mode="json")
