"""Booking Document — an attendee's reservation for one event.

Invariants:
    - event_id references an existing Event at write time (checked in services/booking_service.py,
      not by a foreign key)
    - email is trimmed, lowercased and shaped like local@domain.tld
"""

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class Booking(BaseModel):
    """Booking document."""

    model_config = ConfigDict(
        populate_by_name=True, str_strip_whitespace=True,
    )

    id: str | None = Field(None, alias="_id")
    event_id: str = Field(alias="eventId", min_length=1)
    email: str
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")

    @field_validator("id", "event_id", mode="before")
    @classmethod
    def stringify_ids(cls, v):
        return str(v) if v is not None else None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.lower()
        if not _EMAIL.match(v):
            raise ValueError("Please provide a valid email address")
        return v

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True, exclude={"id"}, mode="python")
