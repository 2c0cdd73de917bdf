"""Event Document — the persisted shape of an event in the `events` collection.

Invariants:
    - slug is derived (services/event_service.py), lowercased, unique across the collection
    - All descriptive text fields are required, trimmed and non-empty
    - mode is one of online | offline | hybrid
    - agenda and tags are non-empty lists
    - date/time stored in canonical form (YYYY-MM-DD / HH:MM) once prepared

Design Decisions:
    - Pydantic model over a driver-level schema: same validation at API and store boundaries
    - Mongo field names (_id, createdAt, updatedAt) kept as aliases so documents written
      by other tools on the same collection round-trip unchanged
    - id is a hex string; ObjectId never leaks past db/event_store.py
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from app.core.domain_types import EventMode

_REQUIRED_TEXT = (
    "title", "description", "overview", "image",
    "venue", "location", "audience", "organizer",
)


class Event(BaseModel):
    """Event document."""

    model_config = ConfigDict(
        populate_by_name=True, str_strip_whitespace=True,
    )

    id: str | None = Field(None, alias="_id")
    title: str
    slug: str = ""
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: EventMode
    audience: str
    agenda: list[str]
    organizer: str
    tags: list[str]
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")

    @field_validator(*_REQUIRED_TEXT)
    @classmethod
    def require_text(cls, v: str, info: ValidationInfo) -> str:
        if not v:
            label = "Image URL" if info.field_name == "image" else info.field_name.capitalize()
            raise ValueError(f"{label} cannot be empty")
        return v

    @field_validator("slug")
    @classmethod
    def lowercase_slug(cls, v: str) -> str:
        return v.lower()

    @field_validator("agenda", "tags")
    @classmethod
    def require_items(cls, v: list[str], info: ValidationInfo) -> list[str]:
        if not v:
            raise ValueError(f"{info.field_name.capitalize()} must be a non-empty array")
        return v

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        return str(v) if v is not None else None

    def to_document(self) -> dict:
        """Mongo document without _id (the store owns identity)."""
        doc = self.model_dump(by_alias=True, exclude={"id"}, mode="python")
        doc["mode"] = self.mode.value
        return doc
