"""Gallery picture schemas for API request/response."""

from datetime import date, datetime

from pydantic import BaseModel, Field, TypeAdapter, field_validator

_datetime_adapter = TypeAdapter(datetime)


class GalleryPictureCreate(BaseModel):
    """Gallery picture upload metadata."""

    taken_on: date = Field(alias="takenOn")
    description: str = Field(min_length=1, max_length=2048)

    model_config = {"populate_by_name": True}

    @field_validator("taken_on", mode="before")
    @classmethod
    def to_local_date(cls, v):
        """Accept ISO dates as well as ISO date-times (converted to a local date)."""
        if isinstance(v, str) and "T" in v:
            taken_at = _datetime_adapter.validate_python(v)
            if taken_at.tzinfo is not None:
                taken_at = taken_at.astimezone()
            return taken_at.date()
        return v


class GalleryPictureDTO(BaseModel):
    """Gallery picture response schema."""

    id: int | None = None
    taken_on: date = Field(alias="takenOn")
    filename: str
    description: str
    created_at: datetime | None = Field(None, alias="createdAt")

    model_config = {"populate_by_name": True, "from_attributes": True}
