"""Schemas for the singleton hero content."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from folio.schemas.common import require_text


class ContentOut(BaseModel):
    """Hero content as served to admin and public clients (internal id omitted)."""

    model_config = ConfigDict(from_attributes=True)

    hero_headline: str
    hero_subtitle: str
    updated_at: datetime | None = None


class ContentResponse(BaseModel):
    content: ContentOut | None


class ContentUpdate(BaseModel):
    """Full replacement of the hero text; both fields are required together."""

    hero_headline: str = Field(..., description="Main headline, trimmed.")
    hero_subtitle: str = Field(..., description="Subtitle under the headline, trimmed.")

    @field_validator("hero_headline", "hero_subtitle", mode="before")
    @classmethod
    def validate_text(cls, v: object) -> str:
        return require_text(v)
