"""Schemas for project rows. Links are exposed as a list of objects."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from folio.schemas.common import INT64_MAX, INT64_MIN, default_sort, require_text


class ProjectIn(BaseModel):
    """Body for POST /admin/projects and PUT /admin/projects/{id}."""

    title: str
    summary: str
    stack: str = Field(default="", description="Free-form tech stack line.")
    links: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Ordered link objects, e.g. {url, label}.",
    )
    featured: bool = Field(default=False, description="Listed before non-featured projects.")
    sort: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)

    @field_validator("title", "summary", mode="before")
    @classmethod
    def validate_text(cls, v: object) -> str:
        return require_text(v)

    @field_validator("stack", mode="before")
    @classmethod
    def coerce_stack(cls, v: object) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("links", mode="before")
    @classmethod
    def coerce_links(cls, v: object) -> list[dict[str, Any]]:
        """Anything that is not a list becomes []; non-object items are dropped."""
        if not isinstance(v, list):
            return []
        return [item for item in v if isinstance(item, dict)]

    @field_validator("featured", mode="before")
    @classmethod
    def coerce_featured(cls, v: object) -> bool:
        return bool(v)

    @field_validator("sort", mode="before")
    @classmethod
    def validate_sort(cls, v: object) -> object:
        return default_sort(v)


class ProjectOut(BaseModel):
    id: int
    title: str
    summary: str
    stack: str
    links: list[Any]
    featured: bool
    sort: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectsResponse(BaseModel):
    projects: list[ProjectOut]
