"""Schemas for skill rows."""

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from folio.schemas.common import INT64_MAX, INT64_MIN, default_sort, require_text


class SkillIn(BaseModel):
    """Body for POST /admin/skills and PUT /admin/skills/{id}."""

    label: str
    percent: float = Field(
        ...,
        ge=0,
        le=100,
        allow_inf_nan=False,
        description="Proficiency in percent, 0-100 inclusive.",
    )
    sort: int = Field(
        default=0,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Ascending sort key; ties broken by id.",
    )

    @field_validator("label", mode="before")
    @classmethod
    def validate_label(cls, v: object) -> str:
        return require_text(v)

    @field_validator("percent", mode="before")
    @classmethod
    def reject_bool_percent(cls, v: object) -> object:
        # bool is an int subclass; true/false is never a meaningful percent
        if isinstance(v, bool):
            raise ValueError("percent must be a number")
        return v

    @field_validator("sort", mode="before")
    @classmethod
    def validate_sort(cls, v: object) -> object:
        return default_sort(v)


class SkillOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    label: str
    percent: float
    sort: int

    @field_serializer("percent")
    def serialize_percent(self, v: float) -> int | float:
        # whole percents go out as 80, not 80.0
        return int(v) if v.is_integer() else v


class SkillsResponse(BaseModel):
    skills: list[SkillOut]
