"""Shared response envelopes and field validators."""

from pydantic import BaseModel, Field

# Integer columns are signed 64-bit in SQLite and Postgres BIGINT.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def require_text(value: object) -> str:
    """Trim a string field and reject it when nothing is left."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError("is required")
    return value.strip()


def default_sort(value: object) -> object:
    """Treat a missing or null sort key as 0."""
    return 0 if value is None else value


class OkResponse(BaseModel):
    """Acknowledgement for mutations that return no entity."""

    ok: bool = True


class CreatedResponse(BaseModel):
    """Acknowledgement for inserts, carrying the new row id."""

    ok: bool = True
    id: int = Field(..., description="Database ID of the created row.")
