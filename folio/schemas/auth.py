"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., max_length=255, description="Username")
    password: str = Field(..., max_length=128, description="Password")


class CurrentUser(BaseModel):
    """Session payload for the signed-in admin (username, role)."""

    model_config = ConfigDict(from_attributes=True)

    username: str
    role: str


class LoginResponse(BaseModel):
    """Returned after a successful login; the session cookie is set alongside."""

    ok: bool = True
    user: CurrentUser


class MeResponse(BaseModel):
    """Response for GET /me; user is null when no valid session is present."""

    user: CurrentUser | None = None
