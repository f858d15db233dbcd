"""Pydantic request/response schemas."""

from folio.schemas.auth import CurrentUser, LoginRequest, LoginResponse, MeResponse
from folio.schemas.common import CreatedResponse, OkResponse
from folio.schemas.content import ContentOut, ContentResponse, ContentUpdate
from folio.schemas.health import HealthResponse
from folio.schemas.projects import ProjectIn, ProjectOut, ProjectsResponse
from folio.schemas.public import PublicContentResponse
from folio.schemas.skills import SkillIn, SkillOut, SkillsResponse

__all__ = [
    "ContentOut",
    "ContentResponse",
    "ContentUpdate",
    "CreatedResponse",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MeResponse",
    "OkResponse",
    "ProjectIn",
    "ProjectOut",
    "ProjectsResponse",
    "PublicContentResponse",
    "SkillIn",
    "SkillOut",
    "SkillsResponse",
]
