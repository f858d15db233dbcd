"""Login, logout, and current-user endpoints (cookie-backed server sessions)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from folio.api.deps import (
    get_optional_user,
    get_session_id,
    get_session_store,
    require_auth,
)
from folio.core.config import Settings, get_settings
from folio.core.database import get_db
from folio.core.security import sign_session_id
from folio.schemas.auth import CurrentUser, LoginRequest, LoginResponse, MeResponse
from folio.schemas.common import OkResponse
from folio.services import auth as auth_service
from folio.services.auth import AuthError
from folio.services.sessions import SessionStore

router = APIRouter()


def _set_session_cookie(response: Response, settings: Settings, session_id: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=sign_session_id(session_id, settings.SESSION_SECRET.get_secret_value()),
        max_age=settings.SESSION_TTL_MINUTES * 60,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    store: Annotated[SessionStore, Depends(get_session_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> LoginResponse:
    """
    Authenticate with username and password and start a server-side session.
    The session id is returned in an HTTP-only cookie, never in the body.
    """
    try:
        session_id, user = auth_service.login(db, store, body.username, body.password)
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        ) from e
    _set_session_cookie(response, settings, session_id)
    return LoginResponse(ok=True, user=user)


@router.post("/logout", response_model=OkResponse)
def logout(
    response: Response,
    user: Annotated[CurrentUser, Depends(require_auth)],
    session_id: Annotated[str | None, Depends(get_session_id)],
    db: Annotated[Session, Depends(get_db)],
    store: Annotated[SessionStore, Depends(get_session_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> OkResponse:
    """Destroy the session server-side, audit the logout, and clear the cookie."""
    auth_service.logout(db, store, session_id, user)
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return OkResponse()


@router.get("/me", response_model=MeResponse)
def me(
    user: Annotated[CurrentUser | None, Depends(get_optional_user)],
) -> MeResponse:
    return MeResponse(user=user)
