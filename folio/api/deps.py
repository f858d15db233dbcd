"""Request-scoped dependencies: session store, cookie resolution, and the auth gate."""

from datetime import timedelta
from typing import Annotated

from fastapi import Depends, HTTPException, Path, Request, status
from sqlalchemy.orm import Session

from folio.core.config import Settings, get_settings
from folio.core.database import get_db
from folio.core.security import unsign_session_id
from folio.schemas.auth import CurrentUser
from folio.schemas.common import INT64_MAX
from folio.services.sessions import SessionStore

# Path ids must fit the 64-bit integer primary key columns.
RowId = Annotated[int, Path(ge=1, le=INT64_MAX)]


def get_session_store(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SessionStore:
    return SessionStore(db, ttl=timedelta(minutes=settings.SESSION_TTL_MINUTES))


def get_session_id(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> str | None:
    """Session id from the signed cookie, or None if absent or tampered with."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    return unsign_session_id(token, settings.SESSION_SECRET.get_secret_value())


def get_optional_user(
    session_id: Annotated[str | None, Depends(get_session_id)],
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> CurrentUser | None:
    """The signed-in user, or None. Never raises."""
    if session_id is None:
        return None
    return store.get(session_id)


def require_auth(
    user: Annotated[CurrentUser | None, Depends(get_optional_user)],
) -> CurrentUser:
    """Dependency: require a live session. Raises 401 before any route logic runs."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return user
