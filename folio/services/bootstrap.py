"""Startup seeding: the singleton content row and the configured admin user."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from folio.core.security import hash_password
from folio.models import CONTENT_ROW_ID, Content, User

if TYPE_CHECKING:
    from folio.core.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_HERO_HEADLINE = "Software Developer"
DEFAULT_HERO_SUBTITLE = (
    "I build modern web apps and reliable APIs, and ship practical machine learning workflows."
)


def ensure_content(session: Session) -> bool:
    """Insert the default content row if it is missing. Returns True when seeded."""
    if session.get(Content, CONTENT_ROW_ID) is not None:
        return False
    session.add(
        Content(
            id=CONTENT_ROW_ID,
            hero_headline=DEFAULT_HERO_HEADLINE,
            hero_subtitle=DEFAULT_HERO_SUBTITLE,
        )
    )
    session.commit()
    logger.info("Seeded default site content")
    return True


def ensure_admin_user(session: Session, settings: "Settings") -> bool:
    """
    Create the admin user from ADMIN_USERNAME / ADMIN_PASSWORD if absent.

    Without a configured password nothing is created and admin login stays
    impossible until one is set. Returns True when a user was inserted.
    """
    username = settings.ADMIN_USERNAME
    existing = session.query(User).filter(User.username == username).first()
    if existing is not None:
        return False
    if settings.ADMIN_PASSWORD is None:
        logger.warning("No ADMIN_PASSWORD set; cannot seed initial admin user %r.", username)
        return False
    session.add(
        User(
            username=username,
            password_hash=hash_password(settings.ADMIN_PASSWORD.get_secret_value()),
            role="admin",
        )
    )
    session.commit()
    logger.info("Seeded admin user: %s", username)
    return True


def run_bootstrap(session: Session, settings: "Settings") -> None:
    ensure_content(session)
    ensure_admin_user(session, settings)
