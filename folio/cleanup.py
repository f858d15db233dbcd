"""
CLI entrypoint for purging expired login sessions. Run from cron, e.g.:

  python -m folio.cleanup

Or hourly: 0 * * * * cd /path/to/folio && .venv/bin/python -m folio.cleanup
"""

import logging
import sys
from datetime import timedelta

from folio.core.config import get_settings
from folio.core.database import SessionLocal
from folio.services.sessions import SessionStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Delete sessions whose expires_at has passed."""
    settings = get_settings()
    db = SessionLocal()
    try:
        store = SessionStore(db, ttl=timedelta(minutes=settings.SESSION_TTL_MINUTES))
        deleted = store.purge_expired()
        logger.info("Session cleanup completed: sessions_deleted=%s", deleted)
        return 0
    except Exception as e:
        logger.exception("Session cleanup failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
