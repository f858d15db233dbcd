"""
Create or reset an admin login without restarting the server. Run from project root:
  python -m folio.scripts.create_user USERNAME PASSWORD
Example:
  python -m folio.scripts.create_user admin your-secure-password

The API itself never creates users; startup seeding covers the usual case
(ADMIN_USERNAME / ADMIN_PASSWORD). Use --reset to replace an existing password.
"""
import argparse
import sys

from folio.core.database import SessionLocal, engine, init_db
from folio.core.security import PASSWORD_MAX_LEN, USERNAME_MAX_LEN, hash_password
from folio.models import User


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Folio admin user (no registration UI).")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password (8-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Replace the password if the user already exists.",
    )
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if len(args.password) < 8 or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be 8-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    init_db(engine)
    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.username == username).first()
        if existing and not args.reset:
            print(f"User '{username}' already exists (use --reset).", file=sys.stderr)
            return 1
        if existing:
            existing.password_hash = hash_password(args.password)
            db.commit()
            print(f"Reset password for '{username}'.")
            return 0
        db.add(
            User(
                username=username,
                password_hash=hash_password(args.password),
                role="admin",
            )
        )
        db.commit()
        print(f"Created admin user '{username}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
