"""
Create a user with a role (registration never assigns one). Run from project root:
  python -m adonstreet.scripts.create_user EMAIL NAME PASSWORD [role]
Example:
  python -m adonstreet.scripts.create_user admin@adonstreet.in "Site Admin" your-secure-password admin
"""
import argparse
import logging
import sys

from adonstreet.core.config import get_settings
from adonstreet.core.database import SessionLocal
from adonstreet.core.security import hash_password
from adonstreet.models.user import User

logger = logging.getLogger(__name__)

ROLES = ("user", "admin")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an AdOnStreet user with a role.")
    parser.add_argument("email", help="Login email (must be unique)")
    parser.add_argument("name", help="Display name")
    parser.add_argument("password", help="Plain password; stored as a bcrypt hash")
    parser.add_argument("role", nargs="?", default="user", choices=ROLES)
    args = parser.parse_args(argv)

    email = args.email.strip()
    if not email or len(email) > 255:
        print("Invalid email length.", file=sys.stderr)
        return 1

    settings = get_settings()
    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.email_id == email).first()
        if existing:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        user = User(
            user_name=args.name,
            email_id=email,
            password_hash=hash_password(args.password, rounds=settings.BCRYPT_ROUNDS),
            role=args.role,
        )
        db.add(user)
        db.commit()
        logger.info("Created user id=%s role=%s", user.id, args.role)
        print(f"Created user '{email}' with role '{args.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    sys.exit(main())
