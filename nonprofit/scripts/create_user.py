"""
Create a user or reset the owner password. Run from project root:
  python -m nonprofit.scripts.create_user USERNAME PASSWORD
  python -m nonprofit.scripts.create_user owner NEW_PASSWORD --reset
Only the owner may use owner-only routes; other users can log in but get 403 there.
"""
import argparse
import logging
import sys

from nonprofit.core.database import SessionLocal
from nonprofit.core.security import hash_password
from nonprofit.services.users import UserExistsError, create_user, find_by_username

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user (no registration UI).")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password (8-128 chars)")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Replace the password of an existing user instead of creating one",
    )
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > 255:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if len(args.password) < 8 or len(args.password) > 128:
        print("Password must be 8-128 characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        if args.reset:
            user = find_by_username(db, username)
            if user is None:
                print(f"User '{username}' does not exist.", file=sys.stderr)
                return 1
            user.password_hash = hash_password(args.password)
            db.commit()
            # Tokens already issued stay valid until they expire.
            logger.info("Password reset for user '%s'.", username)
            return 0
        try:
            create_user(db, username, hash_password(args.password))
        except UserExistsError as e:
            print(e.message, file=sys.stderr)
            return 1
        logger.info("Created user '%s'.", username)
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
