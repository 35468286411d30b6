"""Credential store: user lookup, creation and the startup owner bootstrap."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from nonprofit.core.security import hash_password, verify_password
from nonprofit.models import User

if TYPE_CHECKING:
    from nonprofit.core.config import Settings

logger = logging.getLogger(__name__)


class UserExistsError(Exception):
    """Raised when creating a user whose username is already taken."""

    def __init__(self, username: str) -> None:
        self.username = username
        self.message = f"User '{username}' already exists."
        super().__init__(self.message)


def find_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def create_user(db: Session, username: str, password_hash: str) -> User:
    """
    Insert a user with an already-hashed password.

    Raises UserExistsError if the username is taken, whether seen by the
    lookup or by the unique index on insert.
    """
    if find_by_username(db, username) is not None:
        raise UserExistsError(username)
    user = User(username=username, password_hash=password_hash)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise UserExistsError(username) from e
    db.refresh(user)
    return user


def authenticate(db: Session, username: str, password: str) -> User | None:
    """Return the user when username and password match, else None."""
    user = find_by_username(db, username)
    if user is None:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def ensure_owner(db: Session, settings: "Settings") -> bool:
    """
    Create the owner account with the default password if it does not exist.

    Returns True when a row was created. Idempotent: safe to run on every startup.
    The default password must be changed out-of-band after first boot.
    """
    if find_by_username(db, settings.OWNER_USERNAME) is not None:
        return False
    try:
        create_user(
            db,
            settings.OWNER_USERNAME,
            hash_password(settings.OWNER_DEFAULT_PASSWORD.get_secret_value()),
        )
    except UserExistsError:
        # Another worker created it between the lookup and the insert.
        return False
    logger.info("Owner account created: username=%s", settings.OWNER_USERNAME)
    return True
