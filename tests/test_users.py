"""Credential store: owner bootstrap, user creation, and the create_user CLI."""

import unittest
from unittest.mock import MagicMock, patch

from pydantic import SecretStr

from nonprofit.core.security import hash_password, verify_password
from nonprofit.models import User
from nonprofit.scripts import create_user as create_user_cli
from nonprofit.services.users import (
    UserExistsError,
    authenticate,
    create_user,
    ensure_owner,
    find_by_username,
)
from tests.support import ApiTestCase, TestingSessionLocal


def _settings(password: str = "owner@123") -> MagicMock:
    settings = MagicMock()
    settings.OWNER_USERNAME = "owner"
    settings.OWNER_DEFAULT_PASSWORD = SecretStr(password)
    return settings


class TestEnsureOwner(ApiTestCase):
    def test_creates_owner_once(self) -> None:
        self.assertTrue(ensure_owner(self.db, _settings()))
        self.assertFalse(ensure_owner(self.db, _settings()))
        self.assertEqual(self.db.query(User).filter(User.username == "owner").count(), 1)

    def test_stores_hash_not_password(self) -> None:
        ensure_owner(self.db, _settings())
        owner = find_by_username(self.db, "owner")
        self.assertIsNotNone(owner)
        self.assertNotEqual(owner.password_hash, "owner@123")
        self.assertTrue(verify_password("owner@123", owner.password_hash))

    def test_existing_owner_password_is_left_alone(self) -> None:
        create_user(self.db, "owner", hash_password("changed-out-of-band"))
        self.assertFalse(ensure_owner(self.db, _settings()))
        self.assertIsNotNone(authenticate(self.db, "owner", "changed-out-of-band"))
        self.assertIsNone(authenticate(self.db, "owner", "owner@123"))


class TestCreateUser(ApiTestCase):
    def test_duplicate_username_raises_conflict(self) -> None:
        create_user(self.db, "editor", hash_password("secret-one"))
        with self.assertRaises(UserExistsError) as ctx:
            create_user(self.db, "editor", hash_password("secret-two"))
        self.assertEqual(ctx.exception.username, "editor")
        self.assertEqual(self.db.query(User).count(), 1)

    def test_authenticate(self) -> None:
        create_user(self.db, "editor", hash_password("secret-one"))
        self.assertEqual(authenticate(self.db, "editor", "secret-one").username, "editor")
        self.assertIsNone(authenticate(self.db, "editor", "secret-two"))
        self.assertIsNone(authenticate(self.db, "ghost", "secret-one"))


class TestCreateUserCli(ApiTestCase):
    @patch("nonprofit.scripts.create_user.SessionLocal", TestingSessionLocal)
    def test_creates_user(self) -> None:
        self.assertEqual(create_user_cli.main(["editor", "long-enough-pw"]), 0)
        self.assertIsNotNone(authenticate(self.db, "editor", "long-enough-pw"))

    @patch("nonprofit.scripts.create_user.SessionLocal", TestingSessionLocal)
    def test_duplicate_fails(self) -> None:
        self.assertEqual(create_user_cli.main(["editor", "long-enough-pw"]), 0)
        self.assertEqual(create_user_cli.main(["editor", "long-enough-pw"]), 1)

    @patch("nonprofit.scripts.create_user.SessionLocal", TestingSessionLocal)
    def test_reset_owner_password(self) -> None:
        ensure_owner(self.db, _settings())
        self.assertEqual(create_user_cli.main(["owner", "new-owner-pw", "--reset"]), 0)
        self.db.expire_all()
        self.assertIsNotNone(authenticate(self.db, "owner", "new-owner-pw"))

    def test_short_password_rejected(self) -> None:
        self.assertEqual(create_user_cli.main(["editor", "short"]), 1)


if __name__ == "__main__":
    unittest.main()
