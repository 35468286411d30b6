"""Settings validation and the health endpoint."""

import unittest

from pydantic import ValidationError

from nonprofit.core.config import DEFAULT_JWT_SECRET, Settings
from tests.support import ApiTestCase


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        s = Settings(_env_file=None)
        self.assertEqual(s.DB_POOL_SIZE, 10)
        self.assertEqual(s.JWT_EXPIRE_MINUTES, 60)
        self.assertEqual(s.OWNER_USERNAME, "owner")
        self.assertEqual(s.PAYMENT_CURRENCY, "usd")

    def test_owner_username_cannot_be_changed(self) -> None:
        for value in ("admin", "Owner", ""):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    Settings(_env_file=None, OWNER_USERNAME=value)
        self.assertEqual(Settings(_env_file=None, OWNER_USERNAME=" owner ").OWNER_USERNAME, "owner")

    def test_rejects_non_postgres_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="mysql://root@localhost/site")

    def test_prod_requires_changed_secret(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, APP_ENV="prod", JWT_SECRET=DEFAULT_JWT_SECRET)
        s = Settings(_env_file=None, APP_ENV="prod", JWT_SECRET="a-real-production-secret-value")
        self.assertEqual(s.APP_ENV, "prod")

    def test_currency_is_normalized(self) -> None:
        self.assertEqual(Settings(_env_file=None, PAYMENT_CURRENCY=" EUR ").PAYMENT_CURRENCY, "eur")
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, PAYMENT_CURRENCY="dollars")

    def test_pool_size_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DB_POOL_SIZE=0)


class TestHealth(ApiTestCase):
    def test_reports_connected_database(self) -> None:
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["database"], "connected")
        self.assertEqual(resp.json()["status"], "ok")

    def test_unknown_route_uses_error_body(self) -> None:
        resp = self.client.get("/no-such-route")
        self.assertEqual(resp.status_code, 404)
        self.assertIn("error", resp.json())


if __name__ == "__main__":
    unittest.main()
