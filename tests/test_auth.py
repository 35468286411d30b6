"""Login endpoint and the two-stage guard (authentication, then owner check)."""

import unittest
from datetime import UTC, datetime, timedelta

from fastapi import HTTPException

from nonprofit.api.v1.auth import get_current_user, require_owner
from nonprofit.core.security import create_access_token
from nonprofit.models import Event
from nonprofit.schemas.auth import CurrentUser
from tests.support import ApiTestCase, bearer

EVENT_BODY = {
    "title": "Spring Gala",
    "description": "Annual fundraiser",
    "date": "2025-04-12",
    "time": "18:30",
    "venue": "Town Hall",
}


class TestLogin(ApiTestCase):
    bootstrap_owner = True

    def test_default_owner_credentials_return_usable_token(self) -> None:
        resp = self.client.post("/login", json={"username": "owner", "password": "owner@123"})
        self.assertEqual(resp.status_code, 200)
        token = resp.json()["token"]

        created = self.client.post("/create-event", json=EVENT_BODY, headers=bearer(token))
        self.assertEqual(created.status_code, 201)

    def test_wrong_password_is_401_invalid_credentials(self) -> None:
        resp = self.client.post("/login", json={"username": "owner", "password": "wrong"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Invalid credentials"})

    def test_unknown_user_is_401_invalid_credentials(self) -> None:
        resp = self.client.post("/login", json={"username": "nobody", "password": "owner@123"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "Invalid credentials"})

    def test_missing_password_is_400(self) -> None:
        resp = self.client.post("/login", json={"username": "owner"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "All fields are required"})


class TestOwnerOnlyRoute(ApiTestCase):
    """The guard runs before the handler and stops at the first failing stage."""

    def _event_count(self) -> int:
        return self.db.query(Event).count()

    def test_no_bearer_header_is_401(self) -> None:
        resp = self.client.post("/create-event", json=EVENT_BODY)
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.headers.get("www-authenticate"), "Bearer")
        self.assertIn("error", resp.json())
        self.assertEqual(self._event_count(), 0)

    def test_missing_header_wins_over_invalid_body(self) -> None:
        resp = self.client.post("/create-event", json={})
        self.assertEqual(resp.status_code, 401)

    def test_invalid_token_is_403(self) -> None:
        resp = self.client.post("/create-event", json=EVENT_BODY, headers=bearer("garbage"))
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(self._event_count(), 0)

    def test_malformed_authorization_header_is_403(self) -> None:
        for value in ("Bearer", "Token abc.def.ghi", "abc.def.ghi"):
            with self.subTest(value=value):
                resp = self.client.post(
                    "/create-event", json=EVENT_BODY, headers={"Authorization": value}
                )
                self.assertEqual(resp.status_code, 403)
                self.assertEqual(resp.json(), {"error": "Invalid or expired token"})
        self.assertEqual(self._event_count(), 0)

    def test_owner_token_under_other_scheme_is_403(self) -> None:
        token = self.owner_headers()["Authorization"].removeprefix("Bearer ")
        resp = self.client.post(
            "/create-event", json=EVENT_BODY, headers={"Authorization": f"Token {token}"}
        )
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(self._event_count(), 0)

    def test_expired_owner_token_is_403(self) -> None:
        stale = create_access_token("owner", now=datetime.now(UTC) - timedelta(hours=2))
        resp = self.client.post("/create-event", json=EVENT_BODY, headers=bearer(stale))
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(self._event_count(), 0)

    def test_non_owner_token_is_403_with_message(self) -> None:
        resp = self.client.post("/create-event", json=EVENT_BODY, headers=self.user_headers())
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"error": "Only the owner can perform this action."})
        self.assertEqual(self._event_count(), 0)

    def test_owner_token_runs_handler(self) -> None:
        resp = self.client.post("/create-event", json=EVENT_BODY, headers=self.owner_headers())
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(self._event_count(), 1)
        self.assertEqual(self.db.query(Event).one().created_by, "owner")

    def test_token_works_without_user_row(self) -> None:
        # Verification is stateless; the users table is empty in this test case.
        resp = self.client.delete("/delete-event/999", headers=self.owner_headers())
        self.assertEqual(resp.status_code, 404)

    def test_every_owner_route_is_guarded(self) -> None:
        calls = [
            ("post", "/create-event"),
            ("put", "/update-event/1"),
            ("delete", "/delete-event/1"),
            ("post", "/add-director"),
            ("put", "/edit-director/1"),
            ("delete", "/delete-director/1"),
        ]
        for method, path in calls:
            with self.subTest(path=path):
                anonymous = getattr(self.client, method)(path)
                self.assertEqual(anonymous.status_code, 401)
                not_owner = getattr(self.client, method)(path, headers=self.user_headers())
                self.assertEqual(not_owner.status_code, 403)


class TestGuardDependencies(unittest.TestCase):
    """get_current_user and require_owner called directly with the raw header value."""

    def test_missing_header_raises_401(self) -> None:
        with self.assertRaises(HTTPException) as ctx:
            get_current_user(None)
        self.assertEqual(ctx.exception.status_code, 401)

    def test_bad_token_raises_403(self) -> None:
        with self.assertRaises(HTTPException) as ctx:
            get_current_user("Bearer abc.def.ghi")
        self.assertEqual(ctx.exception.status_code, 403)

    def test_unusable_header_raises_403(self) -> None:
        for value in ("Bearer", "Bearer   ", "Token abc.def.ghi", "abc.def.ghi"):
            with self.subTest(value=value):
                with self.assertRaises(HTTPException) as ctx:
                    get_current_user(value)
                self.assertEqual(ctx.exception.status_code, 403)

    def test_valid_token_returns_claims(self) -> None:
        header = f"Bearer {create_access_token('owner')}"
        self.assertEqual(get_current_user(header), CurrentUser(username="owner"))

    def test_scheme_is_case_insensitive(self) -> None:
        header = f"bearer {create_access_token('owner')}"
        self.assertEqual(get_current_user(header), CurrentUser(username="owner"))

    def test_require_owner_rejects_other_usernames(self) -> None:
        for username in ("Owner", "owner ", "admin"):
            with self.subTest(username=username):
                with self.assertRaises(HTTPException) as ctx:
                    require_owner(CurrentUser(username=username))
                self.assertEqual(ctx.exception.status_code, 403)

    def test_require_owner_passes_owner_through(self) -> None:
        owner = CurrentUser(username="owner")
        self.assertIs(require_owner(owner), owner)


if __name__ == "__main__":
    unittest.main()
