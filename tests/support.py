"""Shared test case: the FastAPI app wired to an in-memory SQLite database."""

import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from nonprofit.core.config import settings
from nonprofit.core.database import get_db
from nonprofit.core.security import create_access_token
from nonprofit.main import app
from nonprofit.models import Base
from nonprofit.services.users import ensure_owner

# One connection shared by every session so the in-memory database survives between them.
test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db() -> Generator[Session, None, None]:
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class ApiTestCase(unittest.TestCase):
    """Fresh schema per test; self.db for direct inspection, self.client for HTTP."""

    bootstrap_owner = False

    def setUp(self) -> None:
        Base.metadata.create_all(bind=test_engine)
        self.db = TestingSessionLocal()
        if self.bootstrap_owner:
            ensure_owner(self.db, settings)
        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        self.db.close()
        Base.metadata.drop_all(bind=test_engine)

    def owner_headers(self) -> dict[str, str]:
        return bearer(create_access_token(settings.OWNER_USERNAME))

    def user_headers(self, username: str = "volunteer-lead") -> dict[str, str]:
        return bearer(create_access_token(username))
