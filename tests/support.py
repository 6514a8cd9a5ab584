"""Shared test helpers: the application wired to an in-memory SQLite store."""

import unittest
from collections.abc import Generator
from typing import Any

from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from adonstreet.core.config import Settings
from adonstreet.core.database import get_db
from adonstreet.main import create_app
from adonstreet.models import Base

TEST_SECRET = "test-signing-secret-0123456789abcdef"

DANNY = {"userName": "danny", "emailId": "danny@gmail.com", "password": "danny@123"}


def make_settings(**overrides: Any) -> Settings:
    """Settings isolated from .env; cheap bcrypt cost so tests stay fast."""
    values: dict[str, Any] = {
        "JWT_SECRET": SecretStr(TEST_SECRET),
        "BCRYPT_ROUNDS": 4,
        "AUTH_ENABLED": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_sqlite_sessionmaker() -> tuple[Any, sessionmaker]:
    """Fresh in-memory database with all tables; one connection shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine, sessionmaker(autocommit=False, autoflush=False, bind=engine)


class ApiTestCase(unittest.TestCase):
    """Builds a new app and empty store per test. Subclasses may set settings_overrides."""

    settings_overrides: dict[str, Any] = {}

    def setUp(self) -> None:
        self.engine, self.SessionTest = make_sqlite_sessionmaker()
        self.settings = make_settings(**self.settings_overrides)
        self.app = create_app(self.settings)

        def override_get_db() -> Generator[Session, None, None]:
            db = self.SessionTest()
            try:
                yield db
            finally:
                db.close()

        self.app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(self.app)

    def tearDown(self) -> None:
        self.client.close()
        self.app.dependency_overrides.clear()
        self.engine.dispose()

    def register(self, **body: Any):
        payload = dict(DANNY)
        payload.update(body)
        return self.client.post("/Users/register", json=payload)

    def login(self, email_id: str = DANNY["emailId"], password: str = DANNY["password"]):
        return self.client.post("/Users/login", json={"emailId": email_id, "password": password})

    def auth_headers(self) -> dict[str, str]:
        """Register danny (if needed), log in and return a Bearer header."""
        self.register()
        resp = self.login()
        self.assertEqual(resp.status_code, 200, resp.text)
        return {"Authorization": f"Bearer {resp.json()['token']}"}
