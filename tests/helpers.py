"""Shared fixtures for API tests: in-memory SQLite app, temporary signing key, token helpers."""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from maintenance.core.config import Settings
from maintenance.core.security import create_access_token
from maintenance.main import create_app
from maintenance.models import Base

SIGNING_KEY = b"test-signing-key-5b1f0c8e2d4a4e7f9c3b6a1d0e8f7a2c"


def make_settings(key_path: Path, **overrides: object) -> Settings:
    """Settings isolated from the developer's .env file."""
    values: dict[str, object] = {
        "DATABASE_URL": "sqlite://",
        "JWT_KEY_PATH": str(key_path),
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_engine():
    """One shared in-memory SQLite connection so the app and the test see the same tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


class ApiTestCase(unittest.TestCase):
    """Builds a fresh app per test with its own database and key file."""

    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.key_path = Path(tmp.name) / "private.key"
        self.key_path.write_bytes(SIGNING_KEY)

        # Cheap hashes keep the suite fast; bcrypt's minimum cost is 4.
        rounds = patch("maintenance.core.security.BCRYPT_ROUNDS", 4)
        rounds.start()
        self.addCleanup(rounds.stop)

        self.settings = make_settings(self.key_path)
        self.engine = make_engine()
        self.addCleanup(self.engine.dispose)
        self.app = create_app(self.settings, engine=self.engine)
        self.client = TestClient(self.app)

    def session(self) -> Session:
        return Session(self.engine)

    def token(self, username: str = "alice") -> str:
        return create_access_token(username, self.settings)

    def auth_headers(self, username: str = "alice") -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token(username)}"}
