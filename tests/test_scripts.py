"""Tests for the init_db and create_user command-line helpers."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from helpers import make_engine
from maintenance.core.security import verify_password
from maintenance.models import User
from maintenance.schemas.auth import UserCreate
from maintenance.scripts.create_user import create_user
from maintenance.scripts.init_db import init_db


class TestInitDb(unittest.TestCase):
    def test_creates_tables_and_is_idempotent(self) -> None:
        engine = create_engine("sqlite://", poolclass=StaticPool)
        self.addCleanup(engine.dispose)
        self.assertEqual(init_db(engine), ["masters", "users"])
        self.assertEqual(init_db(engine), ["masters", "users"])
        self.assertEqual(sorted(inspect(engine).get_table_names()), ["masters", "users"])


@patch("maintenance.core.security.BCRYPT_ROUNDS", 4)
class TestCreateUser(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = make_engine()
        self.addCleanup(self.engine.dispose)

    def test_creates_user_with_hashed_password(self) -> None:
        out = io.StringIO()
        with Session(self.engine) as db, redirect_stdout(out):
            code = create_user(db, UserCreate(username="admin", password="pw", email="a@b.c"))
        self.assertEqual(code, 0)
        self.assertIn("Created user 'admin'", out.getvalue())
        with Session(self.engine) as db:
            user = db.query(User).filter(User.username == "admin").one()
            self.assertTrue(verify_password("pw", user.password_hash))
            self.assertEqual(user.email, "a@b.c")

    def test_existing_username_fails(self) -> None:
        with Session(self.engine) as db, redirect_stdout(io.StringIO()):
            create_user(db, UserCreate(username="admin", password="pw"))
        err = io.StringIO()
        with Session(self.engine) as db, redirect_stderr(err):
            code = create_user(db, UserCreate(username="admin", password="other"))
        self.assertEqual(code, 1)
        self.assertIn("already exists", err.getvalue())


if __name__ == "__main__":
    unittest.main()
