"""Tests for the create_user script (seeding accounts with a role)."""

import unittest
from unittest.mock import patch

from adonstreet.core.security import verify_password
from adonstreet.models import User
from adonstreet.scripts import create_user
from tests.support import make_settings, make_sqlite_sessionmaker


class TestCreateUser(unittest.TestCase):
    def setUp(self) -> None:
        self.engine, self.SessionTest = make_sqlite_sessionmaker()
        patches = [
            patch.object(create_user, "SessionLocal", self.SessionTest),
            patch.object(create_user, "get_settings", return_value=make_settings()),
        ]
        for p in patches:
            p.start()
            self.addCleanup(p.stop)
        self.addCleanup(self.engine.dispose)

    def test_creates_admin(self) -> None:
        rc = create_user.main(["root@adonstreet.in", "Site Admin", "s3cret", "admin"])
        self.assertEqual(rc, 0)
        with self.SessionTest() as db:
            user = db.query(User).filter(User.email_id == "root@adonstreet.in").one()
            self.assertEqual(user.role, "admin")
            self.assertEqual(user.user_name, "Site Admin")
            self.assertTrue(verify_password("s3cret", user.password_hash))

    def test_default_role_is_user(self) -> None:
        self.assertEqual(create_user.main(["a@x.com", "A", "pw"]), 0)
        with self.SessionTest() as db:
            self.assertEqual(db.query(User).one().role, "user")

    def test_duplicate_email_fails(self) -> None:
        self.assertEqual(create_user.main(["a@x.com", "A", "pw"]), 0)
        with patch("sys.stderr"):
            self.assertEqual(create_user.main(["a@x.com", "B", "pw"]), 1)
        with self.SessionTest() as db:
            self.assertEqual(db.query(User).count(), 1)

    def test_blank_email_fails(self) -> None:
        with patch("sys.stderr"):
            self.assertEqual(create_user.main(["   ", "A", "pw"]), 1)


if __name__ == "__main__":
    unittest.main()
