"""Tests for the create_user CLI script."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from support import make_sessionmaker
from taskboard.core.security import verify_password
from taskboard.scripts import create_user
from taskboard.services.users import UserRepository


class TestCreateUserScript(unittest.TestCase):
    def setUp(self) -> None:
        self.SessionLocal = make_sessionmaker()
        patcher_session = patch.object(create_user, "SessionLocal", self.SessionLocal)
        patcher_init = patch.object(create_user, "init_db")
        patcher_session.start()
        patcher_init.start()
        self.addCleanup(patcher_session.stop)
        self.addCleanup(patcher_init.stop)

    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = create_user.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_creates_user(self) -> None:
        code, out, _ = self._run("alice", "pw1", "Alice A", "a@x.com")
        self.assertEqual(code, 0)
        self.assertIn("Created user 'alice'", out)
        db = self.SessionLocal()
        try:
            user = UserRepository(db).find_by_username("alice")
            self.assertTrue(verify_password("pw1", user.password_hash))
        finally:
            db.close()

    def test_duplicate_fails(self) -> None:
        self._run("alice", "pw1", "Alice A", "a@x.com")
        code, _, err = self._run("alice", "pw2", "Other", "o@x.com")
        self.assertEqual(code, 1)
        self.assertIn("Username exists", err)

    def test_blank_field_fails(self) -> None:
        code, _, err = self._run("alice", "pw1", "   ", "a@x.com")
        self.assertEqual(code, 1)
        self.assertIn("All fields required", err)
