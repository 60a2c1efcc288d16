"""Tests for taskboard.services.users against an in-memory SQLite store."""

import unittest
from unittest.mock import MagicMock, patch

from sqlalchemy.exc import OperationalError

from support import make_sessionmaker
from taskboard.core.security import verify_password
from taskboard.services.errors import (
    CredentialError,
    DuplicateUsernameError,
    StorageError,
    ValidationError,
)
from taskboard.services.users import UserRepository


class UserRepositoryTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_sessionmaker()()
        self.users = UserRepository(self.db)

    def tearDown(self) -> None:
        self.db.close()


class TestCreateUser(UserRepositoryTestCase):
    def test_create_and_find(self) -> None:
        user_id = self.users.create_user("alice", "pw1", "Alice A", "a@x.com")
        self.assertIsInstance(user_id, int)

        user = self.users.find_by_username("alice")
        self.assertIsNotNone(user)
        self.assertEqual(user.id, user_id)
        self.assertEqual(user.full_name, "Alice A")
        self.assertEqual(user.email, "a@x.com")
        self.assertNotEqual(user.password_hash, "pw1")
        self.assertTrue(verify_password("pw1", user.password_hash))
        self.assertFalse(verify_password("pw2", user.password_hash))

    def test_ids_are_distinct(self) -> None:
        a = self.users.create_user("alice", "pw1", "Alice A", "a@x.com")
        b = self.users.create_user("bob", "pw2", "Bob B", "b@x.com")
        self.assertNotEqual(a, b)

    def test_missing_fields_rejected(self) -> None:
        cases = [
            ("", "pw1", "Alice A", "a@x.com"),
            ("alice", "", "Alice A", "a@x.com"),
            ("alice", "pw1", "", "a@x.com"),
            ("alice", "pw1", "Alice A", ""),
        ]
        for args in cases:
            with self.subTest(args=args):
                with self.assertRaises(ValidationError) as ctx:
                    self.users.create_user(*args)
                self.assertEqual(ctx.exception.message, "All fields required")
        self.assertIsNone(self.users.find_by_username("alice"))

    def test_duplicate_username(self) -> None:
        first_id = self.users.create_user("alice", "pw1", "Alice A", "a@x.com")
        with self.assertRaises(DuplicateUsernameError) as ctx:
            self.users.create_user("alice", "other", "Impostor", "evil@x.com")
        self.assertEqual(ctx.exception.message, "Username exists")

        user = self.users.find_by_username("alice")
        self.assertEqual(user.id, first_id)
        self.assertEqual(user.full_name, "Alice A")
        self.assertTrue(verify_password("pw1", user.password_hash))
        # the session is still usable after the rollback
        self.users.create_user("bob", "pw2", "Bob B", "b@x.com")

    def test_hashing_failure(self) -> None:
        with patch("taskboard.services.users.hash_password", side_effect=ValueError("boom")):
            with self.assertRaises(CredentialError):
                self.users.create_user("alice", "pw1", "Alice A", "a@x.com")

    def test_email_format_not_checked(self) -> None:
        self.users.create_user("alice", "pw1", "Alice A", "not an email")
        self.assertEqual(self.users.find_by_username("alice").email, "not an email")


class TestLookup(UserRepositoryTestCase):
    def test_unknown_username(self) -> None:
        self.assertIsNone(self.users.find_by_username("nobody"))

    def test_lookup_is_exact(self) -> None:
        self.users.create_user("alice", "pw1", "Alice A", "a@x.com")
        self.assertIsNone(self.users.find_by_username("ALICE"))
        self.assertIsNone(self.users.find_by_username("alic"))

    def test_get_by_id(self) -> None:
        user_id = self.users.create_user("alice", "pw1", "Alice A", "a@x.com")
        self.assertEqual(self.users.get(user_id).username, "alice")
        self.assertIsNone(self.users.get(user_id + 100))


class TestUpdateProfile(UserRepositoryTestCase):
    def test_overwrites_fields(self) -> None:
        user_id = self.users.create_user("alice", "pw1", "Alice A", "a@x.com")
        self.users.update_profile(user_id, "Alice Liddell", "alice@wonder.land")
        self.db.expire_all()
        user = self.users.get(user_id)
        self.assertEqual(user.full_name, "Alice Liddell")
        self.assertEqual(user.email, "alice@wonder.land")
        self.assertEqual(user.username, "alice")

    def test_missing_field_is_storage_error(self) -> None:
        user_id = self.users.create_user("alice", "pw1", "Alice A", "a@x.com")
        with self.assertRaises(StorageError) as ctx:
            self.users.update_profile(user_id, None, "a@x.com")
        self.assertEqual(ctx.exception.message, "Update failed")
        self.db.expire_all()
        self.assertEqual(self.users.get(user_id).full_name, "Alice A")

    def test_store_failure(self) -> None:
        session = MagicMock()
        session.commit.side_effect = OperationalError("UPDATE", {}, Exception("disk I/O error"))
        with self.assertRaises(StorageError):
            UserRepository(session).update_profile(1, "A", "a@x.com")
        session.rollback.assert_called_once()
