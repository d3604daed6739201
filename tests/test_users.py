"""Unit tests for gatekeeper.core.users: fixture set and linear lookups."""

import unittest

from pydantic import ValidationError

from gatekeeper.core.users import DEFAULT_USERS, InMemoryUserRepository, User, default_repository


def _user(id: int = 1, username: str = "a", secret: str = "s1", role: str = "basic") -> User:
    return User(id=id, username=username, password="pw", role=role, secret=secret)


class TestDefaultUsers(unittest.TestCase):
    def test_two_fixture_users(self) -> None:
        self.assertEqual(len(default_repository), 2)
        self.assertEqual([u.username for u in default_repository], ["admin", "user"])
        self.assertEqual(DEFAULT_USERS[0].role, "admin")
        self.assertEqual(DEFAULT_USERS[1].role, "basic")

    def test_find_by_username(self) -> None:
        self.assertEqual(default_repository.find_by_username("admin").id, 1)
        self.assertIsNone(default_repository.find_by_username("nobody"))
        self.assertIsNone(default_repository.find_by_username("Admin"))

    def test_find_by_secret(self) -> None:
        self.assertEqual(default_repository.find_by_secret("admin-secret-123").username, "admin")
        self.assertIsNone(default_repository.find_by_secret("admin123"))


class TestRepositoryInvariants(unittest.TestCase):
    """Usernames, secrets and ids are unique keys."""

    def test_duplicate_username_rejected(self) -> None:
        with self.assertRaises(ValueError):
            InMemoryUserRepository([_user(1, "a", "s1"), _user(2, "a", "s2")])

    def test_duplicate_secret_rejected(self) -> None:
        with self.assertRaises(ValueError):
            InMemoryUserRepository([_user(1, "a", "s1"), _user(2, "b", "s1")])

    def test_duplicate_id_rejected(self) -> None:
        with self.assertRaises(ValueError):
            InMemoryUserRepository([_user(1, "a", "s1"), _user(1, "b", "s2")])

    def test_users_are_immutable(self) -> None:
        user = _user()
        with self.assertRaises(ValidationError):
            user.role = "admin"

    def test_invalid_role_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _user(role="root")

    def test_non_positive_id_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _user(id=0)


if __name__ == "__main__":
    unittest.main()
