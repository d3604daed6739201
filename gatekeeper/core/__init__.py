"""Core configuration, user repository, and credential verification."""

from gatekeeper.core.config import get_settings, settings
from gatekeeper.core.users import InMemoryUserRepository, User, UserRepository

__all__ = ["get_settings", "settings", "InMemoryUserRepository", "User", "UserRepository"]
