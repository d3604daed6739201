"""Bearer-token verification, role checks, and JWT session signing."""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

import jwt

from gatekeeper.core.users import User, UserRepository

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class AuthError(Exception):
    """Authentication failed for the current request; maps to HTTP 401."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingCredential(AuthError):
    """No bearer token (or session cookie) was presented."""


class InvalidCredential(AuthError):
    """A credential was presented but matches no user or fails its signature check."""


class AccessDecision(str, Enum):
    """Outcome of a role check; the value is the response message."""

    GRANTED = "Access granted"
    DENIED = "Access denied"


def extract_bearer(headers: Mapping[str, str]) -> str | None:
    """
    Return the token after the literal 'Bearer ' prefix of the authorization header.
    Returns None when the header is absent or uses another scheme. No trimming.
    """
    value = headers.get("authorization")
    if value is None or not value.startswith(BEARER_PREFIX):
        return None
    return value[len(BEARER_PREFIX):]


def verify_bearer(token: str | None, users: UserRepository) -> User:
    """
    Resolve a bearer token to its user.
    Raises MissingCredential for None or empty, InvalidCredential when no user owns the secret.
    """
    if not token:
        logger.info("Bearer verification rejected: no token presented")
        raise MissingCredential("Bearer token required")
    user = users.find_by_secret(token)
    if user is None:
        logger.info("Bearer verification rejected: unknown token")
        raise InvalidCredential("Invalid token")
    return user


def authorize_role(user: User | None, required_role: str) -> AccessDecision:
    """Grant only when a user is present and carries exactly required_role."""
    if user is None or user.role != required_role:
        return AccessDecision.DENIED
    return AccessDecision.GRANTED


class SessionSigner:
    """
    HMAC JWT signer/verifier keyed by a shared secret.

    No exp or iat claims are added: the payload is exactly the seed, so signing
    is deterministic and expiry is left to the cookie max-age.
    """

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        if not secret:
            raise ValueError("SessionSigner secret must be non-empty")
        self._secret = secret
        self._algorithm = algorithm

    def sign(self, payload: Mapping[str, Any]) -> str:
        return jwt.encode(dict(payload), self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> dict[str, Any] | None:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.PyJWTError:
            return None
        if not isinstance(payload, dict):
            return None
        return payload


def sign_session(signer: SessionSigner, seed: Mapping[str, Any]) -> str:
    """Produce a tamper-evident session token encoding seed (e.g. {"name": ...})."""
    return signer.sign(seed)


def verify_session(signer: SessionSigner, value: str | None) -> dict[str, Any] | None:
    """Return the signed seed, or None for a missing, malformed, or tampered value."""
    if not value:
        return None
    seed = signer.verify(value)
    if seed is None:
        logger.info("Session verification rejected: bad signature or malformed token")
    return seed
