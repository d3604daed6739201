"""Signed cookie values and per-endpoint cookie attribute presets."""

from collections.abc import Mapping
from typing import Any

from itsdangerous import BadSignature, Signer

from gatekeeper.core.config import Settings

COOKIE_SALT = "gatekeeper-cookie-v1"

# Cookies whose values are written signed; the jar echo unsigns these.
SIGNED_COOKIES = frozenset({"name"})

DEMO_COOKIE_NAME = "name"
DEMO_COOKIE_VALUE = "gatekeeper"
DEMO_COOKIE_MAX_AGE_SEC = 3600


class CookieSigner:
    """Sign and unsign cookie values with a shared secret (itsdangerous)."""

    def __init__(self, secret: str) -> None:
        self._signer = Signer(secret_key=secret, salt=COOKIE_SALT)

    def sign(self, value: str) -> str:
        return self._signer.sign(value).decode("utf-8")

    def unsign(self, value: str | None) -> str | None:
        if not value:
            return None
        try:
            return self._signer.unsign(value).decode("utf-8")
        except (BadSignature, UnicodeDecodeError):
            return None


def read_cookie_jar(cookies: Mapping[str, str], signer: CookieSigner) -> dict[str, str | None]:
    """Echo a request cookie jar; signed cookies are unsigned, tampered ones become None."""
    jar: dict[str, str | None] = {}
    for key, value in cookies.items():
        jar[key] = signer.unsign(value) if key in SIGNED_COOKIES else value
    return jar


def demo_cookie_kwargs(signer: CookieSigner) -> dict[str, Any]:
    # Flags are this endpoint's own contract; not shared with the session cookie.
    return {
        "key": DEMO_COOKIE_NAME,
        "value": signer.sign(DEMO_COOKIE_VALUE),
        "max_age": DEMO_COOKIE_MAX_AGE_SEC,
        "path": "/",
        "httponly": False,
        "secure": False,
    }


def session_cookie_kwargs(cfg: Settings, value: str) -> dict[str, Any]:
    return {
        "key": cfg.SESSION_COOKIE_NAME,
        "value": value,
        "max_age": cfg.SESSION_MAX_AGE_SEC,
        "path": "/",
        "httponly": True,
        "secure": cfg.COOKIE_SECURE,
        "samesite": "lax",
    }
