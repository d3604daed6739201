"""FastAPI dependencies that hand capabilities (users, signers) to handlers explicitly."""

from typing import Annotated

from fastapi import Depends

from gatekeeper.core.config import Settings, get_settings
from gatekeeper.core.cookies import CookieSigner
from gatekeeper.core.security import SessionSigner
from gatekeeper.core.users import UserRepository, default_repository


def get_user_repository() -> UserRepository:
    """Dependency returning the process-wide read-only user set."""
    return default_repository


def get_session_signer(
    cfg: Annotated[Settings, Depends(get_settings)],
) -> SessionSigner:
    """Dependency: JWT session signer keyed by JWT_SECRET."""
    return SessionSigner(cfg.JWT_SECRET.get_secret_value(), cfg.JWT_ALGORITHM)


def get_cookie_signer(
    cfg: Annotated[Settings, Depends(get_settings)],
) -> CookieSigner:
    """Dependency: signed-cookie codec keyed by COOKIE_SECRET."""
    return CookieSigner(cfg.COOKIE_SECRET.get_secret_value())
