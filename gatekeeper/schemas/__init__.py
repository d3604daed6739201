"""Pydantic request/response schemas."""

from gatekeeper.schemas.auth import (
    CookieCheckResponse,
    Credentials,
    CurrentUser,
    ErrorResponse,
    MessageResponse,
    VerifySecretResponse,
)
from gatekeeper.schemas.headers import RequiredAuthorizationHeaders
from gatekeeper.schemas.health import HealthResponse

__all__ = [
    "CookieCheckResponse",
    "Credentials",
    "CurrentUser",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "RequiredAuthorizationHeaders",
    "VerifySecretResponse",
]
