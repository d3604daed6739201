"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """Username and password body (private echo and protected route)."""

    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password; echoed or ignored, never checked")


class CurrentUser(BaseModel):
    """Authenticated user (id, username, role); never includes password or secret."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str


class VerifySecretResponse(BaseModel):
    """Response for GET /verify-secret."""

    message: str = Field(default="Token verified")
    user: CurrentUser


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Body of every 401 raised by the verifier."""

    error: str


class CookieCheckResponse(BaseModel):
    """Whether the session cookie carries a valid token; token echoed only when valid."""

    authenticated: bool
    token: str | None = None
