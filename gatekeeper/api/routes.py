"""
API handlers and the route table they are registered from.

Routes are declared as an explicit list of RouteSpec entries and turned into an
APIRouter by build_router(), so the table can be inspected and tested on its own.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Annotated, Any, NamedTuple

from fastapi import APIRouter, Depends, Request, Response, params
from fastapi.responses import PlainTextResponse
from fastapi.security import HTTPBearer

from gatekeeper.api.dependencies import (
    get_cookie_signer,
    get_session_signer,
    get_user_repository,
)
from gatekeeper.api.validation import validate_headers
from gatekeeper.core.config import Settings, get_settings
from gatekeeper.core.cookies import (
    CookieSigner,
    demo_cookie_kwargs,
    read_cookie_jar,
    session_cookie_kwargs,
)
from gatekeeper.core.security import (
    SessionSigner,
    authorize_role,
    extract_bearer,
    sign_session,
    verify_bearer,
    verify_session,
)
from gatekeeper.core.users import UserRepository
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

logger = logging.getLogger(__name__)

# Documents the bearerAuth scheme in OpenAPI; the token itself is read by extract_bearer.
bearer_scheme = HTTPBearer(auto_error=False, bearerFormat="JWT", scheme_name="bearerAuth")


class RouteSpec(NamedTuple):
    methods: tuple[str, ...]
    path: str
    endpoint: Callable[..., Any]
    response_model: Any = None
    dependencies: Sequence[params.Depends] = ()
    responses: dict[int | str, dict[str, Any]] | None = None
    tags: tuple[str, ...] = ("auth",)
    response_model_exclude_none: bool = False


def get_root() -> PlainTextResponse:
    """Root route; minimal plain-text greeting."""
    return PlainTextResponse("Hi")


def get_health(cfg: Annotated[Settings, Depends(get_settings)]) -> HealthResponse:
    """Return service health status. Used by load balancers and monitoring."""
    return HealthResponse(status="ok", environment=cfg.APP_ENV)


def get_public() -> MessageResponse:
    return MessageResponse(message="This is public information")


def echo_private(body: Credentials) -> Credentials:
    """Echo the submitted credentials once they pass schema validation."""
    return body


def get_verify_secret(
    request: Request,
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> VerifySecretResponse:
    """
    Resolve the Authorization: Bearer <secret> header to a user.
    Missing or unknown tokens raise AuthError, returned as 401 {"error": ...}.
    """
    user = verify_bearer(extract_bearer(request.headers), users)
    return VerifySecretResponse(
        message="Token verified",
        user=CurrentUser(id=user.id, username=user.username, role=user.role),
    )


def echo_headers(
    headers: Annotated[
        RequiredAuthorizationHeaders,
        Depends(validate_headers(RequiredAuthorizationHeaders)),
    ],
) -> dict[str, Any]:
    return headers.model_dump()


def get_cookie(
    request: Request,
    response: Response,
    signer: Annotated[CookieSigner, Depends(get_cookie_signer)],
) -> dict[str, str | None]:
    """Echo the request cookie jar and set the signed demo cookie."""
    jar = read_cookie_jar(request.cookies, signer)
    response.set_cookie(**demo_cookie_kwargs(signer))
    return jar


def post_protected_route(
    body: Credentials,
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> MessageResponse:
    """
    Admin-only message, decided by username lookup alone.

    The password is never checked and no token is required: any caller who
    knows an admin username is granted access. Kept as-is; do not rely on it.
    """
    user = users.find_by_username(body.username)
    decision = authorize_role(user, "admin")
    logger.info("Protected route for username=%r: %s", body.username, decision.value)
    return MessageResponse(message=decision.value)


def get_jwt_sign_in(
    name: str,
    cfg: Annotated[Settings, Depends(get_settings)],
    signer: Annotated[SessionSigner, Depends(get_session_signer)],
) -> PlainTextResponse:
    """Sign {"name": name} into a session token and store it in the session cookie."""
    token = sign_session(signer, {"name": name})
    response = PlainTextResponse(f"Sign in as {token}")
    response.set_cookie(**session_cookie_kwargs(cfg, token))
    return response


def get_profile(
    request: Request,
    cfg: Annotated[Settings, Depends(get_settings)],
    signer: Annotated[SessionSigner, Depends(get_session_signer)],
) -> PlainTextResponse:
    seed = verify_session(signer, request.cookies.get(cfg.SESSION_COOKIE_NAME))
    if seed is None or "name" not in seed:
        logger.info("Profile rejected: missing or invalid session cookie")
        return PlainTextResponse("Unauthorized", status_code=401)
    return PlainTextResponse(f"Hello {seed['name']}")


def get_cookie_check(
    request: Request,
    cfg: Annotated[Settings, Depends(get_settings)],
    signer: Annotated[SessionSigner, Depends(get_session_signer)],
) -> CookieCheckResponse:
    token = request.cookies.get(cfg.SESSION_COOKIE_NAME)
    if verify_session(signer, token) is None:
        return CookieCheckResponse(authenticated=False)
    return CookieCheckResponse(authenticated=True, token=token)


_UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Missing or invalid bearer token"}}
_TEXT = {200: {"content": {"text/plain": {}}}}

# Mounted at the application root, outside API_PREFIX.
ROOT_ROUTES: tuple[RouteSpec, ...] = (
    RouteSpec(("GET",), "/", get_root, None, responses=_TEXT, tags=("root",)),
)

ROUTES: tuple[RouteSpec, ...] = (
    RouteSpec(("GET",), "/health", get_health, HealthResponse, tags=("health",)),
    RouteSpec(("GET",), "/public", get_public, MessageResponse),
    # One entry per method keeps OpenAPI operation ids unique.
    RouteSpec(("GET",), "/private", echo_private, Credentials),
    RouteSpec(("POST",), "/private", echo_private, Credentials),
    RouteSpec(
        ("GET",),
        "/verify-secret",
        get_verify_secret,
        VerifySecretResponse,
        dependencies=(Depends(bearer_scheme),),
        responses=_UNAUTHORIZED,
    ),
    RouteSpec(("POST",), "/headers", echo_headers, dict[str, Any]),
    RouteSpec(("GET",), "/cookie", get_cookie, dict[str, str | None]),
    RouteSpec(("POST",), "/protected_route", post_protected_route, MessageResponse),
    RouteSpec(("GET",), "/jwt/{name}", get_jwt_sign_in, None, responses=_TEXT),
    RouteSpec(
        ("GET",),
        "/profile",
        get_profile,
        None,
        responses={**_TEXT, 401: {"description": "Unauthorized"}},
    ),
    RouteSpec(
        ("GET",),
        "/cookie-check",
        get_cookie_check,
        CookieCheckResponse,
        response_model_exclude_none=True,
    ),
)


def build_router(routes: Sequence[RouteSpec] = ROUTES) -> APIRouter:
    """Register every RouteSpec on a fresh APIRouter, in table order."""
    router = APIRouter()
    seen: set[tuple[str, str]] = set()
    for route in routes:
        for method in route.methods:
            key = (method, route.path)
            if key in seen:
                raise ValueError(f"Duplicate route: {method} {route.path}")
            seen.add(key)
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=list(route.methods),
            response_model=route.response_model,
            dependencies=list(route.dependencies),
            responses=route.responses,
            tags=list(route.tags),
            response_model_exclude_none=route.response_model_exclude_none,
        )
    return router
