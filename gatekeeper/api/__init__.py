"""API routes."""

from gatekeeper.api.routes import ROOT_ROUTES, ROUTES, build_router

router = build_router(ROUTES)
root_router = build_router(ROOT_ROUTES)

__all__ = ["ROOT_ROUTES", "ROUTES", "build_router", "root_router", "router"]
