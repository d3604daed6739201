"""FastAPI application entrypoint. No business logic; only wiring and error mapping."""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gatekeeper.api import root_router
from gatekeeper.api import router as api_router
from gatekeeper.core.config import settings
from gatekeeper.core.security import AuthError

app = FastAPI(
    title="Gatekeeper Server App Documentation",
    version="1.0.0",
    docs_url=settings.DOCS_PATH,
    openapi_url=f"{settings.DOCS_PATH}/openapi.json",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AuthError)
async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    """Map verifier failures to 401 with a small JSON error body."""
    return JSONResponse(
        status_code=401,
        content={"error": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


app.include_router(root_router)
app.include_router(api_router, prefix=settings.API_PREFIX)
