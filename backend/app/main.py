"""
Users API Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       that owns its own UserStore (app.state.store).
Who:   Called by uvicorn (uvicorn app.main:app), by `python -m app`, and by
       the test suite (one fresh app, and so one fresh store, per test).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │ Sec. Headers │→│ Req ID   │→│  Logging        │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌────────────────┐ ┌───────────┐  │
    │  │ GET /        │ │ /api/users ... │ │ GET health│  │
    │  └──────────────┘ └────────────────┘ └───────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ ValidationError→400 │ NotFound→404 │ *→500   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:   configure logging, log bind address and seeded record count
    Shutdown:  log the final record count (the store is discarded, not saved)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.exceptions import ValidationError, NotFoundError
from app.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.security_headers import SECURITY_HEADERS, SecurityHeadersMiddleware
from app.routes import health, users
from app.store import UserStore

logger = logging.getLogger(__name__)

# Body of every 500 response
SERVER_ERROR = "Something went wrong!"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] app.services.user_service: User 3 created
    Output: stdout (captured by Docker / the process supervisor)
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing logging config
    )

    # usersapi.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    Code before `yield` runs on startup, code after it on shutdown.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("%s %s starting up...", settings.app_name, __version__)
    logger.info("User store seeded with %d records", len(app.state.store))
    logger.info("Server ready at http://%s:%d", settings.host, settings.port)
    logger.info("Health check: http://%s:%d/health", settings.host, settings.port)
    logger.info("=" * 60)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("%s shutting down...", settings.app_name)
    logger.info("Discarding %d in-memory user records", len(app.state.store))
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def server_error_response(message: str, request_id: str = "") -> JSONResponse:
    """
    The 500 envelope.

    Starlette's ServerErrorMiddleware answers unhandled exceptions outside the
    user middleware, so the request ID and hardening headers are set here
    rather than left to RequestIDMiddleware / SecurityHeadersMiddleware.
    """
    headers = dict(SECURITY_HEADERS) if settings.security_headers else {}
    if request_id:
        headers[REQUEST_ID_HEADER] = request_id
    return JSONResponse(
        status_code=500,
        content={"error": SERVER_ERROR, "message": message},
        headers=headers,
    )


def current_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "") or request_id_var.get("")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError         → 400 {"error": message}
        NotFoundError           → 404 {"error": message}
        RequestValidationError  → 500 (undecodable or mistyped request body)
        Exception (fallback)    → 500 {"error": "Something went wrong!", "message": str(exc)}

    Any other UsersAPIError subclass falls through to the catch-all.
    Context dicts and stack traces are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        """Client omitted a required field."""
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        """Requested record doesn't exist."""
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_bad_body(request: Request, exc: RequestValidationError):
        """
        The request body could not be decoded or has the wrong field types.

        Reported through the generic 500 envelope with a readable summary of
        each problem, e.g. "body.name: Input should be a valid string".
        """
        rid = current_request_id(request)
        problems = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", ()))
            problems.append(f"{location}: {error.get('msg', 'invalid')}")
        message = "; ".join(problems) or "Invalid request"
        logger.warning("[%s] Malformed request: %s", rid, message)
        return server_error_response(message, request_id=rid)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for truly unexpected errors.

        The exception text is returned; the stack trace is logged only.
        """
        rid = current_request_id(request)
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,  # Log full stack trace for debugging
        )
        return server_error_response(str(exc), request_id=rid)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: UserStore | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Backing collection for /api/users. Defaults to a freshly
               seeded UserStore; one store lives exactly as long as its app.

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title=settings.app_name,
        description="In-memory CRUD service for user records.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.store = store if store is not None else UserStore.seeded()

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = outermost)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=500)

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(RequestIDMiddleware)

    if settings.security_headers:
        app.add_middleware(SecurityHeadersMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(users.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `app.main:app` to be importable
app = create_app()
