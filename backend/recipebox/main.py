"""
RecipeBox Backend: FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn recipebox.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌──────┐        │
    │  │  Req ID  │→│ Logging  │→│ GZip │→│ CORS │        │
    │  └──────────┘ └──────────┘ └──────┘ └──────┘        │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────────────┐ ┌─────────────────────┐ │
    │  │ GET/POST/PUT/DELETE    │ │ GET /  GET /health  │ │
    │  │ /recipes[/{id}]        │ │                     │ │
    │  └────────────────────────┘ └─────────────────────┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ DB/other→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Validate configuration (log problems, keep serving)
    3. Create the MongoDB client and attach client + database to app.state
    4. Ping the store and log the result

    Shutdown:
    1. Close the MongoDB client (releases pooled connections)
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
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from recipebox import __version__
from recipebox.config import settings
from recipebox.database import (
    close_client,
    create_client,
    get_client_database,
    ping_database,
)
from recipebox.exceptions import (
    DatabaseError,
    NotFoundError,
    RecipeBoxError,
    ValidationError,
)
from recipebox.middleware.logging import RequestLoggingMiddleware
from recipebox.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from recipebox.routes import health, recipes

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    When:   Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Third-party loggers that are chatty at INFO/DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Connects the document store on startup and closes it on shutdown.

    The client and database handles are stored on `app.state`; request
    handlers reach them through `recipebox.database.get_database`.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("RecipeBox Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))
        logger.error("Fix the configuration and restart the server.")

    client = None
    app.state.db = None
    try:
        client = create_client()
    except PyMongoError as e:
        # Malformed or empty MONGO_URI: keep serving so /health reports 503
        logger.error("Could not create the MongoDB client: %s", str(e))
    else:
        app.state.db = get_client_database(client)
    app.state.mongo_client = client

    if app.state.db is None:
        logger.error("No database configured; recipe endpoints will answer 500")
    elif await ping_database(app.state.db):
        logger.info("Connected to MongoDB database '%s'", settings.mongo_db_name)
    else:
        # Keep serving: /health reports the outage and recipe routes answer 500
        logger.error("MongoDB is unreachable; recipe endpoints will fail until it recovers")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("RecipeBox Backend shutting down...")
    if client is not None:
        await close_client(client)
    app.state.mongo_client = None
    app.state.db = None
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    # The catch-all handler runs outside the middleware stack, after the
    # ContextVar is reset; request.state still carries the ID there.
    return request_id_var.get("") or getattr(request.state, "request_id", "")


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: dict | None = None,
) -> JSONResponse:
    rid = _request_id(request)
    content = {"error": error, "message": message, "request_id": rid}
    if details:
        content["details"] = details
    headers = {REQUEST_ID_HEADER: rid} if rid else None
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError          → 400 Bad Request (includes malformed ids)
        RequestValidationError   → 400 Bad Request (body is not a recipe object)
        NotFoundError            → 404 Not Found
        DatabaseError            → 500 Internal Server Error
        RecipeBoxError (base)    → 500 Internal Server Error
        StarletteHTTPException   → its own status (unknown route, wrong method)
        Exception (fallback)     → 500 Internal Server Error

    Every response carries a JSON body; server-side details (driver errors,
    stack traces) go to the log only.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", _request_id(request), exc.message)
        return _error_response(request, 400, "validation_error", exc.message, exc.context)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        logger.warning("[%s] Malformed request body: %s", _request_id(request), errors)
        return _error_response(
            request, 400, "validation_error", "Request body is not valid", {"errors": errors}
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(request, 404, "not_found", exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s", _request_id(request), exc.message, exc.context
        )
        return _error_response(
            request, 500, "server_error", "An internal error occurred. Please try again later."
        )

    @app.exception_handler(RecipeBoxError)
    async def handle_recipebox_error(request: Request, exc: RecipeBoxError):
        logger.error(
            "[%s] Application error: %s | Context: %s", _request_id(request), exc.message, exc.context
        )
        return _error_response(request, 500, "server_error", exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        error = "not_found" if exc.status_code == 404 else "http_error"
        return _error_response(request, exc.status_code, error, str(exc.detail))

    # Runs in ServerErrorMiddleware, outside CORSMiddleware: cross-origin
    # browsers see this 500 as a CORS failure rather than the JSON body.
    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            _request_id(request),
            str(exc),
            exc_info=True,
        )
        return _error_response(
            request,
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="RecipeBox API",
        description=(
            "CRUD API for recipes stored in MongoDB. Recipes embed a snapshot of "
            "their cuisine and tag documents, resolved by name at write time."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(recipes.router)

    return app


# uvicorn expects `recipebox.main:app` to be importable
app = create_app()
