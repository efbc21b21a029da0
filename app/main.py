"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() function returns configured app
   - Each app owns its own store, so tests get a fresh one per app

2. Lifespan Events
   - startup: create the in-memory store, its tables and sample data
   - shutdown: dispose of the engine (the store's contents go with it)

3. Exception Handlers
   - BookValidationError → 400 {"error": ...}
   - BookNotFoundError → 404, empty body
   - Database and unexpected errors → 500, logged
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.config import Settings, get_settings
from app.database import create_db_engine, create_session_factory, create_tables
from app.exceptions import BookNotFoundError, BookValidationError
from app.routers import books_router
from app.seed import seed_books
from app.services.book_store import BookStore

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Application Factory
# =============================================================================
def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use; defaults to the cached get_settings()

    Returns:
        Configured FastAPI application instance
    """
    app_settings = app_settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        Application lifespan context manager.

        Code before yield runs on startup, code after yield on shutdown.
        The engine and session factory live on app.state for the lifetime
        of the application; nothing about the store is module-global.
        """
        # ----- STARTUP -----
        logger.info(f"Starting {app_settings.app_name}...")
        logger.info(f"Debug mode: {app_settings.debug}")

        engine = create_db_engine(app_settings.database_url, echo=app_settings.debug)
        create_tables(engine)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)

        if app_settings.seed_sample_data:
            with app.state.session_factory() as db:
                seed_books(BookStore(db))

        yield  # Application runs here

        # ----- SHUTDOWN -----
        logger.info(f"Shutting down {app_settings.app_name}...")
        engine.dispose()

    app = FastAPI(
        title=app_settings.app_name,
        description="""
## Book Store API

A RESTful API for managing a collection of books.

### Features
- **Books**: Create, read, update and delete books
- **Pagination**: Title-ordered pages of up to 100 books
- **Hypermedia**: Every response links to the actions available next

The store is kept in memory and is empty again after a restart.
        """,
        version=app_settings.api_version,
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(BookValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: BookValidationError,
    ) -> JSONResponse:
        """Missing or blank required field."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": exc.message},
        )

    @app.exception_handler(BookNotFoundError)
    async def not_found_exception_handler(
        request: Request,
        exc: BookNotFoundError,
    ) -> Response:
        """Unknown book id. The 404 carries no body."""
        logger.debug(str(exc))
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error for debugging while hiding details from users.
        """
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "A database error occurred. Please try again later."
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if app_settings.debug:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(books_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the store is reachable.",
    )
    def health_check(request: Request) -> dict:
        """Health check endpoint, also reports how many books are stored."""
        with request.app.state.session_factory() as db:
            book_count = BookStore(db).count()

        return {
            "status": "healthy",
            "app": app_settings.app_name,
            "version": app_settings.api_version,
            "environment": app_settings.environment,
            "books": book_count,
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {app_settings.app_name}",
            "version": app_settings.api_version,
            "books": "/api/books",
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn app.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# Run directly with: python -m app.main
# The store is per process, so run a single worker.

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
