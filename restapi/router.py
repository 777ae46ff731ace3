"""Application configuration and router setup."""

import logging
from typing import Optional

import fastapi
from fastapi import Request, status
from fastapi.middleware import cors
from fastapi.responses import JSONResponse

from components.core import errors
from components.core import init_db
from components.core.config import Settings, get_settings
from components.core.database import DatabaseManager
from restapi.endpoints import auth, category, cron, health_check, transaction

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    errors.ValidationError: status.HTTP_400_BAD_REQUEST,
    errors.ConflictError: status.HTTP_409_CONFLICT,
}


async def domain_error_handler(request: Request, exc: errors.DomainError) -> JSONResponse:
    """Render domain errors raised by repositories."""
    status_code = next(
        (code for error_type, code in ERROR_STATUS.items() if isinstance(exc, error_type)),
        status.HTTP_400_BAD_REQUEST,
    )
    logger.info("%s on %s %s: %s", exc.__class__.__name__, request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app(
    db_manager: Optional[DatabaseManager] = None,
    settings: Optional[Settings] = None,
) -> fastapi.FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    app = fastapi.FastAPI(
        title="Finance Tracker",
        description="Personal finance tracking API",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=init_db.lifespan,
    )
    app.state.settings = settings

    # Initialize database
    init_db.init_db(app, db_manager or DatabaseManager(settings=settings))

    # Add CORS middleware
    app.add_middleware(
        cors.CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(errors.DomainError, domain_error_handler)

    # Include routers
    app.include_router(health_check.router)
    app.include_router(auth.router)
    app.include_router(category.router)
    app.include_router(transaction.router)
    app.include_router(cron.router)

    return app
