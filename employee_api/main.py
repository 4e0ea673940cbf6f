"""Employee API — FastAPI Application Factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from employee_api import __version__
from employee_api.benefits.router import router as benefits_router
from employee_api.common.exceptions import register_exception_handlers
from employee_api.common.log_config import configure_logging
from employee_api.common.rate_limit import limiter
from employee_api.config import settings
from employee_api.database import async_session_factory, init_models
from employee_api.employees.router import router as employees_router
from employee_api.seed import seed_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown events."""
    await init_models()
    if settings.SEED_ON_STARTUP:
        async with async_session_factory() as session:
            await seed_database(session)
            await session.commit()
    logger.info("Employee API started (environment=%s)", settings.ENVIRONMENT)
    yield
    logger.info("Employee API stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Employee API",
        description="Employee records and their benefits",
        version=__version__,
        docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
        redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None,
        lifespan=lifespan,
    )

    # Exception handlers (RFC 7807)
    register_exception_handlers(app)

    # Rate limiting (slowapi)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check
    @app.get("/health", tags=["system"])
    async def health_check():
        return {
            "status": "healthy",
            "version": __version__,
            "environment": settings.ENVIRONMENT,
        }

    # Register routers
    app.include_router(benefits_router, prefix="/employees")
    app.include_router(employees_router, prefix="/employees")

    return app


app = create_app()
