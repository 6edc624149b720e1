"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.

Run with uvicorn's factory mode::

    uvicorn housebroker.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from housebroker.application.services import CommissionRateCache
from housebroker.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    get_engine,
    seed_reference_data,
)
from housebroker.presentation.api.dependencies import (
    build_jwt_config,
    build_session_maker,
)
from housebroker.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from housebroker.presentation.api.routers import auth_router, commission_router
from housebroker_config.settings import Settings, get_settings
from housebroker_identity import SigningKeyMisconfiguredError


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up console logging for the housebroker packages with:
    - Timestamps and module names
    - Configurable log level for housebroker modules
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("housebroker").setLevel(log_level)
    logging.getLogger("housebroker_identity").setLevel(log_level)
    logging.getLogger("housebroker_config").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration, login and session tokens.

**Roles:**
- `Broker`: may compute commissions
- `Seeker`: browses listings

**Security:**
- Passwords are hashed with bcrypt
- HS256 JWT bearer tokens, valid for 12 hours
""",
    },
    {
        "name": "Commission",
        "description": """Broker commission lookup.

The commission owed on a transaction price is the rate of the tier whose
inclusive price range contains it, applied to the price and rounded half-up
to the cent.
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info("Starting HouseBroker API v%s...", API_VERSION)

    try:
        build_jwt_config(settings)
    except SigningKeyMisconfiguredError as e:
        logger.critical("Refusing to start: %s", e.message)
        raise

    engine: AsyncEngine = app.state.engine
    await _init_database(engine, seed_rates=settings.seed_default_commission_rates)
    yield

    logger.info("Shutting down HouseBroker API...")
    if app.state.owns_engine:
        await engine.dispose()
        logger.info("Database connections closed")


async def _init_database(engine: AsyncEngine, seed_rates: bool) -> None:
    """Create missing tables and seed the role catalog."""
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    async with AsyncSession(engine, expire_on_commit=False) as session:
        await seed_reference_data(session, seed_rates=seed_rates)
        await session.commit()


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(
        commission_router,
        prefix="/commission",
        tags=["Commission"],
    )

    return v1_router


def create_app(
    settings: Settings | None = None,
    engine: AsyncEngine | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.
    engine
        Optional engine serving schema setup and every request session.
        When omitted one is built from ``settings`` and disposed on shutdown.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Accounts, roles and broker commissions for HouseBroker.",
        version=API_VERSION,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings
    app.state.owns_engine = engine is None
    app.state.engine = engine if engine is not None else get_engine(settings)
    app.state.session_maker = build_session_maker(app.state.engine)
    app.state.commission_cache = CommissionRateCache(
        ttl_seconds=settings.commission_cache_ttl_seconds,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint (unversioned)."""
        return {
            "status": "ok",
            "version": API_VERSION,
        }

    return app
