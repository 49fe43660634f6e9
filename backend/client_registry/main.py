"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from client_registry.config import Settings, get_settings
from client_registry.infrastructure.database import Base, build_engine, build_session_factory
from client_registry.infrastructure.logging.log_config import setup_logging
from client_registry.presentation.api.errors import register_exception_handlers
from client_registry.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _ensure_database_exists(database_url: str) -> None:
    """Create the PostgreSQL database if it does not yet exist.

    Connects to the default ``postgres`` maintenance database, checks for the
    target database name, and issues ``CREATE DATABASE`` when missing.
    Other backends are left alone.
    """
    from urllib.parse import urlparse

    if not database_url.startswith("postgresql://"):
        return

    import asyncpg

    parsed = urlparse(database_url)
    db_name = parsed.path.lstrip("/")
    if not db_name:
        return

    maintenance_url = database_url.rsplit("/", 1)[0] + "/postgres"

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
            else:
                logger.debug("Database '%s' already exists", db_name)
        finally:
            await conn.close()
    except Exception as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging, create tables, dispose the engine."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    await _ensure_database_exists(settings.database_url)
    await create_tables(app.state.engine)
    logger.info("Client registry ready (env=%s)", settings.app_env)

    yield

    await app.state.engine.dispose()


def create_app(settings: Settings | None = None, engine: AsyncEngine | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    The database engine is owned by the returned app (``app.state.engine``);
    pass one in to share a test database.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = engine or build_engine(
        settings.database_url,
        echo=(settings.app_env == "development" and settings.log_level_sql == "DEBUG"),
    )
    app.state.session_factory = build_session_factory(app.state.engine)

    # Middleware added later wraps earlier ones; CORS must be outermost
    register_exception_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "client_registry.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
