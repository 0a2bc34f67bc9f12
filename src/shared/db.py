"""Process-scoped database engine and schema helpers.

The async engine is created once by the application lifespan and disposed on
shutdown. Request handlers reach it through :func:`get_engine`.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from shared.config import Settings
from shared.errors import PersistenceError
from shared.tables import metadata

logger = structlog.get_logger(__name__)

_engine: AsyncEngine | None = None

# Driver and pool failures surface as any of these.
STORE_ERRORS = (SQLAlchemyError, OSError, TimeoutError)


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine with the pool limits from ``settings``."""
    url = make_url(settings.database_url)
    options = {"pool_pre_ping": True}

    if url.get_backend_name() == "postgresql":
        connect_args = {
            "timeout": settings.db_connect_timeout,
            "server_settings": {"application_name": settings.db_application_name},
        }
        if settings.db_ssl:
            connect_args["ssl"] = "require"
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=0,
            pool_timeout=settings.db_pool_timeout,
            pool_recycle=settings.db_pool_recycle,
            connect_args=connect_args,
        )

    return create_async_engine(url, **options)


async def init_engine(settings: Settings) -> AsyncEngine:
    """Create the process engine and check out one connection to prove it works."""
    global _engine
    engine = build_engine(settings)
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except STORE_ERRORS as exc:
        await engine.dispose()
        logger.error("Database unreachable at startup", error=str(exc))
        raise PersistenceError("Database unreachable at startup") from exc

    _engine = engine
    logger.info("Database pool ready", backend=engine.url.get_backend_name(), pool=engine.pool.status())
    return engine


async def dispose_engine() -> None:
    """Close every pooled connection. Safe to call when nothing was opened."""
    global _engine
    if _engine is None:
        return
    await _engine.dispose()
    _engine = None
    logger.info("Database pool closed")


def get_engine() -> AsyncEngine:
    if _engine is None:
        raise PersistenceError("Database engine is not initialised")
    return _engine


@asynccontextmanager
async def connection(engine: AsyncEngine, *, write: bool = False) -> AsyncIterator[AsyncConnection]:
    """Yield a pooled connection, translating store failures into PersistenceError.

    ``write=True`` wraps the block in a transaction that commits on exit.
    """
    try:
        if write:
            async with engine.begin() as conn:
                yield conn
        else:
            async with engine.connect() as conn:
                yield conn
    except STORE_ERRORS as exc:
        logger.error("Database statement failed", error=str(exc), error_type=type(exc).__name__)
        raise PersistenceError(str(exc)) from exc


def setup_db(database_url: str) -> None:
    """Create all tables (blocking driver)."""
    engine = create_engine(database_url)
    try:
        metadata.create_all(engine)
    finally:
        engine.dispose()


def drop_db(database_url: str) -> None:
    """Drop all tables (blocking driver)."""
    engine = create_engine(database_url)
    try:
        metadata.drop_all(engine)
    finally:
        engine.dispose()
