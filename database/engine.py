import logging
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from core.config import Settings

logger = logging.getLogger(__name__)


# Base class for declarative models
class Base(DeclarativeBase):
    pass


def create_db_engine(config: Settings) -> AsyncEngine:
    """Create the async engine for the record store. Does not connect yet."""
    logger.info(f"Creating database engine (pool_size={config.database_pool_size})")
    return create_async_engine(
        str(config.database_url),
        echo=False,
        pool_size=config.database_pool_size,
        max_overflow=config.database_max_overflow,
        pool_pre_ping=True,
        connect_args={"command_timeout": config.database_command_timeout},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory used by request handlers."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# Dependency to get DB session
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        yield session


# Function to close database connections
async def close_db(engine: AsyncEngine) -> None:
    """Close database engine and connections."""
    await engine.dispose()
