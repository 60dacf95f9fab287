# app/adapters/outbound/persistence/database.py (async version)

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager
from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from app.adapters.configuration.config import Settings
from app.adapters.outbound.persistence.models import Base

# Configure logger
logger = logging.getLogger(__name__)


class Database:
    """
    Owner of the async engine and the session factory.

    Built once by the application factory and stored on ``app.state``;
    request handlers reach it through the ``get_db`` dependency.
    """

    def __init__(self, database_url: str, settings: Settings):
        self.url = make_url(database_url)
        logger.info(f"Connecting to database: {self.url.render_as_string(hide_password=True)}")

        try:
            self.engine: AsyncEngine = create_async_engine(self.url, **self._engine_options(settings))

            self.session_factory = async_sessionmaker(
                autocommit=False,
                autoflush=False,
                bind=self.engine,
                expire_on_commit=False,
            )

            logger.info("Async database connection configured successfully")

        except SQLAlchemyError as e:
            logger.error(f"Error connecting to database: {str(e)}")
            raise

    def _engine_options(self, settings: Settings) -> dict:
        options = {"echo": settings.DB_ECHO}

        if self.url.get_backend_name() == "sqlite":
            # In-memory SQLite must share a single connection
            options["connect_args"] = {"check_same_thread": False}
            if self.url.database in (None, "", ":memory:"):
                options["poolclass"] = StaticPool
            return options

        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            pool_pre_ping=True,
        )
        return options

    async def create_all(self) -> None:
        """Create the tables that don't exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database connections closed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provides an async context for database operations,
        ensuring the session is closed at the end.

        Yields:
            AsyncSession: SQLAlchemy async session

        Example:
            ```python
            async with database.session() as db:
                clients = await db.execute(select(Client))
                result = clients.scalars().all()
            ```
        """
        session = self.session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency injection for use with FastAPI.

    Yields:
        AsyncSession: session bound to the application's database

    Example:
        ```python
        @router.get("/clients")
        async def list_clients(db: AsyncSession = Depends(get_db)):
            result = await db.execute(select(Client))
            return result.scalars().all()
        ```
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
