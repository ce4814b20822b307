"""
SQLAlchemy async engines and sessions.

Writes go to the primary. Reads go to POSTGRES_REPLICA_SERVER when one is configured
and share the primary engine otherwise. DATABASE_URL overrides both (SQLite in tests).

Engines are bound to the event loop that created them; when the running loop changes
(TestClient starts its own) the manager forgets them and builds fresh ones.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


def _engine_options(url: str, *, read_only: bool) -> dict[str, Any]:
    if url.startswith('sqlite'):
        # SQLite picks its own pool class, queue sizing does not apply
        return {}
    return {
        'pool_size': settings.DB_POOL_SIZE_READ if read_only else settings.DB_POOL_SIZE_WRITE,
        'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
        'pool_timeout': settings.DB_POOL_TIMEOUT,
        'pool_recycle': settings.DB_POOL_RECYCLE,
        'pool_pre_ping': settings.DB_POOL_PRE_PING,
    }


class AsyncEngineManager:
    def __init__(self) -> None:
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._engines: dict[bool, AsyncEngine] = {}
        self._session_makers: dict[bool, async_sessionmaker[AsyncSession]] = {}

    def _follow_running_loop(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        if loop is self._loop:
            return
        if self._engines:
            # Cannot await dispose() from sync code; the old pools are garbage collected
            Logger.base.warning('🔄 [DB] Event loop changed, dropping engines bound to the old one')
            self._engines.clear()
            self._session_makers.clear()
        self._loop = loop

    def get_engine(self, *, read_only: bool = False) -> AsyncEngine:
        self._follow_running_loop()
        if read_only not in self._engines:
            self._engines[read_only] = self._create_engine(read_only=read_only)
        return self._engines[read_only]

    def get_session_maker(self, *, read_only: bool = False) -> async_sessionmaker[AsyncSession]:
        engine = self.get_engine(read_only=read_only)
        if read_only not in self._session_makers:
            self._session_makers[read_only] = async_sessionmaker(
                engine, class_=AsyncSession, expire_on_commit=False
            )
        return self._session_makers[read_only]

    def _create_engine(self, *, read_only: bool) -> AsyncEngine:
        if read_only:
            url = settings.DATABASE_READ_URL_ASYNC
            if url == settings.DATABASE_URL_ASYNC:
                return self.get_engine(read_only=False)
        else:
            url = settings.DATABASE_URL_ASYNC
        Logger.base.info(f'🔗 [DB] Creating {"read" if read_only else "write"} engine')
        return create_async_engine(url, echo=False, **_engine_options(url, read_only=read_only))

    async def dispose(self) -> None:
        for engine in set(self._engines.values()):
            await engine.dispose()
        self._engines.clear()
        self._session_makers.clear()
        self._loop = None


_engine_manager = AsyncEngineManager()


def get_engine(*, read_only: bool = False) -> AsyncEngine:
    return _engine_manager.get_engine(read_only=read_only)


def get_session_maker(*, read_only: bool = False) -> async_sessionmaker[AsyncSession]:
    return _engine_manager.get_session_maker(read_only=read_only)


async def dispose_engines() -> None:
    await _engine_manager.dispose()


class Base(DeclarativeBase):
    pass


async def create_db_and_tables() -> None:
    """Create any missing tables. Several workers may race here on first boot."""
    # Models register themselves on Base.metadata when imported
    import src.service.marketplace.driven_adapter.model  # noqa: F401

    try:
        async with get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    except Exception as e:
        if 'already exists' not in str(e).lower():
            Logger.base.error(f'❌ [DB] Table creation failed: {e}')
            raise
        Logger.base.info('🗄️  [DB] Tables created by another worker, skipping')


class Database:
    """Session factory handed to repositories as `database.provided.session`."""

    def __init__(self, *, read_only: bool = False) -> None:
        self._read_only = read_only

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with get_session_maker(read_only=self._read_only)() as session:
            yield session
