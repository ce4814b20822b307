"""
Application under test: production routers and handlers, no exporters.

conftest points DATABASE_URL at a throwaway SQLite file and EMAIL_BACKEND at the
in-memory sender before this module is imported.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engines
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan_for_tests(app: FastAPI) -> AsyncIterator[None]:
    assert settings.EMAIL_BACKEND == 'mock', 'tests must never reach the real email provider'

    container.wire(modules=WIRE_MODULES)
    await create_db_and_tables()
    Logger.base.info(f'🧪 [Test App] Ready on {settings.DATABASE_URL}')

    yield

    await dispose_engines()
    container.unwire()
    container.reset_singletons()
    Logger.base.info('🧪 [Test App] Torn down')


app = create_app(
    lifespan=lifespan_for_tests,
    title_suffix=' (Test)',
    description='Outlet deals marketplace on SQLite with in-memory email',
)
