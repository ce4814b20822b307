"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engines, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import instrument_engine, setup_tracing


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Marketplace] Starting up...')

    tracer_provider = setup_tracing()
    Logger.base.info('📊 [Marketplace] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Marketplace] Dependency injection wired')

    instrument_engine(get_engine())
    await create_db_and_tables()
    Logger.base.info('🗄️  [Marketplace] Database engine ready + instrumented')

    Logger.base.info(f'📧 [Marketplace] Email backend: {settings.EMAIL_BACKEND}')
    Logger.base.info('✅ [Marketplace] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Marketplace] Shutting down...')

    await dispose_engines()
    Logger.base.info('🗄️  [Marketplace] Database engines disposed')

    # Flush remaining spans
    tracer_provider.shutdown()
    Logger.base.info('📊 [Marketplace] Tracing shutdown complete')

    container.unwire()

    Logger.base.info('👋 [Marketplace] Shutdown complete')


app = create_app(
    lifespan=lifespan,
    description='Outlet deals marketplace - offers, subscriptions, reservations and ratings',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')


if __name__ == '__main__':
    import uvicorn

    uvicorn.run('src.main:app', host='0.0.0.0', port=8000, reload=settings.DEBUG)
