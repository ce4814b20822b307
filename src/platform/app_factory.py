"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import (
    OFFER_BASE,
    RATING_BASE,
    RESERVATION_BASE,
    SUBSCRIPTION_BASE,
    USER_BASE,
)
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.observability.tracing import instrument_app
from src.service.marketplace.driving_adapter.http_controller.offer_controller import (
    router as offer_router,
)
from src.service.marketplace.driving_adapter.http_controller.rating_controller import (
    router as rating_router,
)
from src.service.marketplace.driving_adapter.http_controller.reservation_controller import (
    router as reservation_router,
)
from src.service.marketplace.driving_adapter.http_controller.subscription_controller import (
    router as subscription_router,
)
from src.service.marketplace.driving_adapter.http_controller.user_controller import (
    router as user_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Outlet deals marketplace',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Auto-instrument FastAPI (must be done before mounting routes)
    instrument_app(app)

    # The web client is hosted elsewhere; preflight OPTIONS is answered here
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(user_router, prefix=USER_BASE, tags=['user'])
    app.include_router(offer_router, prefix=OFFER_BASE, tags=['offer'])
    app.include_router(subscription_router, prefix=SUBSCRIPTION_BASE, tags=['subscription'])
    app.include_router(reservation_router, prefix=RESERVATION_BASE, tags=['reservation'])
    app.include_router(rating_router, prefix=RATING_BASE, tags=['rating'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}
