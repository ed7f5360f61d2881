"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from board.interface.api.routes import health, votes
from board.util.di.container import create_container, setup_di
from board.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it.

    Args:
        container: DI container to use, defaults to the production container
    """
    app_instance = FastAPI(
        title="Board Votes API",
        description="Vote casting for discussion board posts",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)

    return app_instance
