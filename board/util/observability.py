"""Logfire setup and instrumentation.

Services emit spans and structured events directly::

    with logfire.span("vote_service.reconcile", post_id=post_id):
        logfire.info("Vote reconciled", post_id=post_id, score=score)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from board.config import Settings


def _should_send(settings: Settings) -> bool:
    # An explicit flag wins, otherwise send only when a token is configured
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the vote service.

    Telemetry goes to Logfire cloud when ``OBSERVABILITY__LOGFIRE_TOKEN`` is
    set, unless ``OBSERVABILITY__SEND_TO_LOGFIRE`` says otherwise. Console
    output is always enabled.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name="board-votes",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by ``app``."""
    logfire.instrument_fastapi(app)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_redis() -> None:
    """Trace Redis commands."""
    logfire.instrument_redis()
