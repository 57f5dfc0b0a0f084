"""Board service entry point — loads documents at startup and serves the board API."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import uvicorn
from azure.monitor.opentelemetry import configure_azure_monitor
from fastapi import FastAPI
from opentelemetry.sdk.resources import Resource

from backport_tracker.client import DocumentServiceClient
from backport_tracker.config import load_settings
from backport_tracker.exceptions import LoadError
from backport_tracker.logging import configure_logging
from backport_tracker.routes import board, status
from backport_tracker.services.board import Board
from backport_tracker.store import DocumentStore

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from backport_tracker.config import Settings

logger = logging.getLogger(__name__)

SERVICE_NAME = "backport-tracker"


async def init_board(settings: Settings, client: DocumentServiceClient) -> Board:
    """Fetch every document once and build the session board.

    Raises :class:`LoadError` when the fetch fails; no partial set is kept.
    """
    store = DocumentStore()
    store.load(await client.fetch_documents())
    return Board(store, client, browse_url=settings.tracker.browse_url)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = app.state.settings
    client = DocumentServiceClient(settings.service)
    await client.initialize()
    app.state.client = client
    app.state.start_time = time.monotonic()
    app.state.board = None
    app.state.load_error = None

    try:
        app.state.board = await init_board(settings, client)
    except LoadError as exc:
        app.state.load_error = str(exc)
        logger.error("Error loading documents: %s", exc)  # noqa: TRY400
    else:
        logger.info("Board ready — documents=%d", len(app.state.board.store))

    yield

    await client.close()
    logger.info("Board service shut down")


def create_app() -> FastAPI:
    """Build the FastAPI application with settings and routes attached."""
    settings = load_settings()
    configure_logging(settings.app.log_level)

    if settings.monitor.connection_string:
        configure_azure_monitor(
            connection_string=settings.monitor.connection_string,
            resource=Resource.create({"service.name": SERVICE_NAME}),
        )
        logger.info("Azure Monitor OpenTelemetry configured")

    app = FastAPI(title="Backport Tracker", lifespan=lifespan)
    app.state.settings = settings
    app.include_router(board.router)
    app.include_router(status.router)
    return app


def main() -> None:
    """Run the board service with uvicorn."""
    app = create_app()
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.app.port)  # noqa: S104


if __name__ == "__main__":
    main()
