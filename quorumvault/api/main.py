"""FastAPI application entry point for Quorum Vault."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from structlog import get_logger

from quorumvault import __version__
from quorumvault.api.dependencies.vault import (
    get_state_store,
    get_vault_config,
    get_vault_engine,
)
from quorumvault.api.middleware.logging_middleware import LoggingMiddleware
from quorumvault.api.routes import proposals_router, vault_router
from quorumvault.bootstrap.logging import configure_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Restore engine state from the state store before serving."""
    config = get_vault_config()
    configure_logging(config)

    snapshot = await get_state_store().load_state()
    if snapshot is not None:
        await get_vault_engine().restore(snapshot)
    logger.info(
        "vault_api_started",
        environment=config.environment,
        restored=snapshot is not None,
    )
    yield


app = FastAPI(
    title="Quorum Vault API",
    description="Threshold authorization for shared treasury transfers",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)
app.include_router(vault_router)
app.include_router(proposals_router)
