"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from quorumvault.config.vault_config import VaultConfig
from quorumvault.infrastructure.observability import (
    configure_structlog as _configure_structlog,
)


def configure_logging(config: VaultConfig) -> None:
    """Configure structlog for the config's environment."""
    _configure_structlog(environment=config.environment)


__all__ = ["configure_logging"]
