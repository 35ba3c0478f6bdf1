"""Vault API dependencies.

Dependency injection setup for the engine, its state store and the
caller identity. Singletons are built lazily from VaultConfig.from_env();
tests swap them with the set_* helpers and clear them with
reset_vault_dependencies().
"""

from fastapi import Header

from quorumvault.application.ports.ledger_state_store import LedgerStateStoreProtocol
from quorumvault.application.services.vault_engine import VaultEngine
from quorumvault.bootstrap.vault import build_state_store, build_vault_engine
from quorumvault.config.vault_config import VaultConfig

MEMBER_HEADER = "X-Member-Id"

_config: VaultConfig | None = None
_engine: VaultEngine | None = None
_state_store: LedgerStateStoreProtocol | None = None


def get_vault_config() -> VaultConfig:
    """Get vault configuration, read once from the environment."""
    global _config
    if _config is None:
        _config = VaultConfig.from_env()
    return _config


def get_vault_engine() -> VaultEngine:
    """Get the process-wide vault engine."""
    global _engine
    if _engine is None:
        _engine = build_vault_engine(get_vault_config())
    return _engine


def get_state_store() -> LedgerStateStoreProtocol:
    """Get the state store snapshots are persisted to.

    Returns a JSON file store when VAULT_STATE_PATH is set, otherwise an
    in-memory stub.
    """
    global _state_store
    if _state_store is None:
        _state_store = build_state_store(get_vault_config())
    return _state_store


def get_caller(x_member_id: str = Header(..., alias=MEMBER_HEADER)) -> str:
    """Authenticated caller identifier (required on writes)."""
    return x_member_id.strip()


def get_optional_viewer(
    x_member_id: str | None = Header(default=None, alias=MEMBER_HEADER),
) -> str | None:
    """Viewer identifier for read endpoints, if supplied."""
    if x_member_id is None:
        return None
    return x_member_id.strip() or None


# Testing helper functions


def reset_vault_dependencies() -> None:
    """Reset all singleton instances for testing."""
    global _config, _engine, _state_store
    _config = None
    _engine = None
    _state_store = None


def set_vault_config(config: VaultConfig) -> None:
    """Set custom configuration for testing; engine and store are rebuilt."""
    global _config, _engine, _state_store
    _config = config
    _engine = None
    _state_store = None


def set_vault_engine(engine: VaultEngine) -> None:
    """Set custom engine for testing."""
    global _engine
    _engine = engine


def set_state_store(store: LedgerStateStoreProtocol) -> None:
    """Set custom state store for testing."""
    global _state_store
    _state_store = store
