"""API dependency providers."""

from quorumvault.api.dependencies.vault import (
    get_caller,
    get_optional_viewer,
    get_state_store,
    get_vault_config,
    get_vault_engine,
    reset_vault_dependencies,
    set_state_store,
    set_vault_config,
    set_vault_engine,
)

__all__: list[str] = [
    "get_caller",
    "get_optional_viewer",
    "get_state_store",
    "get_vault_config",
    "get_vault_engine",
    "reset_vault_dependencies",
    "set_state_store",
    "set_vault_config",
    "set_vault_engine",
]
