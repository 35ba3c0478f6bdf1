"""Runtime configuration."""

from quorumvault.config.vault_config import VaultConfig

__all__: list[str] = ["VaultConfig"]
