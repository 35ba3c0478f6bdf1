"""Bootstrap wiring for the vault engine and its state store."""

from __future__ import annotations

from quorumvault.application.ports.ledger_state_store import LedgerStateStoreProtocol
from quorumvault.application.services.vault_engine import VaultEngine
from quorumvault.config.vault_config import VaultConfig
from quorumvault.infrastructure.adapters import (
    HtmlTextSanitizer,
    JsonFileLedgerStateStore,
    RandomReceiptIssuer,
    StellarIdentifierValidator,
    SystemTimeAuthority,
)
from quorumvault.infrastructure.stubs import InMemoryLedgerStateStoreStub


def build_vault_engine(config: VaultConfig) -> VaultEngine:
    """Build an unconfigured engine with the production adapters."""
    return VaultEngine(
        identifier_validator=StellarIdentifierValidator(),
        text_sanitizer=HtmlTextSanitizer(),
        time_authority=SystemTimeAuthority(),
        receipt_issuer=RandomReceiptIssuer(),
        native_asset_label=config.native_asset_label,
        known_assets=config.asset_labels,
    )


def build_state_store(config: VaultConfig) -> LedgerStateStoreProtocol:
    """JSON file store when a state path is configured, else in-memory."""
    if config.state_path is not None:
        return JsonFileLedgerStateStore(config.state_path)
    return InMemoryLedgerStateStoreStub()


__all__ = ["build_state_store", "build_vault_engine"]
