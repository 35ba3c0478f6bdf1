"""In-memory stubs for development and testing."""

from quorumvault.infrastructure.stubs.in_memory_ledger_state_store_stub import (
    InMemoryLedgerStateStoreStub,
)

__all__: list[str] = ["InMemoryLedgerStateStoreStub"]
