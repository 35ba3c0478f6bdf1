"""In-memory stub for LedgerStateStoreProtocol.

Keeps the last saved snapshot in memory and counts saves, so tests can
assert that mutating routes persist state without touching the disk.
"""

from __future__ import annotations

from quorumvault.domain.models.ledger_snapshot import LedgerSnapshot


class InMemoryLedgerStateStoreStub:
    """In-memory stub implementation of LedgerStateStoreProtocol.

    Thread-safety note: This stub is NOT thread-safe. It is meant for a
    single event loop.
    """

    def __init__(self, initial: LedgerSnapshot | None = None) -> None:
        """Initialize the stub, optionally pre-seeded with a snapshot."""
        self._snapshot = initial
        self.save_count = 0

    async def load_state(self) -> LedgerSnapshot | None:
        return self._snapshot

    async def save_state(self, snapshot: LedgerSnapshot) -> None:
        self._snapshot = snapshot
        self.save_count += 1

    @property
    def saved(self) -> LedgerSnapshot | None:
        """The most recently saved snapshot (test helper)."""
        return self._snapshot

    def clear(self) -> None:
        """Forget stored state (test helper)."""
        self._snapshot = None
        self.save_count = 0
