"""Ledger state store port.

The engine is persistence-agnostic: it produces and accepts
LedgerSnapshot objects. Callers decide when to save and load them
through an implementation of this protocol.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from quorumvault.domain.models.ledger_snapshot import LedgerSnapshot


class LedgerStateStoreProtocol(Protocol):
    """Protocol for loading and saving engine snapshots."""

    @abstractmethod
    async def load_state(self) -> LedgerSnapshot | None:
        """Load the last saved snapshot.

        Returns:
            The snapshot, or None if nothing has been saved yet.

        Raises:
            CorruptSnapshotError: If saved state exists but cannot be decoded.
        """
        ...

    @abstractmethod
    async def save_state(self, snapshot: LedgerSnapshot) -> None:
        """Persist a snapshot, replacing any previous one.

        Args:
            snapshot: The engine state to persist.
        """
        ...
