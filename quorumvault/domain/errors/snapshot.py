"""Snapshot restore errors."""

from __future__ import annotations

from typing import Any

from quorumvault.domain.exceptions import VaultError


class CorruptSnapshotError(VaultError):
    """Raised when persisted state cannot be restored.

    Covers unreadable payloads as well as snapshots that decode but break
    a ledger invariant. The engine is left untouched when this is raised.

    Attributes:
        reason: What made the snapshot unusable.
    """

    problem_type = "urn:quorumvault:snapshot:corrupt"
    title = "Corrupt Snapshot"
    status_code = 500

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Snapshot rejected: {reason}")

    def _problem_extensions(self) -> dict[str, Any]:
        return {"reason": self.reason}
