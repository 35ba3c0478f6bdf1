"""Ledger summary model for dashboards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LedgerSummary:
    """Aggregate counts over the ledger under the current threshold.

    ``pending + ready + executed == total`` always holds.

    Attributes:
        member_count: Number of configured members.
        threshold: Approvals required to execute.
        total: All proposals.
        pending: Open proposals below threshold.
        ready: Open proposals at or above threshold.
        executed: Executed proposals.
    """

    member_count: int
    threshold: int
    total: int
    pending: int
    ready: int
    executed: int

    @property
    def threshold_label(self) -> str:
        return f"{self.threshold} of {self.member_count}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "member_count": self.member_count,
            "threshold": self.threshold,
            "threshold_label": self.threshold_label,
            "total": self.total,
            "pending": self.pending,
            "ready": self.ready,
            "executed": self.executed,
        }
