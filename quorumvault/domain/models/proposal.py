"""Proposal domain models.

This module defines the proposal lifecycle:
- OpenStatus: approvals are still being collected
- ExecutedStatus: the proposal was executed; terminal
- Proposal: an immutable transfer request carrying one of the statuses
- ProposalPhase / ProposalFilter: derived views used for listing

Lifecycle:
    Created -> (approvals accumulate) -> Ready -> Executed

Ready is never stored. It is derived from the approval count and the
threshold in force (``not executed and approvals >= threshold``).

Execution data (timestamp, receipt) exists only on ExecutedStatus, so a
receipt cannot be read from a proposal that has not been executed.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any

NATIVE_ASSET = "NATIVE"
"""Sentinel asset value for the network's native currency."""


class ProposalPhase(str, Enum):
    """Derived phase of a proposal relative to a threshold."""

    PENDING = "pending"
    READY = "ready"
    EXECUTED = "executed"


class ProposalFilter(str, Enum):
    """Listing filter; every non-ALL value selects exactly one phase."""

    ALL = "all"
    PENDING = "pending"
    READY = "ready"
    EXECUTED = "executed"

    def matches(self, phase: ProposalPhase) -> bool:
        """Check whether a proposal in ``phase`` passes this filter."""
        if self is ProposalFilter.ALL:
            return True
        return self.value == phase.value


@dataclass(frozen=True, eq=True)
class OpenStatus:
    """Status of a proposal still collecting approvals.

    Attributes:
        approvers: Members that approved, in approval order.
    """

    approvers: tuple[str, ...]


@dataclass(frozen=True, eq=True)
class ExecutedStatus:
    """Terminal status of an executed proposal.

    Attributes:
        approvers: Members that approved, frozen at execution.
        executed_at: When execution was accepted (UTC).
        receipt: Settlement reference assigned at execution.
    """

    approvers: tuple[str, ...]
    executed_at: datetime
    receipt: str

    def __post_init__(self) -> None:
        if self.executed_at.tzinfo is None:
            raise ValueError("executed_at must be timezone-aware (UTC)")
        if not self.receipt:
            raise ValueError("receipt must not be empty")


ProposalStatus = OpenStatus | ExecutedStatus


@dataclass(frozen=True, eq=True)
class Proposal:
    """A transfer request subject to collective approval.

    Proposals are immutable. Approving or executing produces a new
    instance, which the ledger swaps in atomically, so readers always
    observe a consistent combination of approvers and execution state.

    Attributes:
        proposal_id: Unique id, assigned as max existing id + 1.
        recipient: Destination member-format identifier.
        asset: NATIVE_ASSET or a contract identifier.
        amount: Positive decimal string (<= 18 fractional digits).
        created_by: Member that created the proposal.
        created_at: Creation time (UTC timezone-aware).
        description: Sanitized free text.
        status: OpenStatus or ExecutedStatus.
    """

    proposal_id: int
    recipient: str
    asset: str
    amount: str
    created_by: str
    created_at: datetime
    description: str
    status: ProposalStatus

    def __post_init__(self) -> None:
        """Validate proposal fields after initialization.

        Raises:
            ValueError: If any field validation fails.
        """
        if self.proposal_id < 1:
            raise ValueError(f"proposal_id must be >= 1, got {self.proposal_id}")

        if self.created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware (UTC)")

        approvers = self.status.approvers
        if len(set(approvers)) != len(approvers):
            raise ValueError("approvers must be unique")

    @property
    def approvers(self) -> tuple[str, ...]:
        """Members that approved, in approval order."""
        return self.status.approvers

    @property
    def is_executed(self) -> bool:
        """Whether the proposal reached its terminal state."""
        return isinstance(self.status, ExecutedStatus)

    @property
    def is_native_asset(self) -> bool:
        return self.asset == NATIVE_ASSET

    def has_approved(self, member: str) -> bool:
        return member in self.status.approvers

    def is_ready(self, threshold: int) -> bool:
        """Whether the proposal is open and has reached ``threshold``."""
        return not self.is_executed and len(self.approvers) >= threshold

    def phase(self, threshold: int) -> ProposalPhase:
        """Derive the phase of this proposal under ``threshold``."""
        if self.is_executed:
            return ProposalPhase.EXECUTED
        if len(self.approvers) >= threshold:
            return ProposalPhase.READY
        return ProposalPhase.PENDING

    def approvals_needed(self, threshold: int) -> int:
        """Number of further approvals required to reach ``threshold``."""
        if self.is_executed:
            return 0
        return max(0, threshold - len(self.approvers))

    def with_approval(self, member: str) -> Proposal:
        """Return a copy with ``member`` appended to the approvers.

        Raises:
            ValueError: If the proposal is executed or member already approved.
        """
        if self.is_executed:
            raise ValueError(f"proposal {self.proposal_id} is executed")
        if self.has_approved(member):
            raise ValueError(f"{member} already approved proposal {self.proposal_id}")
        return replace(self, status=OpenStatus(approvers=(*self.approvers, member)))

    def as_executed(self, executed_at: datetime, receipt: str) -> Proposal:
        """Return a copy in ExecutedStatus with approvers frozen.

        Raises:
            ValueError: If the proposal is already executed.
        """
        if self.is_executed:
            raise ValueError(f"proposal {self.proposal_id} is already executed")
        return replace(
            self,
            status=ExecutedStatus(
                approvers=self.approvers,
                executed_at=executed_at,
                receipt=receipt,
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for snapshots and responses.

        WARNING: Never use asdict() - it breaks datetime serialization and
        flattens the status variant.

        Returns:
            Dictionary representation. ``executed_at`` and ``receipt`` are
            present only for executed proposals.
        """
        result: dict[str, Any] = {
            "proposal_id": self.proposal_id,
            "recipient": self.recipient,
            "asset": self.asset,
            "amount": self.amount,
            "approvers": list(self.approvers),
            "executed": self.is_executed,
            "created_by": self.created_by,
            "created_at": self.created_at.isoformat(),
            "description": self.description,
            "schema_version": 1,
        }
        if isinstance(self.status, ExecutedStatus):
            result["executed_at"] = self.status.executed_at.isoformat()
            result["receipt"] = self.status.receipt
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Proposal:
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a Proposal.

        Returns:
            Proposal instance.

        Raises:
            KeyError: If required fields are missing.
            ValueError: If field values are invalid.
        """
        approvers = tuple(data["approvers"])
        status: ProposalStatus
        if data.get("executed"):
            status = ExecutedStatus(
                approvers=approvers,
                executed_at=datetime.fromisoformat(data["executed_at"]),
                receipt=data["receipt"],
            )
        else:
            status = OpenStatus(approvers=approvers)

        return cls(
            proposal_id=int(data["proposal_id"]),
            recipient=data["recipient"],
            asset=data["asset"],
            amount=data["amount"],
            created_by=data["created_by"],
            created_at=datetime.fromisoformat(data["created_at"]),
            description=data.get("description", ""),
            status=status,
        )
