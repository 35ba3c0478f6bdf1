"""Ledger snapshot domain model.

A LedgerSnapshot is the complete serializable state of a vault engine:
the member set (if configured) and every proposal. The engine exposes it
on demand; persistence is the caller's concern.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from quorumvault.domain.models.member_set import MemberSet
from quorumvault.domain.models.proposal import Proposal

SNAPSHOT_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class LedgerSnapshot:
    """Point-in-time copy of the engine state.

    Attributes:
        member_set: Configured member set, or None if unconfigured.
        proposals: All proposals in ascending id order.
    """

    member_set: MemberSet | None = None
    proposals: tuple[Proposal, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return self.member_set is None and not self.proposals

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "member_set": self.member_set.to_dict() if self.member_set else None,
            "proposals": [p.to_dict() for p in self.proposals],
            "schema_version": SNAPSHOT_SCHEMA_VERSION,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LedgerSnapshot:
        """Deserialize from dictionary.

        Raises:
            KeyError: If required fields are missing.
            ValueError: If field values are invalid or the schema version
                is not supported.
        """
        version = data.get("schema_version", SNAPSHOT_SCHEMA_VERSION)
        if version != SNAPSHOT_SCHEMA_VERSION:
            raise ValueError(f"unsupported snapshot schema_version: {version}")

        member_data = data.get("member_set")
        proposals = tuple(
            sorted(
                (Proposal.from_dict(p) for p in data.get("proposals", [])),
                key=lambda p: p.proposal_id,
            )
        )
        return cls(
            member_set=MemberSet.from_dict(member_data) if member_data else None,
            proposals=proposals,
        )
