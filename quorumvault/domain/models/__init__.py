"""Domain models for Quorum Vault."""

from quorumvault.domain.models.ledger_snapshot import (
    SNAPSHOT_SCHEMA_VERSION,
    LedgerSnapshot,
)
from quorumvault.domain.models.ledger_summary import LedgerSummary
from quorumvault.domain.models.member_set import MAX_MEMBERS, MIN_MEMBERS, MemberSet
from quorumvault.domain.models.proposal import (
    NATIVE_ASSET,
    ExecutedStatus,
    OpenStatus,
    Proposal,
    ProposalFilter,
    ProposalPhase,
    ProposalStatus,
)

__all__: list[str] = [
    "MAX_MEMBERS",
    "MIN_MEMBERS",
    "NATIVE_ASSET",
    "SNAPSHOT_SCHEMA_VERSION",
    "ExecutedStatus",
    "LedgerSnapshot",
    "LedgerSummary",
    "MemberSet",
    "OpenStatus",
    "Proposal",
    "ProposalFilter",
    "ProposalPhase",
    "ProposalStatus",
]
