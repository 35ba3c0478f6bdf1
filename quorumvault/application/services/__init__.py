"""Application services: registry, ledger and the engine that owns both."""

from quorumvault.application.services.membership_registry import MembershipRegistry
from quorumvault.application.services.proposal_ledger import ProposalLedger
from quorumvault.application.services.vault_engine import VaultEngine

__all__: list[str] = [
    "MembershipRegistry",
    "ProposalLedger",
    "VaultEngine",
]
