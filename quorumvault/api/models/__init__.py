"""API request/response models."""

from quorumvault.api.models.proposal import (
    CreateProposalRequest,
    ProposalDetailResponse,
    ProposalListResponse,
    ProposalResponse,
)
from quorumvault.api.models.vault import (
    ConfigureVaultRequest,
    MemberSetResponse,
    ProblemResponse,
    VaultSummaryResponse,
)

__all__: list[str] = [
    "ConfigureVaultRequest",
    "CreateProposalRequest",
    "MemberSetResponse",
    "ProblemResponse",
    "ProposalDetailResponse",
    "ProposalListResponse",
    "ProposalResponse",
    "VaultSummaryResponse",
]
