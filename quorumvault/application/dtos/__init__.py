"""Application DTOs for Quorum Vault."""

from quorumvault.application.dtos.proposal_view import (
    DEFAULT_NATIVE_ASSET_LABEL,
    ProposalView,
    asset_label,
    truncate_identifier,
)

__all__: list[str] = [
    "DEFAULT_NATIVE_ASSET_LABEL",
    "ProposalView",
    "asset_label",
    "truncate_identifier",
]
