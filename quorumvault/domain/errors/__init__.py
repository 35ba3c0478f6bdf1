"""Domain errors for Quorum Vault.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from VaultError.
"""

from quorumvault.domain.errors.membership import (
    AlreadyConfiguredError,
    DuplicateMemberError,
    EmptyMembershipError,
    InvalidIdentifierError,
    InvalidThresholdError,
    MembershipError,
    MembershipLimitExceededError,
    NotConfiguredError,
)
from quorumvault.domain.errors.proposal import (
    AlreadyApprovedError,
    AlreadyExecutedError,
    InvalidAmountError,
    InvalidAssetError,
    InvalidRecipientError,
    ProposalError,
    ProposalNotFoundError,
    QuorumNotMetError,
    UnauthorizedError,
)
from quorumvault.domain.errors.snapshot import CorruptSnapshotError
from quorumvault.domain.exceptions import VaultError

__all__: list[str] = [
    "AlreadyApprovedError",
    "AlreadyConfiguredError",
    "AlreadyExecutedError",
    "CorruptSnapshotError",
    "DuplicateMemberError",
    "EmptyMembershipError",
    "InvalidAmountError",
    "InvalidAssetError",
    "InvalidIdentifierError",
    "InvalidRecipientError",
    "InvalidThresholdError",
    "MembershipError",
    "MembershipLimitExceededError",
    "NotConfiguredError",
    "ProposalError",
    "ProposalNotFoundError",
    "QuorumNotMetError",
    "UnauthorizedError",
    "VaultError",
]
