"""Membership configuration errors.

Raised by the Membership Registry when a configuration request is
rejected, or when an operation needs a configuration that does not exist.
Every error is raised before any state is touched.
"""

from __future__ import annotations

from typing import Any

from quorumvault.domain.exceptions import VaultError


class MembershipError(VaultError):
    """Base error for membership configuration."""

    pass


class NotConfiguredError(MembershipError):
    """Raised when an operation requires a configured member set.

    HTTP Status: 409 Conflict
    """

    problem_type = "urn:quorumvault:membership:not-configured"
    title = "Vault Not Configured"
    status_code = 409

    def __init__(self) -> None:
        super().__init__("Vault is not configured: no member set exists")


class AlreadyConfiguredError(MembershipError):
    """Raised when reconfiguration is attempted after proposals exist.

    Replacing the member set while proposals are in flight would change
    the quorum they are evaluated against, so it is refused.

    HTTP Status: 409 Conflict

    Attributes:
        proposal_count: Number of proposals already in the ledger.
    """

    problem_type = "urn:quorumvault:membership:already-configured"
    title = "Vault Already Configured"
    status_code = 409

    def __init__(self, proposal_count: int) -> None:
        self.proposal_count = proposal_count
        super().__init__(
            f"Vault is already configured and holds {proposal_count} "
            "proposal(s); reconfiguration is not supported"
        )

    def _problem_extensions(self) -> dict[str, Any]:
        return {"proposal_count": self.proposal_count}


class EmptyMembershipError(MembershipError):
    """Raised when configure is called with zero members.

    HTTP Status: 400 Bad Request
    """

    problem_type = "urn:quorumvault:membership:empty"
    title = "Empty Membership"
    status_code = 400

    def __init__(self) -> None:
        super().__init__("At least one member is required")


class MembershipLimitExceededError(MembershipError):
    """Raised when configure is called with more members than allowed.

    HTTP Status: 400 Bad Request

    Attributes:
        member_count: Number of members supplied.
        limit: Maximum number of members allowed.
    """

    problem_type = "urn:quorumvault:membership:limit-exceeded"
    title = "Membership Limit Exceeded"
    status_code = 400

    def __init__(self, member_count: int, limit: int) -> None:
        self.member_count = member_count
        self.limit = limit
        super().__init__(
            f"Maximum {limit} members allowed, got {member_count}"
        )

    def _problem_extensions(self) -> dict[str, Any]:
        return {"member_count": self.member_count, "limit": self.limit}


class InvalidIdentifierError(MembershipError):
    """Raised when a member identifier fails format validation.

    HTTP Status: 400 Bad Request

    Attributes:
        identifier: The rejected identifier.
        position: Zero-based index of the identifier in the request.
    """

    problem_type = "urn:quorumvault:membership:invalid-identifier"
    title = "Invalid Member Identifier"
    status_code = 400

    def __init__(self, identifier: str, position: int) -> None:
        self.identifier = identifier
        self.position = position
        super().__init__(
            f"Member #{position + 1} is not a valid identifier: must be 56 "
            "characters starting with G (A-Z, 2-7)"
        )

    def _problem_extensions(self) -> dict[str, Any]:
        return {"identifier": self.identifier, "position": self.position}


class DuplicateMemberError(MembershipError):
    """Raised when the same identifier appears twice in a member list.

    HTTP Status: 400 Bad Request

    Attributes:
        identifier: The duplicated identifier.
    """

    problem_type = "urn:quorumvault:membership:duplicate-member"
    title = "Duplicate Member"
    status_code = 400

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Identifier {identifier} is listed more than once")

    def _problem_extensions(self) -> dict[str, Any]:
        return {"identifier": self.identifier}


class InvalidThresholdError(MembershipError):
    """Raised when threshold is outside 1..member_count.

    HTTP Status: 400 Bad Request

    Attributes:
        threshold: The rejected threshold.
        member_count: Number of members it was evaluated against.
    """

    problem_type = "urn:quorumvault:membership:invalid-threshold"
    title = "Invalid Threshold"
    status_code = 400

    def __init__(self, threshold: int, member_count: int) -> None:
        self.threshold = threshold
        self.member_count = member_count
        super().__init__(
            f"Threshold must be between 1 and {member_count}, got {threshold}"
        )

    def _problem_extensions(self) -> dict[str, Any]:
        return {"threshold": self.threshold, "member_count": self.member_count}
