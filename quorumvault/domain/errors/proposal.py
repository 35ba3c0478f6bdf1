"""Proposal lifecycle errors.

This module provides exception classes for proposal creation, approval
and execution failures. The ledger raises each of them before mutating
anything, so a rejected call never leaves a partial write behind.
"""

from __future__ import annotations

from typing import Any

from quorumvault.domain.exceptions import VaultError


class ProposalError(VaultError):
    """Base error for proposal operations."""

    pass


class UnauthorizedError(ProposalError):
    """Raised when the caller is not a configured member.

    HTTP Status: 403 Forbidden

    Attributes:
        caller: The identifier that attempted the operation.
        operation: Name of the rejected operation.
    """

    problem_type = "urn:quorumvault:proposal:unauthorized"
    title = "Not A Member"
    status_code = 403

    def __init__(self, caller: str, operation: str) -> None:
        self.caller = caller
        self.operation = operation
        super().__init__(f"Caller {caller} is not a member and cannot {operation}")

    def _problem_extensions(self) -> dict[str, Any]:
        return {"caller": self.caller, "operation": self.operation}


class ProposalNotFoundError(ProposalError):
    """Raised when a proposal id does not exist.

    HTTP Status: 404 Not Found

    Attributes:
        proposal_id: The missing proposal id.
    """

    problem_type = "urn:quorumvault:proposal:not-found"
    title = "Proposal Not Found"
    status_code = 404

    def __init__(self, proposal_id: int) -> None:
        self.proposal_id = proposal_id
        super().__init__(f"Proposal not found: {proposal_id}")

    def _problem_extensions(self) -> dict[str, Any]:
        return {"proposal_id": self.proposal_id}


class AlreadyApprovedError(ProposalError):
    """Raised when a member approves the same proposal twice.

    HTTP Status: 409 Conflict

    Attributes:
        proposal_id: The proposal that was already approved.
        caller: The member attempting the duplicate approval.
        position: One-based position of the existing approval.
    """

    problem_type = "urn:quorumvault:proposal:already-approved"
    title = "Already Approved"
    status_code = 409

    def __init__(self, proposal_id: int, caller: str, position: int) -> None:
        self.proposal_id = proposal_id
        self.caller = caller
        self.position = position
        super().__init__(
            f"Member {caller} already approved proposal {proposal_id}"
        )

    def _problem_extensions(self) -> dict[str, Any]:
        return {
            "proposal_id": self.proposal_id,
            "caller": self.caller,
            "approval_position": self.position,
        }


class AlreadyExecutedError(ProposalError):
    """Raised when approving or executing a proposal that is executed.

    A repeated execute is an error, never a silent success.

    HTTP Status: 409 Conflict

    Attributes:
        proposal_id: The executed proposal.
        receipt: Receipt recorded by the successful execution.
    """

    problem_type = "urn:quorumvault:proposal:already-executed"
    title = "Already Executed"
    status_code = 409

    def __init__(self, proposal_id: int, receipt: str) -> None:
        self.proposal_id = proposal_id
        self.receipt = receipt
        super().__init__(f"Proposal {proposal_id} has already been executed")

    def _problem_extensions(self) -> dict[str, Any]:
        return {"proposal_id": self.proposal_id, "receipt": self.receipt}


class QuorumNotMetError(ProposalError):
    """Raised when execute is called below the approval threshold.

    HTTP Status: 409 Conflict

    Attributes:
        proposal_id: The proposal being executed.
        approvals: Current number of approvals.
        threshold: Approvals required.
    """

    problem_type = "urn:quorumvault:proposal:quorum-not-met"
    title = "Quorum Not Met"
    status_code = 409

    def __init__(self, proposal_id: int, approvals: int, threshold: int) -> None:
        self.proposal_id = proposal_id
        self.approvals = approvals
        self.threshold = threshold
        super().__init__(
            f"Proposal {proposal_id} has {approvals} of {threshold} "
            "required approvals"
        )

    def _problem_extensions(self) -> dict[str, Any]:
        return {
            "proposal_id": self.proposal_id,
            "approvals": self.approvals,
            "threshold": self.threshold,
        }


class InvalidRecipientError(ProposalError):
    """Raised when the recipient fails identifier validation.

    HTTP Status: 400 Bad Request
    """

    problem_type = "urn:quorumvault:proposal:invalid-recipient"
    title = "Invalid Recipient"
    status_code = 400

    def __init__(self, recipient: str) -> None:
        self.recipient = recipient
        super().__init__(
            "Recipient must be 56 characters starting with G (A-Z, 2-7)"
        )

    def _problem_extensions(self) -> dict[str, Any]:
        return {"recipient": self.recipient}


class InvalidAssetError(ProposalError):
    """Raised when the asset is neither native nor a valid contract id.

    HTTP Status: 400 Bad Request
    """

    problem_type = "urn:quorumvault:proposal:invalid-asset"
    title = "Invalid Asset"
    status_code = 400

    def __init__(self, asset: str) -> None:
        self.asset = asset
        super().__init__(
            "Asset must be NATIVE or 56 characters starting with C (A-Z, 2-7)"
        )

    def _problem_extensions(self) -> dict[str, Any]:
        return {"asset": self.asset}


class InvalidAmountError(ProposalError):
    """Raised when the amount is not a positive decimal string.

    HTTP Status: 400 Bad Request

    Attributes:
        amount: The rejected amount.
        reason: Which rule the amount broke.
    """

    problem_type = "urn:quorumvault:proposal:invalid-amount"
    title = "Invalid Amount"
    status_code = 400

    def __init__(self, amount: str, reason: str) -> None:
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid amount {amount!r}: {reason}")

    def _problem_extensions(self) -> dict[str, Any]:
        return {"amount": self.amount, "reason": self.reason}
