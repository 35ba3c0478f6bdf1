"""Proposal API request/response models."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

# ISO 8601 with Z suffix
DateTimeWithZ = Annotated[
    datetime,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None, return_type=str
    ),
]


class CreateProposalRequest(BaseModel):
    """Request to create a transfer proposal.

    Attributes:
        recipient: Destination account identifier.
        asset: "NATIVE" or a contract identifier.
        amount: Positive decimal string, at most 18 fractional digits.
        description: Free text shown to members.
    """

    recipient: str = Field(..., description="Destination account identifier")
    asset: str = Field(..., description='"NATIVE" or a C... contract identifier')
    amount: str = Field(
        ...,
        description="Positive decimal string, at most 18 fractional digits",
        examples=["12.5"],
    )
    description: str = Field(default="", description="Free text, HTML-escaped")


class ProposalResponse(BaseModel):
    """A proposal as listed."""

    proposal_id: int = Field(..., description="Proposal id")
    recipient: str = Field(..., description="Destination account identifier")
    asset: str = Field(..., description="NATIVE or contract identifier")
    asset_label: str = Field(..., description="Display label for the asset")
    amount: str = Field(..., description="Decimal amount as submitted")
    description: str = Field(..., description="Sanitized description")
    created_by: str = Field(..., description="Creating member")
    created_at: DateTimeWithZ = Field(..., description="Creation time (UTC)")
    approvers: list[str] = Field(..., description="Approving members, in order")
    phase: str = Field(..., description="pending, ready or executed")
    executed: bool = Field(..., description="Whether the proposal was executed")
    executed_at: DateTimeWithZ | None = Field(
        default=None, description="Execution time (UTC), executed only"
    )
    receipt: str | None = Field(
        default=None, description="Settlement receipt, executed only"
    )


class ProposalDetailResponse(ProposalResponse):
    """A proposal as seen by a specific viewer."""

    threshold: int = Field(..., description="Approvals required")
    approvals: int = Field(..., description="Approvals recorded")
    approvals_needed: int = Field(..., description="Further approvals required")
    pending_members: list[str] = Field(
        ..., description="Members that have not approved yet"
    )
    viewer: str | None = Field(default=None, description="Viewing member")
    has_approved: bool = Field(..., description="Viewer already approved")
    can_approve: bool = Field(..., description="Viewer may approve now")
    can_execute: bool = Field(..., description="Viewer may execute now")


class ProposalListResponse(BaseModel):
    """Proposals matching a filter, newest first."""

    filter: str = Field(..., description="Applied filter")
    count: int = Field(..., description="Number of proposals returned")
    proposals: list[ProposalResponse] = Field(..., description="Matching proposals")
