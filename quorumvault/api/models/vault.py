"""Vault API request/response models.

Pydantic models for configuring the vault and reading its member set and
dashboard summary.
"""

from pydantic import BaseModel, ConfigDict, Field


class ConfigureVaultRequest(BaseModel):
    """Request to configure the vault's members and threshold.

    Attributes:
        members: Member identifiers in display order.
        threshold: Approvals required to execute a proposal.
    """

    members: list[str] = Field(
        ...,
        description="Member identifiers (G... account ids), 1 to 10 entries",
    )
    threshold: int = Field(
        ...,
        description="Approvals required to execute, between 1 and len(members)",
    )


class MemberSetResponse(BaseModel):
    """Configured member set."""

    members: list[str] = Field(..., description="Member identifiers")
    threshold: int = Field(..., description="Approvals required to execute")
    threshold_label: str = Field(..., description="Quorum rule, e.g. '2 of 3'")
    size: int = Field(..., description="Number of members")


class VaultSummaryResponse(BaseModel):
    """Dashboard counts for the vault.

    ``pending + ready + executed == total`` always holds.
    """

    member_count: int = Field(..., description="Number of members")
    threshold: int = Field(..., description="Approvals required to execute")
    threshold_label: str = Field(..., description="Quorum rule, e.g. '2 of 3'")
    total: int = Field(..., description="All proposals")
    pending: int = Field(..., description="Open proposals below threshold")
    ready: int = Field(..., description="Open proposals at or above threshold")
    executed: int = Field(..., description="Executed proposals")


class ProblemResponse(BaseModel):
    """Error response (RFC 7807 Problem Details).

    Error-specific extension members (proposal_id, caller, ...) are
    passed through unchanged.

    Attributes:
        type: Error type URN.
        title: Human-readable error title.
        status: HTTP status code.
        detail: Detailed error message.
        instance: Request URL that caused the error.
    """

    model_config = ConfigDict(extra="allow")

    type: str = Field(..., description="Error type URN")
    title: str = Field(..., description="Human-readable error title")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Detailed error message")
    instance: str | None = Field(default=None, description="Request URL")
