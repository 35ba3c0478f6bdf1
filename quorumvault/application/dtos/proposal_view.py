"""Proposal view DTOs.

Application-layer read model combining a proposal with the member set and
an optional viewer. The API layer converts these to pydantic response
models; this module has no dependency on the api layer.

The view answers the questions a member asks when looking at a proposal:
how many approvals are still needed, who has not approved yet, and
whether they themselves may approve or execute right now.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from quorumvault.domain.models.member_set import MemberSet
from quorumvault.domain.models.proposal import (
    NATIVE_ASSET,
    ExecutedStatus,
    Proposal,
    ProposalPhase,
)

DEFAULT_NATIVE_ASSET_LABEL = "XLM"


def truncate_identifier(identifier: str, start: int = 6, end: int = 4) -> str:
    """Shorten an identifier for display, e.g. ``GABCDE...WXYZ``.

    Identifiers too short to benefit are returned unchanged.
    """
    if not identifier or len(identifier) <= start + end + 3:
        return identifier
    return f"{identifier[:start]}...{identifier[-end:]}"


def asset_label(
    asset: str,
    native_label: str = DEFAULT_NATIVE_ASSET_LABEL,
    known_assets: Mapping[str, str] | None = None,
) -> str:
    """Display label for an asset.

    Args:
        asset: NATIVE sentinel or contract identifier.
        native_label: Label for the native asset.
        known_assets: Contract identifier -> label for well-known tokens.

    Returns:
        The native label, a known token label, or the truncated contract id.
    """
    if asset == NATIVE_ASSET:
        return native_label
    if known_assets and asset in known_assets:
        return known_assets[asset]
    return truncate_identifier(asset)


@dataclass(frozen=True)
class ProposalView:
    """Viewer-specific read model of a proposal.

    Attributes:
        proposal: The underlying proposal.
        phase: Derived phase under the current threshold.
        threshold: Approvals required.
        approvals: Approvals recorded.
        approvals_needed: Further approvals required (0 when ready/executed).
        pending_members: Members that have not approved, configuration order.
        viewer: Identifier the flags were computed for, if any.
        has_approved: Viewer already approved.
        can_approve: Viewer may approve now.
        can_execute: Viewer may execute now.
        asset_label: Display label for the asset.
    """

    proposal: Proposal
    phase: ProposalPhase
    threshold: int
    approvals: int
    approvals_needed: int
    pending_members: tuple[str, ...]
    viewer: str | None
    has_approved: bool
    can_approve: bool
    can_execute: bool
    asset_label: str

    @property
    def executed_at(self) -> datetime | None:
        status = self.proposal.status
        return status.executed_at if isinstance(status, ExecutedStatus) else None

    @property
    def receipt(self) -> str | None:
        status = self.proposal.status
        return status.receipt if isinstance(status, ExecutedStatus) else None

    @classmethod
    def build(
        cls,
        proposal: Proposal,
        member_set: MemberSet,
        viewer: str | None = None,
        native_label: str = DEFAULT_NATIVE_ASSET_LABEL,
        known_assets: Mapping[str, str] | None = None,
    ) -> ProposalView:
        """Build a view of ``proposal`` for ``viewer``.

        Args:
            proposal: Proposal to describe.
            member_set: Member set currently in force.
            viewer: Identifier of the member looking at it (optional).
            native_label: Display label for the native asset.
            known_assets: Known contract labels.

        Returns:
            The populated ProposalView.
        """
        threshold = member_set.threshold
        phase = proposal.phase(threshold)
        is_member = viewer is not None and member_set.is_member(viewer)
        has_approved = viewer is not None and proposal.has_approved(viewer)
        is_open = phase is not ProposalPhase.EXECUTED

        return cls(
            proposal=proposal,
            phase=phase,
            threshold=threshold,
            approvals=len(proposal.approvers),
            approvals_needed=proposal.approvals_needed(threshold),
            pending_members=tuple(
                m for m in member_set.members if not proposal.has_approved(m)
            ),
            viewer=viewer,
            has_approved=has_approved,
            can_approve=is_open and is_member and not has_approved,
            can_execute=phase is ProposalPhase.READY and is_member,
            asset_label=asset_label(proposal.asset, native_label, known_assets),
        )
