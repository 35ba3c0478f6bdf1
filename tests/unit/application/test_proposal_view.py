"""Unit tests for the ProposalView read model."""

from datetime import datetime, timezone

import pytest

from quorumvault.application.dtos.proposal_view import (
    ProposalView,
    asset_label,
    truncate_identifier,
)
from quorumvault.domain.models.member_set import MemberSet
from quorumvault.domain.models.proposal import (
    NATIVE_ASSET,
    OpenStatus,
    Proposal,
    ProposalPhase,
)
from tests.helpers.identities import ALICE, BOB, CAROL, DAVE, OUTSIDER, TOKEN

MEMBER_SET = MemberSet(members=(ALICE, BOB, CAROL), threshold=2)
NOW = datetime(2026, 4, 1, tzinfo=timezone.utc)


def _proposal(approvers: tuple[str, ...], asset: str = NATIVE_ASSET) -> Proposal:
    return Proposal(
        proposal_id=1,
        recipient=DAVE,
        asset=asset,
        amount="3",
        created_by=approvers[0],
        created_at=NOW,
        description="",
        status=OpenStatus(approvers=approvers),
    )


class TestViewerFlags:
    def test_pending_proposal_for_member_who_has_not_approved(self) -> None:
        view = ProposalView.build(_proposal((ALICE,)), MEMBER_SET, viewer=BOB)

        assert view.phase is ProposalPhase.PENDING
        assert view.approvals_needed == 1
        assert view.pending_members == (BOB, CAROL)
        assert view.can_approve
        assert not view.can_execute
        assert view.executed_at is None
        assert view.receipt is None

    def test_ready_proposal_can_be_executed_by_any_member(self) -> None:
        view = ProposalView.build(_proposal((ALICE, BOB)), MEMBER_SET, viewer=CAROL)

        assert view.phase is ProposalPhase.READY
        assert view.can_execute
        assert view.can_approve

    def test_member_who_approved_cannot_approve_again(self) -> None:
        view = ProposalView.build(_proposal((ALICE, BOB)), MEMBER_SET, viewer=ALICE)

        assert view.has_approved
        assert not view.can_approve
        assert view.can_execute

    def test_outsider_can_do_nothing(self) -> None:
        view = ProposalView.build(_proposal((ALICE, BOB)), MEMBER_SET, viewer=OUTSIDER)

        assert not view.can_approve
        assert not view.can_execute

    def test_executed_proposal_is_closed(self) -> None:
        executed = _proposal((ALICE, BOB)).as_executed(NOW, "r-9")

        view = ProposalView.build(executed, MEMBER_SET, viewer=CAROL)

        assert view.phase is ProposalPhase.EXECUTED
        assert not view.can_approve
        assert not view.can_execute
        assert view.receipt == "r-9"
        assert view.executed_at == NOW

    def test_anonymous_viewer(self) -> None:
        view = ProposalView.build(_proposal((ALICE,)), MEMBER_SET)

        assert view.viewer is None
        assert not view.has_approved
        assert not view.can_approve


class TestLabels:
    def test_native_asset_label(self) -> None:
        assert asset_label(NATIVE_ASSET, native_label="XLM") == "XLM"

    def test_known_contract_label(self) -> None:
        assert asset_label(TOKEN, known_assets={TOKEN: "TKN"}) == "TKN"

    def test_unknown_contract_is_truncated(self) -> None:
        assert asset_label(TOKEN) == f"{TOKEN[:6]}...{TOKEN[-4:]}"

    @pytest.mark.parametrize("identifier", ["", "GABC", "G" * 13])
    def test_short_identifiers_unchanged(self, identifier: str) -> None:
        assert truncate_identifier(identifier) == identifier
