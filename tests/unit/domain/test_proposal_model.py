"""Unit tests for the Proposal domain model and its status variants."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from quorumvault.domain.models.proposal import (
    NATIVE_ASSET,
    ExecutedStatus,
    OpenStatus,
    Proposal,
    ProposalFilter,
    ProposalPhase,
)
from tests.helpers.identities import ALICE, BOB, CAROL, DAVE

CREATED_AT = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _proposal(approvers: tuple[str, ...] = (ALICE,)) -> Proposal:
    return Proposal(
        proposal_id=1,
        recipient=DAVE,
        asset=NATIVE_ASSET,
        amount="10",
        created_by=ALICE,
        created_at=CREATED_AT,
        description="rent",
        status=OpenStatus(approvers=approvers),
    )


class TestProposalValidation:
    def test_rejects_non_positive_id(self) -> None:
        with pytest.raises(ValueError, match="proposal_id"):
            Proposal(
                proposal_id=0,
                recipient=DAVE,
                asset=NATIVE_ASSET,
                amount="1",
                created_by=ALICE,
                created_at=CREATED_AT,
                description="",
                status=OpenStatus(approvers=(ALICE,)),
            )

    def test_rejects_naive_created_at(self) -> None:
        with pytest.raises(ValueError, match="timezone-aware"):
            Proposal(
                proposal_id=1,
                recipient=DAVE,
                asset=NATIVE_ASSET,
                amount="1",
                created_by=ALICE,
                created_at=datetime(2026, 3, 1),
                description="",
                status=OpenStatus(approvers=(ALICE,)),
            )

    def test_rejects_duplicate_approvers(self) -> None:
        with pytest.raises(ValueError, match="unique"):
            _proposal(approvers=(ALICE, ALICE))

    def test_executed_status_requires_receipt(self) -> None:
        with pytest.raises(ValueError, match="receipt"):
            ExecutedStatus(approvers=(ALICE,), executed_at=CREATED_AT, receipt="")

    def test_proposal_is_frozen(self) -> None:
        proposal = _proposal()

        with pytest.raises(FrozenInstanceError):
            proposal.amount = "20"  # type: ignore[misc]


class TestProposalTransitions:
    def test_with_approval_appends_in_order(self) -> None:
        original = _proposal()

        updated = original.with_approval(BOB).with_approval(CAROL)

        assert updated.approvers == (ALICE, BOB, CAROL)
        assert original.approvers == (ALICE,)

    def test_with_approval_rejects_repeat(self) -> None:
        with pytest.raises(ValueError, match="already approved"):
            _proposal().with_approval(ALICE)

    def test_as_executed_freezes_approvers(self) -> None:
        executed = _proposal((ALICE, BOB)).as_executed(CREATED_AT, "r-1")

        assert executed.is_executed
        assert isinstance(executed.status, ExecutedStatus)
        assert executed.status.receipt == "r-1"
        assert executed.approvers == (ALICE, BOB)

        with pytest.raises(ValueError, match="executed"):
            executed.with_approval(CAROL)
        with pytest.raises(ValueError, match="already executed"):
            executed.as_executed(CREATED_AT, "r-2")


class TestProposalPhase:
    @pytest.mark.parametrize(
        ("approvers", "threshold", "expected"),
        [
            ((ALICE,), 2, ProposalPhase.PENDING),
            ((ALICE, BOB), 2, ProposalPhase.READY),
            ((ALICE, BOB, CAROL), 2, ProposalPhase.READY),
            ((ALICE,), 1, ProposalPhase.READY),
        ],
    )
    def test_open_phase(
        self, approvers: tuple[str, ...], threshold: int, expected: ProposalPhase
    ) -> None:
        assert _proposal(approvers).phase(threshold) is expected

    def test_executed_phase_ignores_threshold(self) -> None:
        executed = _proposal((ALICE, BOB)).as_executed(CREATED_AT, "r-1")

        assert executed.phase(3) is ProposalPhase.EXECUTED
        assert not executed.is_ready(1)
        assert executed.approvals_needed(3) == 0

    def test_approvals_needed(self) -> None:
        assert _proposal().approvals_needed(3) == 2
        assert _proposal((ALICE, BOB)).approvals_needed(2) == 0

    def test_filter_matches_exactly_one_phase(self) -> None:
        for phase in ProposalPhase:
            matching = [
                f for f in ProposalFilter
                if f is not ProposalFilter.ALL and f.matches(phase)
            ]
            assert len(matching) == 1
            assert ProposalFilter.ALL.matches(phase)


class TestProposalSerialization:
    def test_open_proposal_has_no_execution_fields(self) -> None:
        data = _proposal().to_dict()

        assert data["executed"] is False
        assert "executed_at" not in data
        assert "receipt" not in data

    def test_executed_round_trip(self) -> None:
        executed = _proposal((ALICE, BOB)).as_executed(CREATED_AT, "r-1")

        restored = Proposal.from_dict(executed.to_dict())

        assert restored == executed
