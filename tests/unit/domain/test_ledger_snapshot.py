"""Unit tests for LedgerSnapshot serialization."""

from datetime import datetime, timezone

import pytest

from quorumvault.domain.models.ledger_snapshot import LedgerSnapshot
from quorumvault.domain.models.member_set import MemberSet
from quorumvault.domain.models.proposal import NATIVE_ASSET, OpenStatus, Proposal
from tests.helpers.identities import ALICE, BOB, DAVE


def _proposal(proposal_id: int) -> Proposal:
    return Proposal(
        proposal_id=proposal_id,
        recipient=DAVE,
        asset=NATIVE_ASSET,
        amount="1",
        created_by=ALICE,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        description="",
        status=OpenStatus(approvers=(ALICE,)),
    )


class TestLedgerSnapshot:
    def test_empty_snapshot(self) -> None:
        snapshot = LedgerSnapshot()

        assert snapshot.is_empty
        assert LedgerSnapshot.from_dict(snapshot.to_dict()) == snapshot

    def test_from_dict_orders_proposals_by_id(self) -> None:
        member_set = MemberSet(members=(ALICE, BOB), threshold=1)
        data = LedgerSnapshot(
            member_set=member_set, proposals=(_proposal(2), _proposal(1))
        ).to_dict()

        restored = LedgerSnapshot.from_dict(data)

        assert [p.proposal_id for p in restored.proposals] == [1, 2]
        assert restored.member_set == member_set

    def test_rejects_unknown_schema_version(self) -> None:
        with pytest.raises(ValueError, match="schema_version"):
            LedgerSnapshot.from_dict({"schema_version": 99, "proposals": []})
