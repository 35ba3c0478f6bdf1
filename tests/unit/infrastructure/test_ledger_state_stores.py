"""Unit tests for the JSON file state store and the in-memory stub."""

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from quorumvault.domain.errors import CorruptSnapshotError
from quorumvault.domain.models.ledger_snapshot import LedgerSnapshot
from quorumvault.domain.models.member_set import MemberSet
from quorumvault.domain.models.proposal import NATIVE_ASSET, OpenStatus, Proposal
from quorumvault.infrastructure.adapters.json_file_ledger_state_store import (
    JsonFileLedgerStateStore,
)
from quorumvault.infrastructure.stubs.in_memory_ledger_state_store_stub import (
    InMemoryLedgerStateStoreStub,
)
from tests.helpers.identities import ALICE, BOB, DAVE


@pytest.fixture
def snapshot() -> LedgerSnapshot:
    return LedgerSnapshot(
        member_set=MemberSet(members=(ALICE, BOB), threshold=1),
        proposals=(
            Proposal(
                proposal_id=1,
                recipient=DAVE,
                asset=NATIVE_ASSET,
                amount="0.25",
                created_by=ALICE,
                created_at=datetime(2026, 5, 1, 9, 30, tzinfo=timezone.utc),
                description="&lt;ok&gt;",
                status=OpenStatus(approvers=(ALICE,)),
            ),
        ),
    )


class TestJsonFileLedgerStateStore:
    @pytest.mark.asyncio
    async def test_missing_file_loads_none(self, tmp_path: Path) -> None:
        store = JsonFileLedgerStateStore(tmp_path / "state.json")

        assert await store.load_state() is None

    @pytest.mark.asyncio
    async def test_save_then_load(
        self, tmp_path: Path, snapshot: LedgerSnapshot
    ) -> None:
        store = JsonFileLedgerStateStore(tmp_path / "nested" / "state.json")

        await store.save_state(snapshot)

        assert await store.load_state() == snapshot
        assert json.loads(store.path.read_text())["schema_version"] == 1

    @pytest.mark.asyncio
    async def test_save_leaves_no_temp_files(
        self, tmp_path: Path, snapshot: LedgerSnapshot
    ) -> None:
        store = JsonFileLedgerStateStore(tmp_path / "state.json")

        await store.save_state(snapshot)
        await store.save_state(LedgerSnapshot())

        assert [p.name for p in tmp_path.iterdir()] == ["state.json"]
        assert await store.load_state() == LedgerSnapshot()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            "[]",
            '{"schema_version": 2}',
            '{"member_set": {"members": []}}',
        ],
    )
    async def test_corrupt_file_raises(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "state.json"
        path.write_text(content)

        with pytest.raises(CorruptSnapshotError):
            await JsonFileLedgerStateStore(path).load_state()


class TestInMemoryLedgerStateStoreStub:
    @pytest.mark.asyncio
    async def test_keeps_last_snapshot(self, snapshot: LedgerSnapshot) -> None:
        stub = InMemoryLedgerStateStoreStub()

        await stub.save_state(LedgerSnapshot())
        await stub.save_state(snapshot)

        assert await stub.load_state() == snapshot
        assert stub.save_count == 2

    @pytest.mark.asyncio
    async def test_clear(self, snapshot: LedgerSnapshot) -> None:
        stub = InMemoryLedgerStateStoreStub(initial=snapshot)

        stub.clear()

        assert await stub.load_state() is None
