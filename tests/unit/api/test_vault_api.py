"""Tests for the vault and proposal HTTP routes."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from quorumvault.api.dependencies.vault import (
    reset_vault_dependencies,
    set_state_store,
    set_vault_engine,
)
from quorumvault.api.main import app
from quorumvault.application.services.vault_engine import VaultEngine
from quorumvault.infrastructure.stubs.in_memory_ledger_state_store_stub import (
    InMemoryLedgerStateStoreStub,
)
from tests.helpers.identities import ALICE, BOB, CAROL, DAVE, OUTSIDER, TOKEN

MEMBER_HEADER = "X-Member-Id"


@pytest.fixture
def state_store() -> InMemoryLedgerStateStoreStub:
    return InMemoryLedgerStateStoreStub()


@pytest.fixture
def client(
    engine: VaultEngine, state_store: InMemoryLedgerStateStoreStub
) -> Iterator[TestClient]:
    reset_vault_dependencies()
    set_vault_engine(engine)
    set_state_store(state_store)
    with TestClient(app) as test_client:
        yield test_client
    reset_vault_dependencies()


def _configure(client: TestClient, members: list[str] | None = None, threshold: int = 2):
    return client.post(
        "/v1/vault/configure",
        json={"members": members or [ALICE, BOB, CAROL], "threshold": threshold},
    )


def _create(client: TestClient, caller: str = ALICE, **overrides):
    body = {"recipient": DAVE, "asset": "NATIVE", "amount": "10", "description": "rent"}
    body.update(overrides)
    return client.post("/v1/proposals", json=body, headers={MEMBER_HEADER: caller})


def _problem(response) -> dict:
    return response.json()["detail"]


class TestVaultRoutes:
    def test_configure(
        self, client: TestClient, state_store: InMemoryLedgerStateStoreStub
    ) -> None:
        response = _configure(client)

        assert response.status_code == 201
        assert response.json() == {
            "members": [ALICE, BOB, CAROL],
            "threshold": 2,
            "threshold_label": "2 of 3",
            "size": 3,
        }
        assert state_store.save_count == 1

    def test_configure_invalid_threshold(self, client: TestClient) -> None:
        response = _configure(client, threshold=5)

        assert response.status_code == 400
        problem = _problem(response)
        assert problem["type"] == "urn:quorumvault:membership:invalid-threshold"
        assert problem["instance"].endswith("/v1/vault/configure")

    def test_configure_after_proposals_conflicts(self, client: TestClient) -> None:
        _configure(client)
        _create(client)

        response = _configure(client, threshold=1)

        assert response.status_code == 409
        assert _problem(response)["type"] == "urn:quorumvault:membership:already-configured"

    def test_unconfigured_reads_conflict(self, client: TestClient) -> None:
        for path in ("/v1/vault", "/v1/vault/summary"):
            response = client.get(path)
            assert response.status_code == 409
            assert _problem(response)["type"] == "urn:quorumvault:membership:not-configured"

    def test_summary(self, client: TestClient) -> None:
        _configure(client)
        _create(client)

        response = client.get("/v1/vault/summary")

        assert response.status_code == 200
        assert response.json()["total"] == 1
        assert response.json()["pending"] == 1


class TestProposalRoutes:
    def test_create_returns_view_for_caller(
        self, client: TestClient, state_store: InMemoryLedgerStateStoreStub
    ) -> None:
        _configure(client)

        response = _create(client, description="<i>rent</i>")

        assert response.status_code == 201
        body = response.json()
        assert body["proposal_id"] == 1
        assert body["approvers"] == [ALICE]
        assert body["phase"] == "pending"
        assert body["asset_label"] == "XLM"
        assert body["description"] == "&lt;i&gt;rent&lt;/i&gt;"
        assert body["created_at"].endswith("Z")
        assert body["has_approved"] is True
        assert body["can_approve"] is False
        assert body["approvals_needed"] == 1
        assert body["receipt"] is None
        assert state_store.saved is not None
        assert len(state_store.saved.proposals) == 1

    def test_create_requires_member_header(self, client: TestClient) -> None:
        _configure(client)

        response = client.post(
            "/v1/proposals",
            json={"recipient": DAVE, "asset": "NATIVE", "amount": "1"},
        )

        assert response.status_code == 422

    def test_create_by_outsider_forbidden(self, client: TestClient) -> None:
        _configure(client)

        response = _create(client, caller=OUTSIDER)

        assert response.status_code == 403
        assert _problem(response)["type"] == "urn:quorumvault:proposal:unauthorized"

    @pytest.mark.parametrize(
        ("overrides", "problem_type"),
        [
            ({"recipient": "nope"}, "urn:quorumvault:proposal:invalid-recipient"),
            ({"asset": "nope"}, "urn:quorumvault:proposal:invalid-asset"),
            ({"amount": "0"}, "urn:quorumvault:proposal:invalid-amount"),
        ],
    )
    def test_create_validation(
        self, client: TestClient, overrides: dict, problem_type: str
    ) -> None:
        _configure(client)

        response = _create(client, **overrides)

        assert response.status_code == 400
        assert _problem(response)["type"] == problem_type

    def test_known_token_label(self, client: TestClient) -> None:
        _configure(client)

        response = _create(client, asset=TOKEN)

        assert response.json()["asset_label"] == "TKN"

    def test_approve_and_execute(self, client: TestClient) -> None:
        _configure(client)
        _create(client)

        approved = client.post("/v1/proposals/1/approve", headers={MEMBER_HEADER: BOB})
        assert approved.status_code == 200
        assert approved.json()["phase"] == "ready"
        assert approved.json()["can_execute"] is True

        executed = client.post("/v1/proposals/1/execute", headers={MEMBER_HEADER: CAROL})
        assert executed.status_code == 200
        body = executed.json()
        assert body["phase"] == "executed"
        assert body["executed"] is True
        assert body["receipt"] == "receipt-0001"
        assert body["executed_at"].endswith("Z")

        again = client.post("/v1/proposals/1/execute", headers={MEMBER_HEADER: ALICE})
        assert again.status_code == 409
        assert _problem(again)["receipt"] == "receipt-0001"

    def test_execute_below_quorum(self, client: TestClient) -> None:
        _configure(client)
        _create(client)

        response = client.post("/v1/proposals/1/execute", headers={MEMBER_HEADER: ALICE})

        assert response.status_code == 409
        problem = _problem(response)
        assert problem["type"] == "urn:quorumvault:proposal:quorum-not-met"
        assert problem["approvals"] == 1

    def test_double_approval_conflict(self, client: TestClient) -> None:
        _configure(client)
        _create(client)

        response = client.post("/v1/proposals/1/approve", headers={MEMBER_HEADER: ALICE})

        assert response.status_code == 409
        assert _problem(response)["approval_position"] == 1

    def test_unknown_proposal(self, client: TestClient) -> None:
        _configure(client)

        response = client.get("/v1/proposals/42")

        assert response.status_code == 404
        assert _problem(response)["proposal_id"] == 42

    def test_get_with_and_without_viewer(self, client: TestClient) -> None:
        _configure(client)
        _create(client)

        anonymous = client.get("/v1/proposals/1").json()
        as_bob = client.get("/v1/proposals/1", headers={MEMBER_HEADER: BOB}).json()

        assert anonymous["viewer"] is None
        assert anonymous["can_approve"] is False
        assert as_bob["viewer"] == BOB
        assert as_bob["can_approve"] is True
        assert as_bob["pending_members"] == [BOB, CAROL]

    def test_list_with_filter(self, client: TestClient) -> None:
        _configure(client)
        _create(client)
        _create(client)
        client.post("/v1/proposals/2/approve", headers={MEMBER_HEADER: BOB})

        ready = client.get("/v1/proposals", params={"filter": "ready"}).json()
        everything = client.get("/v1/proposals").json()

        assert ready["filter"] == "ready"
        assert [p["proposal_id"] for p in ready["proposals"]] == [2]
        assert everything["count"] == 2
        assert [p["proposal_id"] for p in everything["proposals"]] == [2, 1]

    def test_list_rejects_unknown_filter(self, client: TestClient) -> None:
        response = client.get("/v1/proposals", params={"filter": "archived"})

        assert response.status_code == 422

    def test_correlation_id_is_echoed(self, client: TestClient) -> None:
        response = client.get("/v1/proposals", headers={"X-Correlation-ID": "abc-123"})

        assert response.headers["X-Correlation-ID"] == "abc-123"
