"""Proposal API routes.

Create, list, view, approve and execute transfer proposals. The caller
is identified by the X-Member-Id header; every mutation persists a fresh
engine snapshot through the configured state store before responding.
"""

from fastapi import APIRouter, Depends, Query, Request

from quorumvault.api.dependencies.vault import (
    get_caller,
    get_optional_viewer,
    get_state_store,
    get_vault_engine,
)
from quorumvault.api.models.proposal import (
    CreateProposalRequest,
    ProposalDetailResponse,
    ProposalListResponse,
    ProposalResponse,
)
from quorumvault.api.routes.problems import ERROR_RESPONSES, problem_exception
from quorumvault.application.dtos.proposal_view import ProposalView
from quorumvault.application.ports.ledger_state_store import LedgerStateStoreProtocol
from quorumvault.application.services.vault_engine import VaultEngine
from quorumvault.domain.exceptions import VaultError
from quorumvault.domain.models.proposal import ProposalFilter

router = APIRouter(prefix="/v1/proposals", tags=["proposals"])


def _view_fields(view: ProposalView) -> dict[str, object]:
    proposal = view.proposal
    return {
        "proposal_id": proposal.proposal_id,
        "recipient": proposal.recipient,
        "asset": proposal.asset,
        "asset_label": view.asset_label,
        "amount": proposal.amount,
        "description": proposal.description,
        "created_by": proposal.created_by,
        "created_at": proposal.created_at,
        "approvers": list(proposal.approvers),
        "phase": view.phase.value,
        "executed": proposal.is_executed,
        "executed_at": view.executed_at,
        "receipt": view.receipt,
    }


def _view_to_response(view: ProposalView) -> ProposalResponse:
    return ProposalResponse(**_view_fields(view))


def _view_to_detail(view: ProposalView) -> ProposalDetailResponse:
    return ProposalDetailResponse(
        **_view_fields(view),
        threshold=view.threshold,
        approvals=view.approvals,
        approvals_needed=view.approvals_needed,
        pending_members=list(view.pending_members),
        viewer=view.viewer,
        has_approved=view.has_approved,
        can_approve=view.can_approve,
        can_execute=view.can_execute,
    )


@router.post(
    "",
    response_model=ProposalDetailResponse,
    status_code=201,
    responses=ERROR_RESPONSES,
    summary="Create a proposal",
    description="Create a transfer proposal. The creator's approval is recorded.",
)
async def create_proposal(
    request_data: CreateProposalRequest,
    request: Request,
    caller: str = Depends(get_caller),
    engine: VaultEngine = Depends(get_vault_engine),
    store: LedgerStateStoreProtocol = Depends(get_state_store),
) -> ProposalDetailResponse:
    try:
        proposal = await engine.create_proposal(
            caller=caller,
            recipient=request_data.recipient,
            asset=request_data.asset,
            amount=request_data.amount,
            description=request_data.description,
        )
        view = engine.describe(proposal, viewer=caller)
    except VaultError as e:
        raise problem_exception(e, request) from None

    await store.save_state(engine.snapshot())
    return _view_to_detail(view)


@router.get(
    "",
    response_model=ProposalListResponse,
    responses=ERROR_RESPONSES,
    summary="List proposals",
    description="Proposals matching the filter, newest first.",
)
async def list_proposals(
    request: Request,
    proposal_filter: ProposalFilter = Query(ProposalFilter.ALL, alias="filter"),
    engine: VaultEngine = Depends(get_vault_engine),
) -> ProposalListResponse:
    try:
        proposals = list(engine.list_proposals(proposal_filter))
        responses = [_view_to_response(engine.describe(p)) for p in proposals]
    except VaultError as e:
        raise problem_exception(e, request) from None

    return ProposalListResponse(
        filter=proposal_filter.value,
        count=len(responses),
        proposals=responses,
    )


@router.get(
    "/{proposal_id}",
    response_model=ProposalDetailResponse,
    responses=ERROR_RESPONSES,
    summary="Get a proposal",
    description="Viewer flags are computed for the X-Member-Id header, if sent.",
)
async def get_proposal(
    proposal_id: int,
    request: Request,
    viewer: str | None = Depends(get_optional_viewer),
    engine: VaultEngine = Depends(get_vault_engine),
) -> ProposalDetailResponse:
    try:
        view = engine.view(proposal_id, viewer=viewer)
    except VaultError as e:
        raise problem_exception(e, request) from None

    return _view_to_detail(view)


@router.post(
    "/{proposal_id}/approve",
    response_model=ProposalDetailResponse,
    responses=ERROR_RESPONSES,
    summary="Approve a proposal",
)
async def approve_proposal(
    proposal_id: int,
    request: Request,
    caller: str = Depends(get_caller),
    engine: VaultEngine = Depends(get_vault_engine),
    store: LedgerStateStoreProtocol = Depends(get_state_store),
) -> ProposalDetailResponse:
    try:
        proposal = await engine.approve(caller, proposal_id)
        view = engine.describe(proposal, viewer=caller)
    except VaultError as e:
        raise problem_exception(e, request) from None

    await store.save_state(engine.snapshot())
    return _view_to_detail(view)


@router.post(
    "/{proposal_id}/execute",
    response_model=ProposalDetailResponse,
    responses=ERROR_RESPONSES,
    summary="Execute a proposal",
    description="Execute a proposal that reached quorum. Succeeds exactly once.",
)
async def execute_proposal(
    proposal_id: int,
    request: Request,
    caller: str = Depends(get_caller),
    engine: VaultEngine = Depends(get_vault_engine),
    store: LedgerStateStoreProtocol = Depends(get_state_store),
) -> ProposalDetailResponse:
    try:
        proposal = await engine.execute(caller, proposal_id)
        view = engine.describe(proposal, viewer=caller)
    except VaultError as e:
        raise problem_exception(e, request) from None

    await store.save_state(engine.snapshot())
    return _view_to_detail(view)
