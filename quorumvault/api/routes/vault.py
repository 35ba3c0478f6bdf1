"""Vault API routes.

Configure the member set and read the dashboard summary. Configuration
is accepted only while no proposal exists.
"""

from fastapi import APIRouter, Depends, Request

from quorumvault.api.dependencies.vault import get_state_store, get_vault_engine
from quorumvault.api.models.vault import (
    ConfigureVaultRequest,
    MemberSetResponse,
    VaultSummaryResponse,
)
from quorumvault.api.routes.problems import ERROR_RESPONSES, problem_exception
from quorumvault.application.ports.ledger_state_store import LedgerStateStoreProtocol
from quorumvault.application.services.vault_engine import VaultEngine
from quorumvault.domain.exceptions import VaultError
from quorumvault.domain.models.member_set import MemberSet

router = APIRouter(prefix="/v1/vault", tags=["vault"])


def _member_set_to_response(member_set: MemberSet) -> MemberSetResponse:
    return MemberSetResponse(
        members=list(member_set.members),
        threshold=member_set.threshold,
        threshold_label=member_set.threshold_label,
        size=member_set.size,
    )


@router.post(
    "/configure",
    response_model=MemberSetResponse,
    status_code=201,
    responses=ERROR_RESPONSES,
    summary="Configure the vault",
    description=(
        "Set the vault members and approval threshold. Rejected with 409 "
        "once any proposal exists."
    ),
)
async def configure_vault(
    request_data: ConfigureVaultRequest,
    request: Request,
    engine: VaultEngine = Depends(get_vault_engine),
    store: LedgerStateStoreProtocol = Depends(get_state_store),
) -> MemberSetResponse:
    try:
        member_set = await engine.configure(
            request_data.members, request_data.threshold
        )
    except VaultError as e:
        raise problem_exception(e, request) from None

    await store.save_state(engine.snapshot())
    return _member_set_to_response(member_set)


@router.get(
    "",
    response_model=MemberSetResponse,
    responses=ERROR_RESPONSES,
    summary="Get the configured member set",
)
async def get_member_set(
    request: Request,
    engine: VaultEngine = Depends(get_vault_engine),
) -> MemberSetResponse:
    try:
        return _member_set_to_response(engine.member_set)
    except VaultError as e:
        raise problem_exception(e, request) from None


@router.get(
    "/summary",
    response_model=VaultSummaryResponse,
    responses=ERROR_RESPONSES,
    summary="Get dashboard counts",
)
async def get_summary(
    request: Request,
    engine: VaultEngine = Depends(get_vault_engine),
) -> VaultSummaryResponse:
    try:
        summary = engine.summary()
    except VaultError as e:
        raise problem_exception(e, request) from None

    return VaultSummaryResponse(**summary.to_dict())
