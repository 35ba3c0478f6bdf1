"""API routers."""

from quorumvault.api.routes.proposals import router as proposals_router
from quorumvault.api.routes.vault import router as vault_router

__all__: list[str] = ["proposals_router", "vault_router"]
