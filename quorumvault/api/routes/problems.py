"""RFC 7807 problem mapping for domain errors."""

from fastapi import HTTPException, Request

from quorumvault.api.models.vault import ProblemResponse
from quorumvault.domain.exceptions import VaultError

ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ProblemResponse, "description": "Validation failed"},
    403: {"model": ProblemResponse, "description": "Caller is not a member"},
    404: {"model": ProblemResponse, "description": "Proposal not found"},
    409: {
        "model": ProblemResponse,
        "description": "Conflicts with the current vault or proposal state",
    },
}


def problem_exception(error: VaultError, request: Request) -> HTTPException:
    """Convert a domain error into an HTTPException carrying a problem document."""
    detail = error.to_rfc7807_dict()
    detail["instance"] = str(request.url)
    return HTTPException(status_code=error.status_code, detail=detail)
