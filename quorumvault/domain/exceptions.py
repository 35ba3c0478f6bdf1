"""Base exception classes for the Quorum Vault domain layer."""

from __future__ import annotations

from typing import Any


class VaultError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class so the
    presentation layer can map every rejection to a problem document
    without knowing each subclass.

    Subclasses set the class attributes below and may extend
    ``_problem_extensions`` with their structured fields.

    Attributes:
        problem_type: URN identifying the error kind.
        title: Short human-readable summary of the error kind.
        status_code: HTTP status used by the API layer.
    """

    problem_type: str = "urn:quorumvault:error"
    title: str = "Vault Error"
    status_code: int = 400

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)

    def _problem_extensions(self) -> dict[str, Any]:
        return {}

    def to_rfc7807_dict(self) -> dict[str, Any]:
        """Serialize to RFC 7807 problem details format.

        Returns:
            Dictionary with type, title, status, detail and any
            error-specific extension members.
        """
        result: dict[str, Any] = {
            "type": self.problem_type,
            "title": self.title,
            "status": self.status_code,
            "detail": str(self),
        }
        result.update(self._problem_extensions())
        return result
