"""Member set domain model.

This module defines the group configuration a vault is governed by:
- MemberSet: the authorized member identifiers and the approval threshold

A MemberSet is created once by the Membership Registry and never mutated
afterwards. Format validation of identifiers is an external capability;
the model itself only guards the structural invariants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

MAX_MEMBERS = 10
"""Largest member set a vault accepts."""

MIN_MEMBERS = 1
"""Smallest member set a vault accepts."""


@dataclass(frozen=True, eq=True)
class MemberSet:
    """Authorized members and the approval threshold.

    Invariants:
    - 1 <= len(members) <= MAX_MEMBERS
    - members are unique
    - 1 <= threshold <= len(members)

    Attributes:
        members: Member identifiers in configuration order.
        threshold: Minimum distinct approvals required to execute.
    """

    members: tuple[str, ...]
    threshold: int

    def __post_init__(self) -> None:
        """Validate structural invariants.

        Raises:
            ValueError: If any invariant is violated.
        """
        if not MIN_MEMBERS <= len(self.members) <= MAX_MEMBERS:
            raise ValueError(
                f"members must contain {MIN_MEMBERS}..{MAX_MEMBERS} entries, "
                f"got {len(self.members)}"
            )

        if len(set(self.members)) != len(self.members):
            raise ValueError("members must be unique")

        if not 1 <= self.threshold <= len(self.members):
            raise ValueError(
                f"threshold must be between 1 and {len(self.members)}, "
                f"got {self.threshold}"
            )

    @property
    def size(self) -> int:
        """Number of configured members."""
        return len(self.members)

    def is_member(self, identifier: str) -> bool:
        """Check whether an identifier belongs to the member set."""
        return identifier in self.members

    @property
    def threshold_label(self) -> str:
        """Human-readable quorum rule, e.g. ``"2 of 3"``."""
        return f"{self.threshold} of {self.size}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for snapshots.

        Returns:
            Dictionary representation with schema version.
        """
        return {
            "members": list(self.members),
            "threshold": self.threshold,
            "schema_version": 1,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MemberSet:
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a MemberSet.

        Returns:
            MemberSet instance.

        Raises:
            KeyError: If required fields are missing.
            ValueError: If field values are invalid.
        """
        return cls(
            members=tuple(data["members"]),
            threshold=int(data["threshold"]),
        )
