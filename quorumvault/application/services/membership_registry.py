"""Membership Registry service.

Owns the vault's group configuration: the set of authorized members and
the approval threshold. Leaf component with no dependency on the ledger;
the Proposal Ledger reads from it, never writes.

Validation order for configure:
1. Non-empty member list
2. At most MAX_MEMBERS members
3. Every member passes identifier format validation
4. No duplicates
5. 1 <= threshold <= member count
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from structlog import get_logger

from quorumvault.domain.errors import (
    DuplicateMemberError,
    EmptyMembershipError,
    InvalidIdentifierError,
    InvalidThresholdError,
    MembershipLimitExceededError,
    NotConfiguredError,
)
from quorumvault.domain.models.member_set import MAX_MEMBERS, MemberSet

if TYPE_CHECKING:
    from quorumvault.application.ports.identifier_validator import (
        IdentifierValidatorProtocol,
    )

logger = get_logger(__name__)


class MembershipRegistry:
    """Holds the immutable MemberSet once configured.

    Read operations (is_member, quorum_size, size) are pure and raise
    NotConfiguredError until configure has succeeded.

    Example:
        >>> registry = MembershipRegistry(identifier_validator=validator)
        >>> registry.configure([alice, bob, carol], threshold=2)
        >>> registry.quorum_size()
        2
    """

    def __init__(self, identifier_validator: IdentifierValidatorProtocol) -> None:
        """Initialize an unconfigured registry.

        Args:
            identifier_validator: Validator for member identifier format.
        """
        self._validator = identifier_validator
        self._member_set: MemberSet | None = None

    @property
    def is_configured(self) -> bool:
        return self._member_set is not None

    @property
    def member_set(self) -> MemberSet:
        """The configured member set.

        Raises:
            NotConfiguredError: If configure has not succeeded yet.
        """
        if self._member_set is None:
            raise NotConfiguredError()
        return self._member_set

    def configure(self, members: Sequence[str], threshold: int) -> MemberSet:
        """Validate and install a member set.

        Surrounding whitespace is stripped from each member before
        validation; the stripped form is what gets stored. Any previous
        configuration is replaced (the engine decides when that is
        allowed).

        Args:
            members: Member identifiers, in display order.
            threshold: Approvals required to execute a proposal.

        Returns:
            The installed MemberSet.

        Raises:
            EmptyMembershipError: No members supplied.
            MembershipLimitExceededError: More than MAX_MEMBERS supplied.
            InvalidIdentifierError: A member fails format validation.
            DuplicateMemberError: A member appears more than once.
            InvalidThresholdError: Threshold outside 1..len(members).
        """
        log = logger.bind(member_count=len(members), threshold=threshold)

        if not members:
            log.warning("configure_rejected", reason="empty_membership")
            raise EmptyMembershipError()

        if len(members) > MAX_MEMBERS:
            log.warning("configure_rejected", reason="membership_limit_exceeded")
            raise MembershipLimitExceededError(len(members), MAX_MEMBERS)

        normalized: list[str] = []
        for position, raw in enumerate(members):
            candidate = raw.strip() if isinstance(raw, str) else ""
            if not candidate or not self._validator.validate_member_identifier(
                candidate
            ):
                log.warning(
                    "configure_rejected",
                    reason="invalid_identifier",
                    position=position,
                )
                raise InvalidIdentifierError(str(raw), position)
            normalized.append(candidate)

        seen: set[str] = set()
        for identifier in normalized:
            if identifier in seen:
                log.warning(
                    "configure_rejected",
                    reason="duplicate_member",
                    identifier=identifier,
                )
                raise DuplicateMemberError(identifier)
            seen.add(identifier)

        if isinstance(threshold, bool) or not isinstance(threshold, int):
            log.warning("configure_rejected", reason="invalid_threshold")
            raise InvalidThresholdError(threshold, len(normalized))

        if not 1 <= threshold <= len(normalized):
            log.warning("configure_rejected", reason="invalid_threshold")
            raise InvalidThresholdError(threshold, len(normalized))

        member_set = MemberSet(members=tuple(normalized), threshold=threshold)
        replaced = self._member_set is not None
        self._member_set = member_set

        log.info(
            "vault_configured",
            threshold_label=member_set.threshold_label,
            replaced_previous=replaced,
        )
        return member_set

    def restore(self, member_set: MemberSet | None) -> None:
        """Install a member set from a snapshot without re-validation.

        The engine validates snapshots before calling this.
        """
        self._member_set = member_set

    def is_member(self, identifier: str) -> bool:
        """Check whether ``identifier`` is a configured member.

        Raises:
            NotConfiguredError: If the registry is unconfigured.
        """
        return self.member_set.is_member(identifier)

    def quorum_size(self) -> int:
        """Return the approval threshold.

        Raises:
            NotConfiguredError: If the registry is unconfigured.
        """
        return self.member_set.threshold

    def size(self) -> int:
        """Return the number of configured members.

        Raises:
            NotConfiguredError: If the registry is unconfigured.
        """
        return self.member_set.size
