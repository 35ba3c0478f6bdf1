"""Vault engine: explicit owner of a registry and a ledger.

The engine is the operation surface consumed by presentation layers. It
owns one MembershipRegistry and one ProposalLedger, wires the external
collaborators into them, and offers a snapshot/restore pair so callers
can persist state however they like.

There are no process-wide singletons here: construct an engine, pass it
by reference.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import TYPE_CHECKING

from structlog import get_logger

from quorumvault.application.dtos.proposal_view import (
    DEFAULT_NATIVE_ASSET_LABEL,
    ProposalView,
)
from quorumvault.application.services.membership_registry import MembershipRegistry
from quorumvault.application.services.proposal_ledger import ProposalLedger
from quorumvault.domain.errors import AlreadyConfiguredError, CorruptSnapshotError
from quorumvault.domain.models.ledger_snapshot import LedgerSnapshot
from quorumvault.domain.models.ledger_summary import LedgerSummary
from quorumvault.domain.models.member_set import MemberSet
from quorumvault.domain.models.proposal import Proposal, ProposalFilter

if TYPE_CHECKING:
    from quorumvault.application.ports.identifier_validator import (
        IdentifierValidatorProtocol,
    )
    from quorumvault.application.ports.receipt_issuer import ReceiptIssuerProtocol
    from quorumvault.application.ports.text_sanitizer import TextSanitizerProtocol
    from quorumvault.application.ports.time_authority import TimeAuthorityProtocol

logger = get_logger(__name__)


class VaultEngine:
    """Threshold-authorization engine for one vault.

    Example:
        >>> engine = VaultEngine(
        ...     identifier_validator=StellarIdentifierValidator(),
        ...     text_sanitizer=HtmlTextSanitizer(),
        ...     time_authority=SystemTimeAuthority(),
        ...     receipt_issuer=RandomReceiptIssuer(),
        ... )
        >>> await engine.configure([alice, bob, carol], threshold=2)
        >>> proposal = await engine.create_proposal(alice, dave, "NATIVE", "10", "")
        >>> await engine.approve(bob, proposal.proposal_id)
        >>> await engine.execute(carol, proposal.proposal_id)
    """

    def __init__(
        self,
        identifier_validator: IdentifierValidatorProtocol,
        text_sanitizer: TextSanitizerProtocol,
        time_authority: TimeAuthorityProtocol,
        receipt_issuer: ReceiptIssuerProtocol,
        native_asset_label: str = DEFAULT_NATIVE_ASSET_LABEL,
        known_assets: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize an unconfigured engine.

        Args:
            identifier_validator: Member/asset identifier format checks.
            text_sanitizer: Description sanitizer.
            time_authority: Clock for proposal timestamps.
            receipt_issuer: Execution receipt source.
            native_asset_label: Display label for the native asset.
            known_assets: Contract identifier -> display label.
        """
        self._registry = MembershipRegistry(identifier_validator=identifier_validator)
        self._ledger = ProposalLedger(
            registry=self._registry,
            identifier_validator=identifier_validator,
            text_sanitizer=text_sanitizer,
            time_authority=time_authority,
            receipt_issuer=receipt_issuer,
        )
        self._identifier_validator = identifier_validator
        self._native_asset_label = native_asset_label
        self._known_assets = dict(known_assets or {})

    @property
    def registry(self) -> MembershipRegistry:
        return self._registry

    @property
    def ledger(self) -> ProposalLedger:
        return self._ledger

    @property
    def is_configured(self) -> bool:
        return self._registry.is_configured

    @property
    def member_set(self) -> MemberSet:
        """The configured member set.

        Raises:
            NotConfiguredError: If the vault is not configured.
        """
        return self._registry.member_set

    async def configure(self, members: Sequence[str], threshold: int) -> MemberSet:
        """Configure the vault's members and threshold.

        Replacing an existing configuration is permitted only while the
        ledger is empty; in-flight proposals are never re-evaluated
        against a new member set.

        Raises:
            AlreadyConfiguredError: Proposals already exist.
            EmptyMembershipError, MembershipLimitExceededError,
            InvalidIdentifierError, DuplicateMemberError,
            InvalidThresholdError: See MembershipRegistry.configure.
        """
        async with self._ledger.creation_lock:
            if self._ledger.proposal_count:
                logger.warning(
                    "configure_rejected",
                    reason="already_configured",
                    proposal_count=self._ledger.proposal_count,
                )
                raise AlreadyConfiguredError(self._ledger.proposal_count)
            return self._registry.configure(members, threshold)

    async def create_proposal(
        self,
        caller: str,
        recipient: str,
        asset: str,
        amount: str,
        description: str = "",
    ) -> Proposal:
        """Create a proposal; see ProposalLedger.create_proposal."""
        return await self._ledger.create_proposal(
            caller=caller,
            recipient=recipient,
            asset=asset,
            amount=amount,
            description=description,
        )

    async def approve(self, caller: str, proposal_id: int) -> Proposal:
        """Approve a proposal; see ProposalLedger.approve."""
        return await self._ledger.approve(caller, proposal_id)

    async def execute(self, caller: str, proposal_id: int) -> Proposal:
        """Execute a proposal; see ProposalLedger.execute."""
        return await self._ledger.execute(caller, proposal_id)

    def get(self, proposal_id: int) -> Proposal:
        return self._ledger.get(proposal_id)

    def list_proposals(
        self, proposal_filter: ProposalFilter | str = ProposalFilter.ALL
    ) -> Iterator[Proposal]:
        return self._ledger.list_proposals(proposal_filter)

    def count_by_phase(self) -> dict[ProposalFilter, int]:
        return self._ledger.count_by_phase()

    def summary(self) -> LedgerSummary:
        return self._ledger.summary()

    def view(self, proposal_id: int, viewer: str | None = None) -> ProposalView:
        """Build a viewer-specific view of a proposal.

        Raises:
            NotConfiguredError: If the vault is not configured.
            ProposalNotFoundError: Unknown proposal id.
        """
        member_set = self._registry.member_set
        return self.describe(self._ledger.get(proposal_id), viewer, member_set)

    def describe(
        self,
        proposal: Proposal,
        viewer: str | None = None,
        member_set: MemberSet | None = None,
    ) -> ProposalView:
        """Build a view of an already fetched proposal.

        Used for listings and for the result of a mutation, where the
        proposal instance in hand is the one to describe.
        """
        return ProposalView.build(
            proposal=proposal,
            member_set=member_set or self._registry.member_set,
            viewer=viewer,
            native_label=self._native_asset_label,
            known_assets=self._known_assets,
        )

    def snapshot(self) -> LedgerSnapshot:
        """Return the full engine state as a serializable snapshot."""
        return LedgerSnapshot(
            member_set=self._registry.member_set if self.is_configured else None,
            proposals=self._ledger.snapshot_proposals(),
        )

    async def restore(self, snapshot: LedgerSnapshot) -> None:
        """Replace the engine state with ``snapshot``.

        The snapshot is checked against every ledger invariant first; a
        rejected snapshot leaves the engine exactly as it was.

        Raises:
            CorruptSnapshotError: The snapshot violates an invariant.
        """
        _check_snapshot(snapshot, self._identifier_validator)
        async with self._ledger.creation_lock:
            self._registry.restore(snapshot.member_set)
            self._ledger.restore_proposals(snapshot.proposals)
        logger.info(
            "engine_restored",
            configured=snapshot.member_set is not None,
            proposal_count=len(snapshot.proposals),
        )


def _check_snapshot(
    snapshot: LedgerSnapshot, identifier_validator: IdentifierValidatorProtocol
) -> None:
    member_set = snapshot.member_set
    if member_set is None:
        if snapshot.proposals:
            raise CorruptSnapshotError("proposals present without a member set")
        return

    for member in member_set.members:
        if not identifier_validator.validate_member_identifier(member):
            raise CorruptSnapshotError(f"malformed member identifier {member!r}")

    seen_ids: set[int] = set()
    for proposal in snapshot.proposals:
        if proposal.proposal_id in seen_ids:
            raise CorruptSnapshotError(
                f"duplicate proposal id {proposal.proposal_id}"
            )
        seen_ids.add(proposal.proposal_id)

        outsiders = [a for a in proposal.approvers if not member_set.is_member(a)]
        if outsiders:
            raise CorruptSnapshotError(
                f"proposal {proposal.proposal_id} has non-member approvers"
            )

        if proposal.approvers[:1] != (proposal.created_by,):
            raise CorruptSnapshotError(
                f"proposal {proposal.proposal_id} is not first approved by its creator"
            )

        if proposal.is_executed and len(proposal.approvers) < member_set.threshold:
            raise CorruptSnapshotError(
                f"proposal {proposal.proposal_id} executed below threshold"
            )
