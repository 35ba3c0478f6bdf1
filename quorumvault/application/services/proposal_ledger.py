"""Proposal Ledger service.

Owns the collection of proposals and the approve/execute state machine.
Consults the Membership Registry to authorize callers and to evaluate
quorum; never mutates the member set.

Concurrency model:
- One asyncio.Lock per proposal id serializes approve/execute on that
  proposal. Operations on different proposals never share a lock.
- A ledger-wide creation lock serializes id allocation and insertion.
- Proposals are frozen; each transition swaps in a new instance, so
  readers never observe a torn proposal.
- Identifier validation, sanitization and membership checks run before
  any lock is taken. Critical sections contain no I/O.

Check order per operation:
- create_proposal: NotConfigured, Unauthorized, InvalidRecipient,
  InvalidAsset, InvalidAmount
- approve: NotConfigured, Unauthorized, NotFound, AlreadyExecuted,
  AlreadyApproved
- execute: NotConfigured, Unauthorized, NotFound, AlreadyExecuted,
  QuorumNotMet
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from structlog import get_logger

from quorumvault.domain.errors import (
    AlreadyApprovedError,
    AlreadyExecutedError,
    InvalidAmountError,
    InvalidAssetError,
    InvalidRecipientError,
    ProposalNotFoundError,
    QuorumNotMetError,
    UnauthorizedError,
)
from quorumvault.domain.models.ledger_summary import LedgerSummary
from quorumvault.domain.models.proposal import (
    NATIVE_ASSET,
    ExecutedStatus,
    OpenStatus,
    Proposal,
    ProposalFilter,
)
from quorumvault.domain.primitives.amount import validate_amount

if TYPE_CHECKING:
    from quorumvault.application.ports.identifier_validator import (
        IdentifierValidatorProtocol,
    )
    from quorumvault.application.ports.receipt_issuer import ReceiptIssuerProtocol
    from quorumvault.application.ports.text_sanitizer import TextSanitizerProtocol
    from quorumvault.application.ports.time_authority import TimeAuthorityProtocol
    from quorumvault.application.services.membership_registry import (
        MembershipRegistry,
    )

logger = get_logger(__name__)


def _ordering_key(proposal: Proposal) -> tuple[float, int]:
    # Newest first; equal timestamps fall back to the higher id first.
    return (-proposal.created_at.timestamp(), -proposal.proposal_id)


class ProposalLedger:
    """Proposal collection and its approval state machine.

    The creator's approval is recorded at creation: a new proposal starts
    with ``approvers == (created_by,)``. With a threshold of 1 it is
    therefore ready immediately.

    Example:
        >>> ledger = ProposalLedger(
        ...     registry=registry,
        ...     identifier_validator=validator,
        ...     text_sanitizer=sanitizer,
        ...     time_authority=clock,
        ...     receipt_issuer=receipts,
        ... )
        >>> proposal = await ledger.create_proposal(
        ...     caller=alice, recipient=dave, asset=NATIVE_ASSET,
        ...     amount="12.5", description="Team lunch",
        ... )
        >>> await ledger.approve(bob, proposal.proposal_id)
        >>> executed = await ledger.execute(carol, proposal.proposal_id)
    """

    def __init__(
        self,
        registry: MembershipRegistry,
        identifier_validator: IdentifierValidatorProtocol,
        text_sanitizer: TextSanitizerProtocol,
        time_authority: TimeAuthorityProtocol,
        receipt_issuer: ReceiptIssuerProtocol,
    ) -> None:
        """Initialize an empty ledger.

        Args:
            registry: Membership registry consulted for authorization.
            identifier_validator: Validator for recipient and asset ids.
            text_sanitizer: Sanitizer applied to descriptions.
            time_authority: Clock for creation and execution stamps.
            receipt_issuer: Source of execution receipts.
        """
        self._registry = registry
        self._validator = identifier_validator
        self._sanitizer = text_sanitizer
        self._time = time_authority
        self._receipts = receipt_issuer

        self._proposals: dict[int, Proposal] = {}
        self._locks: dict[int, asyncio.Lock] = {}
        self._create_lock = asyncio.Lock()

    @property
    def proposal_count(self) -> int:
        return len(self._proposals)

    @property
    def creation_lock(self) -> asyncio.Lock:
        """Lock guarding insertion; held by the engine while reconfiguring."""
        return self._create_lock

    def _require_member(self, caller: str, operation: str) -> None:
        # member_set raises NotConfiguredError before membership is checked.
        if not self._registry.member_set.is_member(caller):
            logger.warning(
                "operation_rejected",
                reason="unauthorized",
                caller=caller,
                operation=operation,
            )
            raise UnauthorizedError(caller, operation)

    def _lock_for(self, proposal_id: int) -> asyncio.Lock:
        lock = self._locks.get(proposal_id)
        if lock is None:
            logger.warning("proposal_not_found", proposal_id=proposal_id)
            raise ProposalNotFoundError(proposal_id)
        return lock

    def _validate_recipient(self, recipient: object) -> str:
        candidate = recipient.strip() if isinstance(recipient, str) else ""
        if not candidate or not self._validator.validate_member_identifier(candidate):
            raise InvalidRecipientError(str(recipient))
        return candidate

    def _validate_asset(self, asset: object) -> str:
        candidate = asset.strip() if isinstance(asset, str) else ""
        if candidate == NATIVE_ASSET:
            return candidate
        if not candidate or not self._validator.validate_asset_identifier(candidate):
            raise InvalidAssetError(str(asset))
        return candidate

    async def create_proposal(
        self,
        caller: str,
        recipient: str,
        asset: str,
        amount: str,
        description: str = "",
    ) -> Proposal:
        """Create a proposal with the caller as its first approver.

        Args:
            caller: Authenticated identifier of the creating member.
            recipient: Destination identifier (member format).
            asset: NATIVE_ASSET or a contract identifier.
            amount: Positive decimal string, at most 18 fractional digits.
            description: Free text; sanitized before storage.

        Returns:
            The newly created Proposal.

        Raises:
            NotConfiguredError: No member set exists.
            UnauthorizedError: Caller is not a member.
            InvalidRecipientError: Recipient fails identifier validation.
            InvalidAssetError: Asset is neither native nor a valid contract id.
            InvalidAmountError: Amount is not a positive bounded decimal.
        """
        log = logger.bind(caller=caller, operation="create_proposal")

        self._require_member(caller, "create proposals")

        try:
            clean_recipient = self._validate_recipient(recipient)
            clean_asset = self._validate_asset(asset)
            clean_amount = validate_amount(amount)
        except (InvalidRecipientError, InvalidAssetError, InvalidAmountError) as e:
            log.warning("create_proposal_rejected", reason=e.title)
            raise

        raw_description = description.strip() if isinstance(description, str) else ""
        clean_description = self._sanitizer.sanitize(raw_description)

        async with self._create_lock:
            proposal_id = max(self._proposals, default=0) + 1
            proposal = Proposal(
                proposal_id=proposal_id,
                recipient=clean_recipient,
                asset=clean_asset,
                amount=clean_amount,
                created_by=caller,
                created_at=self._time.now(),
                description=clean_description,
                status=OpenStatus(approvers=(caller,)),
            )
            self._locks[proposal_id] = asyncio.Lock()
            self._proposals[proposal_id] = proposal

        log.info(
            "proposal_created",
            proposal_id=proposal_id,
            asset=clean_asset,
            amount=clean_amount,
        )
        return proposal

    async def approve(self, caller: str, proposal_id: int) -> Proposal:
        """Record the caller's approval of a proposal.

        Approval never triggers execution; check ``is_ready`` on the
        returned proposal to learn whether quorum is now met.

        Args:
            caller: Authenticated identifier of the approving member.
            proposal_id: Proposal to approve.

        Returns:
            The updated Proposal.

        Raises:
            NotConfiguredError: No member set exists.
            UnauthorizedError: Caller is not a member.
            ProposalNotFoundError: Unknown proposal id.
            AlreadyExecutedError: Proposal is executed; approvers are frozen.
            AlreadyApprovedError: Caller already approved this proposal.
        """
        log = logger.bind(caller=caller, proposal_id=proposal_id, operation="approve")

        self._require_member(caller, "approve")
        lock = self._lock_for(proposal_id)

        async with lock:
            proposal = self._proposals[proposal_id]

            if isinstance(proposal.status, ExecutedStatus):
                log.warning("approve_rejected", reason="already_executed")
                raise AlreadyExecutedError(proposal_id, proposal.status.receipt)

            if proposal.has_approved(caller):
                log.warning("approve_rejected", reason="already_approved")
                raise AlreadyApprovedError(
                    proposal_id, caller, proposal.approvers.index(caller) + 1
                )

            updated = proposal.with_approval(caller)
            self._proposals[proposal_id] = updated

        threshold = self._registry.quorum_size()
        log.info(
            "proposal_approved",
            approvals=len(updated.approvers),
            threshold=threshold,
            ready=updated.is_ready(threshold),
        )
        return updated

    async def execute(self, caller: str, proposal_id: int) -> Proposal:
        """Execute a proposal that has reached quorum.

        The open -> executed transition happens exactly once, even when
        several members call execute concurrently: the first lock holder
        executes, every later caller gets AlreadyExecutedError.

        Args:
            caller: Authenticated identifier of the executing member.
            proposal_id: Proposal to execute.

        Returns:
            The executed Proposal, carrying executed_at and receipt.

        Raises:
            NotConfiguredError: No member set exists.
            UnauthorizedError: Caller is not a member.
            ProposalNotFoundError: Unknown proposal id.
            AlreadyExecutedError: Proposal was executed before.
            QuorumNotMetError: Fewer approvals than the threshold.
        """
        log = logger.bind(caller=caller, proposal_id=proposal_id, operation="execute")

        self._require_member(caller, "execute")
        threshold = self._registry.quorum_size()
        lock = self._lock_for(proposal_id)

        async with lock:
            proposal = self._proposals[proposal_id]

            if isinstance(proposal.status, ExecutedStatus):
                log.warning("execute_rejected", reason="already_executed")
                raise AlreadyExecutedError(proposal_id, proposal.status.receipt)

            approvals = len(proposal.approvers)
            if approvals < threshold:
                log.warning(
                    "execute_rejected",
                    reason="quorum_not_met",
                    approvals=approvals,
                    threshold=threshold,
                )
                raise QuorumNotMetError(proposal_id, approvals, threshold)

            executed = proposal.as_executed(
                executed_at=self._time.now(),
                receipt=self._receipts.new_receipt_id(),
            )
            self._proposals[proposal_id] = executed

        log.info("proposal_executed", approvals=approvals, threshold=threshold)
        return executed

    def get(self, proposal_id: int) -> Proposal:
        """Return a proposal by id.

        Raises:
            ProposalNotFoundError: Unknown proposal id.
        """
        proposal = self._proposals.get(proposal_id)
        if proposal is None:
            raise ProposalNotFoundError(proposal_id)
        return proposal

    def list_proposals(
        self, proposal_filter: ProposalFilter | str = ProposalFilter.ALL
    ) -> Iterator[Proposal]:
        """List proposals matching a filter, newest first.

        The returned iterator walks a point-in-time copy of the ledger
        taken when this method is called. Each call recomputes from the
        current state; there is no hidden cursor.

        Args:
            proposal_filter: One of all, pending, ready, executed.

        Returns:
            Lazy iterator over matching proposals, ordered by created_at
            descending, then proposal_id descending.

        Raises:
            ValueError: If the filter value is unknown.
        """
        selected = ProposalFilter(proposal_filter)
        current = tuple(self._proposals.values())
        threshold = self._registry.quorum_size() if current else 0
        return self._iter_matching(current, selected, threshold)

    @staticmethod
    def _iter_matching(
        proposals: Iterable[Proposal], selected: ProposalFilter, threshold: int
    ) -> Iterator[Proposal]:
        for proposal in sorted(proposals, key=_ordering_key):
            if selected.matches(proposal.phase(threshold)):
                yield proposal

    def count_by_phase(self) -> dict[ProposalFilter, int]:
        """Count proposals per listing filter.

        Returns:
            Mapping of every ProposalFilter to its match count.
        """
        counts = {f: 0 for f in ProposalFilter}
        current = tuple(self._proposals.values())
        if not current:
            return counts

        threshold = self._registry.quorum_size()
        for proposal in current:
            counts[ProposalFilter.ALL] += 1
            counts[ProposalFilter(proposal.phase(threshold).value)] += 1
        return counts

    def summary(self) -> LedgerSummary:
        """Dashboard counts for the configured vault.

        Raises:
            NotConfiguredError: No member set exists.
        """
        member_set = self._registry.member_set
        counts = self.count_by_phase()
        return LedgerSummary(
            member_count=member_set.size,
            threshold=member_set.threshold,
            total=counts[ProposalFilter.ALL],
            pending=counts[ProposalFilter.PENDING],
            ready=counts[ProposalFilter.READY],
            executed=counts[ProposalFilter.EXECUTED],
        )

    def snapshot_proposals(self) -> tuple[Proposal, ...]:
        """Return every proposal in ascending id order."""
        return tuple(self._proposals[pid] for pid in sorted(self._proposals))

    def restore_proposals(self, proposals: Iterable[Proposal]) -> None:
        """Replace the ledger contents with already-validated proposals."""
        restored = {p.proposal_id: p for p in proposals}
        self._proposals = restored
        self._locks = {pid: asyncio.Lock() for pid in restored}
        logger.info("ledger_restored", proposal_count=len(restored))
