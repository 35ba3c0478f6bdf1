#!/usr/bin/env python3
"""Walk a vault through the create/approve/execute lifecycle.

Usage:
    python scripts/run_vault_demo.py [options]

Examples:
    # Fresh random 2-of-3 vault, state kept in memory
    python scripts/run_vault_demo.py

    # Persist state so a second run continues from it
    python scripts/run_vault_demo.py --state vault_state.json

    # Larger vault
    python scripts/run_vault_demo.py --members 5 --threshold 3
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

from quorumvault.bootstrap.logging import configure_logging
from quorumvault.bootstrap.vault import build_state_store, build_vault_engine
from quorumvault.config.vault_config import VaultConfig
from quorumvault.domain.exceptions import VaultError
from quorumvault.domain.models.proposal import NATIVE_ASSET, ProposalFilter
from quorumvault.infrastructure.adapters.stellar_identifier_validator import (
    generate_member_identifier,
)


async def run_demo(
    config: VaultConfig, member_count: int, threshold: int, amount: str
) -> int:
    """Run the scenario; returns a process exit code."""
    engine = build_vault_engine(config)
    store = build_state_store(config)

    snapshot = await store.load_state()
    if snapshot is not None and not snapshot.is_empty:
        await engine.restore(snapshot)
        print(f"Restored vault from {config.state_path}")
    else:
        members = [generate_member_identifier() for _ in range(member_count)]
        try:
            await engine.configure(members, threshold)
        except VaultError as e:
            print(f"Cannot configure vault: {e}")
            return 1
        print(f"Configured new vault ({engine.member_set.threshold_label})")

    members = list(engine.member_set.members)
    recipient = generate_member_identifier()

    print(f"\n{'=' * 60}")
    print("QUORUM VAULT DEMO")
    print(f"{'=' * 60}")
    for index, member in enumerate(members, start=1):
        print(f"  member {index}: {member}")
    print(f"{'=' * 60}\n")

    try:
        proposal = await engine.create_proposal(
            caller=members[0],
            recipient=recipient,
            asset=NATIVE_ASSET,
            amount=amount,
            description="Demo transfer",
        )
        print(f"Created proposal #{proposal.proposal_id} for {amount}")

        for member in members[1 : engine.member_set.threshold]:
            proposal = await engine.approve(member, proposal.proposal_id)
            print(f"  approved by {member[:6]}... ({len(proposal.approvers)})")

        proposal = await engine.execute(members[-1], proposal.proposal_id)
        view = engine.view(proposal.proposal_id, viewer=members[-1])
        print(f"Executed proposal #{proposal.proposal_id}, receipt {view.receipt}")
    except VaultError as e:
        print(f"Demo failed: {e}")
        return 1

    await store.save_state(engine.snapshot())

    summary = engine.summary()
    print(f"\n{'=' * 60}")
    print("SUMMARY")
    print(f"{'=' * 60}")
    print(f"Rule:     {summary.threshold_label}")
    print(f"Total:    {summary.total}")
    print(f"Pending:  {summary.pending}")
    print(f"Ready:    {summary.ready}")
    print(f"Executed: {summary.executed}")
    for item in engine.list_proposals(ProposalFilter.EXECUTED):
        print(f"  #{item.proposal_id} {item.amount} -> {item.recipient[:6]}...")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Run a quorum vault lifecycle demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--members", type=int, default=3, help="Members in a new vault (default: 3)"
    )
    parser.add_argument(
        "--threshold", type=int, default=2, help="Approval threshold (default: 2)"
    )
    parser.add_argument(
        "--amount", default="10", help="Transfer amount (default: 10)"
    )
    parser.add_argument(
        "--state",
        type=Path,
        default=None,
        help="JSON state file (overrides VAULT_STATE_PATH)",
    )
    args = parser.parse_args()

    config = VaultConfig.from_env()
    if args.state is not None:
        config = VaultConfig(
            environment=config.environment,
            state_path=args.state,
            native_asset_label=config.native_asset_label,
            asset_labels=config.asset_labels,
        )
    configure_logging(config)

    return asyncio.run(run_demo(config, args.members, args.threshold, args.amount))


if __name__ == "__main__":
    sys.exit(main())
