"""Test helpers for Quorum Vault tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    SequentialReceiptIssuer: Predictable execution receipts

Usage:
    from tests.helpers import FakeTimeAuthority, SequentialReceiptIssuer
"""

from tests.helpers.fake_receipt_issuer import SequentialReceiptIssuer
from tests.helpers.fake_time_authority import FakeTimeAuthority

__all__ = ["FakeTimeAuthority", "SequentialReceiptIssuer"]
