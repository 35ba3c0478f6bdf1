"""Receipt issuer port.

A receipt stands in for a settlement reference. The default adapter
simulates one; a real settlement integration would implement this port
without touching the ledger state machine.
"""

from __future__ import annotations

from typing import Protocol


class ReceiptIssuerProtocol(Protocol):
    """Protocol for issuing execution receipts."""

    def new_receipt_id(self) -> str:
        """Return a fresh, unique, non-empty receipt identifier."""
        ...
