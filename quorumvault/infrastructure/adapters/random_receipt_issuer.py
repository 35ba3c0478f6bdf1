"""Random execution receipt issuer."""

from __future__ import annotations

import secrets

RECEIPT_BYTES = 32


class RandomReceiptIssuer:
    """ReceiptIssuerProtocol implementation producing 64 hex characters.

    Receipts are drawn from ``secrets`` and never touch the network, so
    issuing one inside a ledger lock is safe.
    """

    def new_receipt_id(self) -> str:
        return secrets.token_hex(RECEIPT_BYTES)
