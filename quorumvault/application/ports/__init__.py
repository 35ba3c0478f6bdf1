"""Application ports (interfaces to external collaborators)."""

from quorumvault.application.ports.identifier_validator import (
    IdentifierValidatorProtocol,
)
from quorumvault.application.ports.ledger_state_store import LedgerStateStoreProtocol
from quorumvault.application.ports.receipt_issuer import ReceiptIssuerProtocol
from quorumvault.application.ports.text_sanitizer import TextSanitizerProtocol
from quorumvault.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "IdentifierValidatorProtocol",
    "LedgerStateStoreProtocol",
    "ReceiptIssuerProtocol",
    "TextSanitizerProtocol",
    "TimeAuthorityProtocol",
]
