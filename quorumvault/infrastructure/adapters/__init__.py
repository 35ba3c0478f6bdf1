"""Production adapters for the application ports."""

from quorumvault.infrastructure.adapters.html_text_sanitizer import HtmlTextSanitizer
from quorumvault.infrastructure.adapters.json_file_ledger_state_store import (
    JsonFileLedgerStateStore,
)
from quorumvault.infrastructure.adapters.random_receipt_issuer import (
    RandomReceiptIssuer,
)
from quorumvault.infrastructure.adapters.stellar_identifier_validator import (
    StellarIdentifierValidator,
    generate_contract_identifier,
    generate_member_identifier,
)
from quorumvault.infrastructure.adapters.system_time_authority import (
    SystemTimeAuthority,
)

__all__: list[str] = [
    "HtmlTextSanitizer",
    "JsonFileLedgerStateStore",
    "RandomReceiptIssuer",
    "StellarIdentifierValidator",
    "SystemTimeAuthority",
    "generate_contract_identifier",
    "generate_member_identifier",
]
