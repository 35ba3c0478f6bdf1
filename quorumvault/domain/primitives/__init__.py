"""Domain primitives for Quorum Vault."""

from quorumvault.domain.primitives.amount import (
    MAX_FRACTION_DIGITS,
    fraction_digits,
    validate_amount,
)

__all__: list[str] = ["MAX_FRACTION_DIGITS", "fraction_digits", "validate_amount"]
