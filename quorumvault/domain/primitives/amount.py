"""Transfer amount primitive.

Amounts are carried as decimal strings and checked syntactically only:
positive, plain decimal notation, at most 18 fractional digits. No
asset-specific precision or overflow policy is applied.

Usage:
    from quorumvault.domain.primitives.amount import validate_amount

    amount = validate_amount(" 100.50 ")  # -> "100.50"
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from quorumvault.domain.errors.proposal import InvalidAmountError

MAX_FRACTION_DIGITS = 18
"""Maximum number of digits after the decimal point."""

# ASCII digits only; ``\d`` would also accept other Unicode decimal digits.
_AMOUNT_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?|\.[0-9]+")


def fraction_digits(amount: str) -> int:
    """Count digits after the decimal point of a decimal string."""
    _, _, fraction = amount.partition(".")
    return len(fraction)


def validate_amount(amount: object) -> str:
    """Validate and normalize a transfer amount.

    Surrounding whitespace is removed; the digits are stored exactly as
    given otherwise (no rounding, no re-formatting).

    Args:
        amount: Candidate amount, expected to be a string.

    Returns:
        The stripped amount string.

    Raises:
        InvalidAmountError: If the amount is not a string, not a plain
            decimal, has more than 18 fractional digits, or is not
            greater than zero.
    """
    if not isinstance(amount, str):
        raise InvalidAmountError(repr(amount), "amount must be a decimal string")

    candidate = amount.strip()
    if not _AMOUNT_PATTERN.fullmatch(candidate):
        raise InvalidAmountError(amount, "amount must be a positive number")

    if fraction_digits(candidate) > MAX_FRACTION_DIGITS:
        raise InvalidAmountError(
            amount,
            f"amount can have maximum {MAX_FRACTION_DIGITS} decimal places",
        )

    try:
        value = Decimal(candidate)
    except InvalidOperation:
        raise InvalidAmountError(amount, "amount must be a positive number") from None

    if value <= 0:
        raise InvalidAmountError(amount, "amount must be a positive number")

    return candidate
