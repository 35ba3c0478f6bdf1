"""Stellar-style identifier validation.

Account identifiers are 56 characters: a leading ``G`` followed by 55
base32 characters (A-Z, 2-7). Contract identifiers use the same shape
with a leading ``C``. Only the shape is checked; no checksum decoding
is performed.
"""

from __future__ import annotations

import re
import secrets

_BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
_BODY_LENGTH = 55

MEMBER_IDENTIFIER_PATTERN = re.compile(r"G[A-Z2-7]{55}")
CONTRACT_IDENTIFIER_PATTERN = re.compile(r"C[A-Z2-7]{55}")


def _random_body() -> str:
    return "".join(secrets.choice(_BASE32_ALPHABET) for _ in range(_BODY_LENGTH))


def generate_member_identifier() -> str:
    """Return a random, well-formed member identifier."""
    return "G" + _random_body()


def generate_contract_identifier() -> str:
    """Return a random, well-formed contract identifier."""
    return "C" + _random_body()


class StellarIdentifierValidator:
    """IdentifierValidatorProtocol implementation for Stellar strkeys."""

    def validate_member_identifier(self, identifier: str) -> bool:
        return isinstance(identifier, str) and bool(
            MEMBER_IDENTIFIER_PATTERN.fullmatch(identifier)
        )

    def validate_asset_identifier(self, identifier: str) -> bool:
        return isinstance(identifier, str) and bool(
            CONTRACT_IDENTIFIER_PATTERN.fullmatch(identifier)
        )
