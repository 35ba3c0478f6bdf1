"""Identifier validator port.

Identifier formats are owned by the surrounding network, not by the
engine. The engine only asks yes/no questions through this port.
"""

from __future__ import annotations

from typing import Protocol


class IdentifierValidatorProtocol(Protocol):
    """Protocol for validating member and asset identifiers.

    Implementations must be pure and non-blocking; they are called
    before any ledger lock is acquired.
    """

    def validate_member_identifier(self, identifier: str) -> bool:
        """Check a member or recipient identifier.

        Args:
            identifier: Candidate identifier.

        Returns:
            True if the identifier has the member format.
        """
        ...

    def validate_asset_identifier(self, identifier: str) -> bool:
        """Check an asset contract identifier.

        The native asset sentinel is handled by the ledger and is never
        passed here.

        Args:
            identifier: Candidate contract identifier.

        Returns:
            True if the identifier has the contract format.
        """
        ...
