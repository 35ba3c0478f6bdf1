"""Text sanitizer port."""

from __future__ import annotations

from typing import Protocol


class TextSanitizerProtocol(Protocol):
    """Protocol for neutralizing markup in free text before storage."""

    def sanitize(self, text: object) -> str:
        """Return ``text`` with markup neutralized.

        Args:
            text: Raw user input. Non-string input sanitizes to "".

        Returns:
            Text safe to store and render.
        """
        ...
