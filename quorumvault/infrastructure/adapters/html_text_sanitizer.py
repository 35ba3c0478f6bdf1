"""HTML-escaping text sanitizer.

Descriptions are free text supplied by members and end up in rendered
views. They are stored escaped so no consumer has to remember to do it.
"""

from __future__ import annotations

import html


class HtmlTextSanitizer:
    """TextSanitizerProtocol implementation using html.escape.

    Escapes ``& < > " '``. Non-string input sanitizes to the empty string.
    """

    def sanitize(self, text: object) -> str:
        if not isinstance(text, str):
            return ""
        return html.escape(text, quote=True)
