"""
Output sanitization for rendered labels.

Caption text is user supplied and ends up inside SVG markup; filenames end up
in Content-Disposition headers.
"""

import re
from pathlib import Path

MAX_FILENAME_LENGTH = 255


# Exactly these five substitutions, ampersand first
XML_ESCAPES = [
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
]


class OutputSanitizer:
    """Sanitize user-supplied text before it reaches markup or headers."""

    @staticmethod
    def escape_xml(text: str) -> str:
        """
        Escape text for embedding in SVG/XML.

        Examples:
            >>> OutputSanitizer.escape_xml("A&B <x>")
            'A&amp;B &lt;x&gt;'

            >>> OutputSanitizer.escape_xml("it's \\"q\\"")
            'it&apos;s &quot;q&quot;'
        """
        if not text:
            return ""

        for char, entity in XML_ESCAPES:
            text = text.replace(char, entity)

        return text

    @staticmethod
    def sanitize_filename(filename: str) -> str:
        """
        Reduce a filename to [a-zA-Z0-9._-] for a Content-Disposition header.

        Path components are dropped and a leading dot is replaced.
        """
        name = re.sub(r"[^a-zA-Z0-9._-]", "_", Path(filename).name)

        if name.startswith("."):
            name = "_" + name[1:]

        return name[:MAX_FILENAME_LENGTH] or "unnamed"
