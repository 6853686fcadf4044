"""
Per-target escape tables for string content.

Each table names the characters it rewrites with a fixed replacement and
renders every other character of the control and general-punctuation bands
through a numeric template:

- C0 controls U+0000-U+001F
- DEL and C1 controls U+007F-U+009F
- General Punctuation and neighbours U+2000-U+20FF
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

import regex

_ESCAPED_BANDS = r"\x00-\x1f\x7f-\x9f\u2000-\u20ff"

_BACKSLASH_ESCAPES = {
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


@dataclass(frozen=True)
class EscapeTable:
    """Immutable mapping from code points to their escaped form."""

    named: Mapping[str, str]
    numeric_template: str
    pattern: "regex.Pattern[str]" = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "named", MappingProxyType(dict(self.named)))
        extra = "".join(f"\\u{ord(char):04x}" for char in self.named)
        object.__setattr__(
            self, "pattern", regex.compile(f"[{_ESCAPED_BANDS}{extra}]")
        )

    def escape_char(self, char: str) -> str:
        replacement = self.named.get(char)
        if replacement is not None:
            return replacement
        return self.numeric_template.format(ord(char))

    def escape(self, text: Optional[str]) -> Optional[str]:
        """Escape text for this target; None stays None."""
        if text is None:
            return None
        return self.pattern.sub(lambda match: self.escape_char(match.group()), text)


JSON_ESCAPES = EscapeTable(
    named={'"': '\\"', **_BACKSLASH_ESCAPES, "/": "\\/"},
    numeric_template="\\u{:04X}",
)

XML_ESCAPES = EscapeTable(
    named={
        '"': "&quot;",
        "'": "&apos;",
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        **_BACKSLASH_ESCAPES,
        "/": "\\/",
    },
    numeric_template="&#x{:04X};",
)

LITERAL_ESCAPES = EscapeTable(
    named={'"': '\\"', **_BACKSLASH_ESCAPES, "/": "\\/"},
    numeric_template="\\u{:04X}",
)


def escape_json(text: Optional[str]) -> Optional[str]:
    """Escape a string for inclusion between JSON double quotes."""
    return JSON_ESCAPES.escape(text)


def escape_xml(text: Optional[str]) -> Optional[str]:
    """Escape a string for XML text content."""
    return XML_ESCAPES.escape(text)


def escape_literal(text: Optional[str]) -> Optional[str]:
    """Escape a line of JSON text for a double-quoted source literal."""
    return LITERAL_ESCAPES.escape(text)
