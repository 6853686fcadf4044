"""
Common constants and mappings used across the valuecodec library.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .tokenizer import TokenType

# Single-character JSON escapes, keyed by the character after the backslash
JSON_ESCAPE_MAP = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

JSON_WHITESPACE = frozenset(" \t\n\r")
DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Keyword literals and the values they decode to
JSON_LITERALS: dict[str, Optional[bool]] = {
    "true": True,
    "false": False,
    "null": None,
}

NULL_TEXT = "null"

XML_PROLOG = '<?xml version="1.0" encoding="UTF-8"?>'
XML_ROOT_TAG = "root"
XML_ITEM_TAG = "element"
XML_TEXT_KEY = "#text"
XML_WHITESPACE = JSON_WHITESPACE

XML_ENTITIES = {
    "lt": "<",
    "gt": ">",
    "amp": "&",
    "quot": '"',
    "apos": "'",
}

LITERAL_LINE_JOINER = "\n + "
LITERAL_TERMINATOR = ";"


# Token type mapping for structural characters
def get_structural_token_map() -> dict[str, "TokenType"]:
    """Get the mapping of structural characters to TokenType enums."""
    # Import here to avoid circular imports
    from .tokenizer import TokenType  # pylint: disable=import-outside-toplevel

    return {
        "{": TokenType.LBRACE,
        "}": TokenType.RBRACE,
        "[": TokenType.LBRACKET,
        "]": TokenType.RBRACKET,
        ":": TokenType.COLON,
        ",": TokenType.COMMA,
    }


def format_code_point(char: str) -> str:
    """Render a character as U+XXXX for error messages."""
    return f"U+{ord(char):04X}"
