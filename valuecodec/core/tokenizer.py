"""
Lexer for valuecodec - tokenizes JSON text for the recursive-descent parser.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, NoReturn, Optional

from ..security.exceptions import ErrorReporter, ErrorSuggestionEngine, ParseError
from ..security.limits import LimitValidator
from .constants import (
    DIGITS,
    HEX_DIGITS,
    JSON_ESCAPE_MAP,
    JSON_LITERALS,
    JSON_WHITESPACE,
    format_code_point,
    get_structural_token_map,
)


class TokenType(Enum):
    """Token types for JSON parsing."""

    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"
    COLON = "COLON"
    COMMA = "COMMA"

    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    EOF = "EOF"


@dataclass(frozen=True)
class Position:
    """Position in source text: absolute offset, 1-based line and column."""

    offset: int
    line: int
    column: int


class Token(NamedTuple):
    """Token with type, decoded value and position information."""

    type: TokenType
    value: Any
    position: Position


class SourceCursor:
    """Monotonically advancing cursor over an immutable text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1

    def current_position(self) -> Position:
        """Get current position in the text."""
        return Position(self.pos, self.line, self.column)

    def at_end(self) -> bool:
        """Whether every character has been consumed."""
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        """Peek at character at given offset without consuming it."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    def startswith(self, prefix: str) -> bool:
        """Whether the unconsumed text starts with prefix."""
        return self.text.startswith(prefix, self.pos)

    def advance(self) -> str:
        """Advance position and return the current character."""
        if self.pos >= len(self.text):
            return ""

        char = self.text[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def advance_by(self, count: int) -> str:
        """Consume count characters and return them."""
        return "".join(self.advance() for _ in range(count))


class Lexer(SourceCursor):
    """Lexical analyzer for JSON input."""

    def __init__(
        self,
        text: str,
        error_reporter: Optional[ErrorReporter] = None,
        validator: Optional[LimitValidator] = None,
    ) -> None:
        super().__init__(text)
        self.error_reporter = error_reporter
        self.validator = validator
        self._structural = get_structural_token_map()

    def skip_whitespace(self) -> None:
        """Skip whitespace characters (space, tab, newline, carriage return)."""
        while self.pos < len(self.text) and self.text[self.pos] in JSON_WHITESPACE:
            self.advance()

    def read_string(self) -> str:
        """Read a double-quoted string with escape sequence handling."""
        self.advance()
        chunks: list[str] = []

        while True:
            char = self.peek()

            if not char:
                self._raise_parse_error(
                    "Unexpected end of input, expected '\"' to close string",
                    self.current_position(),
                )
            if char == '"':
                self.advance()
                return "".join(chunks)
            if char == "\\":
                chunks.append(self._read_escape())
            elif char < " ":
                self._raise_parse_error(
                    f"Unescaped control character {format_code_point(char)} in string",
                    self.current_position(),
                    ["Control characters must be written as \\uXXXX escapes"],
                )
            else:
                chunks.append(self.advance())

    def _read_escape(self) -> str:
        """Read one escape sequence; the cursor sits on the backslash."""
        self.advance()
        char = self.peek()

        if char in JSON_ESCAPE_MAP:
            self.advance()
            return JSON_ESCAPE_MAP[char]

        if char == "u":
            code_point = self._read_unicode_escape()
            if code_point is None:
                # Not four hex digits: keep the backslash-u verbatim
                self.advance()
                return "\\u"
            return code_point

        if not char:
            self._raise_parse_error(
                "Unexpected end of input in escape sequence",
                self.current_position(),
            )
        self._raise_parse_error(
            f"Invalid escape sequence '\\{char}'",
            self.current_position(),
            ErrorSuggestionEngine.suggest_for_invalid_escape(char),
        )

    def _read_unicode_escape(self) -> Optional[str]:
        """Read \\uXXXX (cursor on the u), pairing surrogates when possible."""
        hex_digits = self._peek_hex_digits(1)
        if hex_digits is None:
            return None

        self.advance_by(5)
        code_point = int(hex_digits, 16)

        if 0xD800 <= code_point <= 0xDBFF and self.peek() == "\\" and self.peek(1) == "u":
            low_digits = self._peek_hex_digits(2)
            if low_digits is not None:
                low = int(low_digits, 16)
                if 0xDC00 <= low <= 0xDFFF:
                    self.advance_by(6)
                    return chr(0x10000 + ((code_point - 0xD800) << 10) + (low - 0xDC00))

        return chr(code_point)

    def _peek_hex_digits(self, offset: int) -> Optional[str]:
        """Return the four hex digits starting at offset, if present."""
        digits = self.text[self.pos + offset : self.pos + offset + 4]
        if len(digits) == 4 and all(char in HEX_DIGITS for char in digits):
            return digits
        return None

    def read_number(self) -> str:
        """Read a numeric literal and return its source text."""
        start = self.pos

        if self.peek() == "-":
            self.advance()

        self._read_digits("Expected digit")

        if self.peek() == ".":
            self.advance()
            self._read_digits("Expected digit after decimal point")

        if self.peek() in ("e", "E"):
            self.advance()
            if self.peek() in ("+", "-"):
                self.advance()
            self._read_digits("Expected digit in exponent")

        trailing = self.peek()
        if trailing and (trailing.isalnum() or trailing in "._"):
            self._raise_parse_error(
                f"Unexpected character '{trailing}' after number",
                self.current_position(),
            )

        return self.text[start : self.pos]

    def _read_digits(self, message: str) -> None:
        """Consume one or more ASCII digits."""
        if self.peek() not in DIGITS:
            if self.at_end():
                message = f"Unexpected end of input, {message[0].lower()}{message[1:]}"
            self._raise_parse_error(message, self.current_position())
        while self.peek() in DIGITS:
            self.advance()

    def read_literal(self, expected: str) -> str:
        """Match one of true/false/null character by character."""
        for char in expected:
            if self.peek() != char:
                self._raise_parse_error(
                    f"Invalid literal, expected '{expected}'",
                    self.current_position(),
                    ErrorSuggestionEngine.suggest_for_invalid_literal(expected),
                )
            self.advance()
        return expected

    def next_token(self) -> Token:
        """Scan and return the next token."""
        self.skip_whitespace()
        pos = self.current_position()
        char = self.peek()

        if not char:
            return Token(TokenType.EOF, "", pos)

        if char in self._structural:
            self.advance()
            return Token(self._structural[char], char, pos)

        if char == '"':
            value = self.read_string()
            if self.validator:
                self.validator.validate_string_length(value, pos)
            return Token(TokenType.STRING, value, pos)

        if char == "-" or char in DIGITS:
            text = self.read_number()
            if self.validator:
                self.validator.validate_number_length(text, pos)
            return Token(TokenType.NUMBER, text, pos)

        for literal, value in JSON_LITERALS.items():
            if char == literal[0]:
                self.read_literal(literal)
                token_type = TokenType.NULL if value is None else TokenType.BOOLEAN
                return Token(token_type, value, pos)

        self._raise_parse_error(
            f"Unexpected character '{char}'",
            pos,
            ErrorSuggestionEngine.suggest_for_unexpected_token(char),
        )

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the input text lazily, ending with an EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def get_all_tokens(self) -> list[Token]:
        """Get all tokens as a list."""
        return list(self.tokenize())

    def _raise_parse_error(
        self, message: str, position: Position, suggestions: Optional[list[str]] = None
    ) -> NoReturn:
        if self.error_reporter:
            raise self.error_reporter.create_parse_error(message, position, suggestions)
        raise ParseError(message, position, suggestions=suggestions)
