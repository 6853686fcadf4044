"""
Exception hierarchy and error reporting for valuecodec.

All codec failures derive from CodecError and carry an ErrorKind, so callers
can handle JSON syntax errors, XML format errors and limit violations through
one path while still telling them apart.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.tokenizer import Position


class ErrorKind(Enum):
    """Category of a codec failure."""

    JSON_SYNTAX = "json_syntax"
    XML_FORMAT = "xml_format"
    LIMIT = "limit"


@dataclass(frozen=True)
class ErrorContext:
    """Excerpt of the source text around a failure point."""

    text: str
    position: "Position"
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class CodecError(Exception):
    """Base exception for valuecodec."""

    kind: ErrorKind = ErrorKind.JSON_SYNTAX

    def __init__(
        self,
        message: str,
        position: Optional["Position"] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = list(suggestions) if suggestions else []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]

        if self.position is not None:
            parts[0] += f" at line {self.position.line}, column {self.position.column}"

        if self.context is not None:
            parts.append("Context:")
            parts.append(f"  {self.context.line_text}")
            parts.append(f"  {self.context.column_indicator}")

        if self.suggestions:
            parts.append("Suggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(parts)


class ParseError(CodecError):
    """Malformed JSON text; always positioned at the violating character."""

    kind = ErrorKind.JSON_SYNTAX

    def __init__(
        self,
        message: str,
        position: "Position",
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        super().__init__(message, position, context, suggestions)

    @property
    def offset(self) -> int:
        """Absolute character offset of the failure."""
        return self.position.offset

    @property
    def line(self) -> int:
        """1-based line of the failure."""
        return self.position.line

    @property
    def column(self) -> int:
        """1-based column of the failure."""
        return self.position.column


class XmlFormatError(CodecError):
    """Malformed XML text. Carries a message only."""

    kind = ErrorKind.XML_FORMAT

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        super().__init__(message, suggestions=suggestions)


class SecurityError(CodecError):
    """A configured resource limit was exceeded."""

    kind = ErrorKind.LIMIT


class ErrorReporter:
    """Builds positioned errors with a context excerpt of the source text."""

    def __init__(self, text: str, max_context: int = 50):
        self.text = text
        self.lines = text.split("\n")
        self.max_context = max_context

    def create_parse_error(
        self,
        message: str,
        position: "Position",
        suggestions: Optional[list[str]] = None,
    ) -> ParseError:
        """Create a ParseError with context around the given position."""
        return ParseError(
            message, position, self._build_context(position), suggestions
        )

    def create_security_error(
        self, message: str, position: Optional["Position"] = None
    ) -> SecurityError:
        """Create a SecurityError, with context when a position is known."""
        context = self._build_context(position) if position is not None else None
        return SecurityError(message, position, context)

    def _build_context(self, position: "Position") -> ErrorContext:
        offset = min(max(position.offset, 0), len(self.text))
        half = self.max_context // 2

        line_index = min(max(position.line - 1, 0), len(self.lines) - 1)
        line_text = self.lines[line_index]
        column = min(max(position.column - 1, 0), len(line_text))

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=self.text[max(0, offset - half) : offset],
            context_after=self.text[offset : offset + half],
            error_char=self.text[offset : offset + 1],
            line_text=line_text,
            column_indicator=" " * column + "^",
        )


class ErrorSuggestionEngine:
    """Generates hints for common syntax mistakes."""

    @staticmethod
    def suggest_for_unexpected_token(char: str) -> list[str]:
        """Suggest fixes for an unexpected character."""
        if char == "'":
            return ["Use double quotes for strings and keys"]
        if char in "}]":
            return [
                "Remove the trailing comma before the closing bracket",
                "Check that every opening bracket has a matching closer",
            ]
        if char.isalpha() or char == "_":
            return [
                "Quote string values and object keys",
                "Literals are lowercase: true, false, null",
            ]
        return ["Check the document for stray characters"]

    @staticmethod
    def suggest_for_unclosed_structure(structure_type: str) -> list[str]:
        """Suggest fixes for an object or array missing its closer."""
        closer = "}" if structure_type == "object" else "]"
        return [
            f"Add a closing '{closer}' to end the {structure_type}",
            "Check whether the input was truncated",
        ]

    @staticmethod
    def suggest_for_invalid_escape(char: str) -> list[str]:
        """Suggest fixes for an unsupported escape sequence."""
        return [
            "Valid escapes are \\\" \\\\ \\/ \\b \\f \\n \\r \\t and \\uXXXX",
            f"Write '\\\\{char}' for a literal backslash followed by '{char}'",
        ]

    @staticmethod
    def suggest_for_invalid_literal(expected: str) -> list[str]:
        """Suggest the literal the input most likely meant."""
        return [f"Did you mean '{expected}'?"]
