"""
Test cases for the exception hierarchy and error reporting.

Tests focus on error context creation, message formatting, and error kinds.
"""

import unittest

from valuecodec.core.tokenizer import Position
from valuecodec.security.exceptions import (
    CodecError,
    ErrorContext,
    ErrorKind,
    ErrorReporter,
    ErrorSuggestionEngine,
    ParseError,
    SecurityError,
    XmlFormatError,
)


class TestErrorContext(unittest.TestCase):
    """Test ErrorContext dataclass functionality."""

    def test_error_context_creation(self):
        position = Position(offset=5, line=1, column=6)
        context = ErrorContext(
            text="test json content",
            position=position,
            context_before="test ",
            context_after="json content",
            error_char="j",
            line_text="test json content",
            column_indicator="     ^",
        )

        self.assertEqual(context.position, position)
        self.assertEqual(context.error_char, "j")
        self.assertEqual(context.column_indicator, "     ^")


class TestCodecError(unittest.TestCase):
    """Test base CodecError exception class."""

    def test_basic_error_creation(self):
        error = CodecError("Test error message")

        self.assertEqual(error.message, "Test error message")
        self.assertIsNone(error.position)
        self.assertIsNone(error.context)
        self.assertEqual(error.suggestions, [])
        self.assertEqual(str(error), "Test error message")

    def test_error_with_position(self):
        error = CodecError("Parse error", position=Position(40, 3, 15))
        self.assertIn("at line 3, column 15", str(error))

    def test_error_with_suggestions(self):
        suggestions = ["Check for missing quotes", "Verify JSON syntax"]
        error = CodecError("Syntax error", suggestions=suggestions)

        self.assertEqual(error.suggestions, suggestions)
        error_str = str(error)
        self.assertIn("Suggestions:", error_str)
        self.assertIn("  - Check for missing quotes", error_str)

    def test_error_with_context(self):
        position = Position(8, 1, 9)
        context = ErrorContext(
            text='{"key": value}',
            position=position,
            context_before='{"key": ',
            context_after="value}",
            error_char="v",
            line_text='{"key": value}',
            column_indicator="        ^",
        )
        error = CodecError("Unquoted value", position=position, context=context)

        error_str = str(error)
        self.assertIn("Unquoted value at line 1, column 9", error_str)
        self.assertIn("Context:", error_str)
        self.assertIn('  {"key": value}', error_str)
        self.assertIn("          ^", error_str)


class TestErrorKinds(unittest.TestCase):
    """Every concrete error carries its kind."""

    def test_kinds(self):
        self.assertIs(ParseError("x", Position(0, 1, 1)).kind, ErrorKind.JSON_SYNTAX)
        self.assertIs(XmlFormatError("x").kind, ErrorKind.XML_FORMAT)
        self.assertIs(SecurityError("x").kind, ErrorKind.LIMIT)

    def test_hierarchy(self):
        for error in (
            ParseError("x", Position(0, 1, 1)),
            XmlFormatError("x"),
            SecurityError("x"),
        ):
            with self.subTest(error=type(error).__name__):
                self.assertIsInstance(error, CodecError)

    def test_parse_error_position_accessors(self):
        error = ParseError("bad", Position(12, 2, 11))
        self.assertEqual((error.offset, error.line, error.column), (12, 2, 11))

    def test_xml_error_has_no_position(self):
        error = XmlFormatError("Unclosed element <a>")
        self.assertIsNone(error.position)
        self.assertEqual(str(error), "Unclosed element <a>")


class TestErrorReporter(unittest.TestCase):
    """Test ErrorReporter context extraction."""

    def test_create_parse_error_with_context(self):
        text = '{\n  "a": tru\n}'
        reporter = ErrorReporter(text)
        error = reporter.create_parse_error("Invalid literal", Position(12, 2, 11))

        self.assertIsInstance(error, ParseError)
        self.assertEqual(error.context.line_text, '  "a": tru')
        self.assertEqual(error.context.column_indicator, "          ^")
        self.assertEqual(error.context.error_char, "\n")
        self.assertEqual(error.context.context_after, "\n}")

    def test_context_window_is_bounded(self):
        text = "x" * 200
        reporter = ErrorReporter(text, max_context=20)
        error = reporter.create_parse_error("bad", Position(100, 1, 101))

        self.assertEqual(len(error.context.context_before), 10)
        self.assertEqual(len(error.context.context_after), 10)

    def test_position_at_end_of_text(self):
        reporter = ErrorReporter("[1")
        error = reporter.create_parse_error("eof", Position(2, 1, 3))
        self.assertEqual(error.context.error_char, "")
        self.assertEqual(error.context.column_indicator, "  ^")

    def test_create_security_error(self):
        reporter = ErrorReporter("[[[")
        error = reporter.create_security_error("too deep", Position(2, 1, 3))
        self.assertIsInstance(error, SecurityError)
        self.assertIsNotNone(error.context)
        self.assertIsNone(reporter.create_security_error("too big").context)


class TestErrorSuggestionEngine(unittest.TestCase):
    """Test suggestion generation."""

    def test_single_quote_suggestion(self):
        suggestions = ErrorSuggestionEngine.suggest_for_unexpected_token("'")
        self.assertIn("double quotes", suggestions[0])

    def test_trailing_comma_suggestion(self):
        suggestions = ErrorSuggestionEngine.suggest_for_unexpected_token("]")
        self.assertTrue(any("trailing comma" in s for s in suggestions))

    def test_unclosed_structure(self):
        self.assertIn("'}'", ErrorSuggestionEngine.suggest_for_unclosed_structure("object")[0])
        self.assertIn("']'", ErrorSuggestionEngine.suggest_for_unclosed_structure("array")[0])

    def test_invalid_escape(self):
        suggestions = ErrorSuggestionEngine.suggest_for_invalid_escape("a")
        self.assertTrue(any("\\\\a" in s for s in suggestions))

    def test_invalid_literal(self):
        self.assertEqual(
            ErrorSuggestionEngine.suggest_for_invalid_literal("null"),
            ["Did you mean 'null'?"],
        )


if __name__ == "__main__":
    unittest.main()
