"""
Test cases for the valuecodec JSON parser.

Tests cover value construction, number typing, documented leniencies and
configuration handling.
"""

import io
import sys
import unittest

import pytest

from valuecodec import ParseConfig, ParseLimits, parse_json, load_json
from valuecodec.core.engine import Parser
from valuecodec.core.tokenizer import Lexer
from valuecodec.core.value import ValueKind, kind_of
from valuecodec.security.exceptions import ParseError, SecurityError


class TestParseValues(unittest.TestCase):
    """Test that well-formed documents produce the expected values."""

    def test_nested_document(self):
        result = parse_json('{"a": 1, "b": [true, false, null], "c": {"d": "e"}}')
        self.assertEqual(result, {"a": 1, "b": [True, False, None], "c": {"d": "e"}})

    def test_scalar_documents(self):
        self.assertEqual(parse_json('"text"'), "text")
        self.assertIs(parse_json("true"), True)
        self.assertIsNone(parse_json(" null "))

    def test_integer_and_float_kinds(self):
        test_cases = [
            ("1", ValueKind.INTEGER, 1),
            ("-0", ValueKind.INTEGER, 0),
            ("1.0", ValueKind.FLOAT, 1.0),
            ("1e2", ValueKind.FLOAT, 100.0),
            ("-123E-1", ValueKind.FLOAT, -12.3),
        ]
        for text, kind, expected in test_cases:
            with self.subTest(text=text):
                result = parse_json(text)
                self.assertEqual(kind_of(result), kind)
                self.assertEqual(result, expected)

    def test_large_integer_is_exact(self):
        self.assertEqual(parse_json("123456789012345678901234567890"), 123456789012345678901234567890)

    def test_leading_zeros_are_tolerated(self):
        self.assertEqual(parse_json("[007, 0.5]"), [7, 0.5])

    def test_duplicate_key_keeps_last_value_in_first_slot(self):
        result = parse_json('{"a": 1, "b": 2, "a": 3}')
        self.assertEqual(result, {"a": 3, "b": 2})
        self.assertEqual(list(result), ["a", "b"])

    def test_key_order_is_preserved(self):
        result = parse_json('{"z": 1, "a": 2, "m": 3}')
        self.assertEqual(list(result), ["z", "a", "m"])

    def test_lenient_unicode_escape(self):
        self.assertEqual(parse_json('["abc\\u0$00"]'), ["abc\\u0$00"])
        self.assertEqual(parse_json('["abc\\u001g\\/"]'), ["abc\\u001g/"])

    def test_bytes_input(self):
        self.assertEqual(parse_json('{"k": "т"}'.encode("utf-8")), {"k": "т"})
        self.assertEqual(parse_json(bytearray(b"[1]")), [1])

    def test_invalid_utf8_bytes(self):
        with self.assertRaises(ParseError) as cm:
            parse_json(b'[\n"\xff"]')
        error = cm.exception
        self.assertEqual((error.offset, error.line, error.column), (3, 2, 2))
        self.assertIn("0xFF", str(error))

    def test_load_from_file_object(self):
        self.assertEqual(load_json(io.StringIO('{"x": [1, 2]}')), {"x": [1, 2]})

    def test_parser_class_directly(self):
        parser = Parser(Lexer("[1, 2]"), ParseConfig())
        self.assertEqual(parser.parse(), [1, 2])


class TestParseConfiguration:
    """Test limits and error reporting options."""

    def test_nesting_depth_limit(self):
        config = ParseConfig(limits=ParseLimits(max_nesting_depth=3))
        assert parse_json("[[[1]]]", config) == [[[1]]]
        with pytest.raises(SecurityError) as exc_info:
            parse_json("[[[[1]]]]", config)
        assert "Nesting depth 4 exceeds limit 3" in str(exc_info.value)

    def test_default_depth_limit_prevents_runaway_recursion(self):
        with pytest.raises(SecurityError):
            parse_json("[" * 1000 + "]" * 1000)

    def test_unlimited_config_accepts_moderate_nesting(self):
        text = "[" * 300 + "]" * 300
        result = parse_json(text, ParseConfig.unlimited())
        assert isinstance(result, list)

    def test_unlimited_config_reports_excessive_nesting(self):
        text = "[" * 5000 + "]" * 5000
        with pytest.raises(SecurityError) as exc_info:
            parse_json(text, ParseConfig.unlimited())
        assert "recursion limit" in str(exc_info.value)
        assert exc_info.value.context is not None

    @pytest.mark.skipif(
        not getattr(sys, "get_int_max_str_digits", lambda: 0)(),
        reason="integer string conversion is unbounded on this interpreter",
    )
    def test_unlimited_config_rejects_unconvertible_integer(self):
        text = "1" * (sys.get_int_max_str_digits() + 1)
        with pytest.raises(ParseError) as exc_info:
            parse_json(f"[{text}]", ParseConfig.unlimited())
        assert exc_info.value.position.offset == 1

    def test_limit_errors_carry_context(self):
        config = ParseConfig(limits=ParseLimits(max_string_length=3))
        with pytest.raises(SecurityError) as exc_info:
            parse_json('[\n  "abcd"\n]', config)
        error = exc_info.value
        assert error.position.line == 2
        assert error.context.line_text == '  "abcd"'

    def test_string_length_limit(self):
        config = ParseConfig(limits=ParseLimits(max_string_length=5))
        assert parse_json('"abcde"', config) == "abcde"
        with pytest.raises(SecurityError):
            parse_json('"abcdef"', config)

    def test_number_length_limit(self):
        config = ParseConfig(limits=ParseLimits(max_number_length=4))
        with pytest.raises(SecurityError):
            parse_json("123456", config)

    def test_input_size_limit(self):
        config = ParseConfig(limits=ParseLimits(max_input_size=10))
        with pytest.raises(SecurityError) as exc_info:
            parse_json('["0123456789"]', config)
        assert exc_info.value.position is None

    def test_context_is_attached_by_default(self):
        with pytest.raises(ParseError) as exc_info:
            parse_json('{"a": tru}')
        error = exc_info.value
        assert error.context is not None
        assert error.context.line_text == '{"a": tru}'
        assert "^" in str(error)

    def test_context_can_be_disabled(self):
        config = ParseConfig()
        config.error_reporting.include_context = False
        with pytest.raises(ParseError) as exc_info:
            parse_json('{"a": tru}', config)
        assert exc_info.value.context is None
        assert "Context:" not in str(exc_info.value)


if __name__ == "__main__":
    unittest.main()
