"""
Parser for valuecodec - converts JSON tokens into values.
"""

import logging
from collections.abc import Iterator
from typing import NoReturn, Optional, TextIO, Union

from ..security.exceptions import (
    ErrorReporter,
    ErrorSuggestionEngine,
    ParseError,
    SecurityError,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .parser_base import BaseParserMixin
from .tokenizer import Lexer, Position, Token, TokenType
from .value import Value

logger = logging.getLogger(__name__)

_CLOSERS = {"object": "}", "array": "]"}


class Parser(BaseParserMixin):
    """Recursive-descent JSON parser pulling one token of lookahead."""

    def __init__(
        self,
        lexer: Lexer,
        config: ParseConfig,
        error_reporter: Optional[ErrorReporter] = None,
        validator: Optional[LimitValidator] = None,
    ):
        self.config = config
        self.error_reporter = error_reporter
        self.validator = validator
        self._tokens: Iterator[Token] = lexer.tokenize()
        self._current = next(self._tokens)

    def current_token(self) -> Token:
        """Get the lookahead token."""
        return self._current

    def advance(self) -> Token:
        """Move to the next token and return the one just consumed."""
        token = self._current
        if token.type != TokenType.EOF:
            self._current = next(self._tokens)
        return token

    def parse(self) -> Value:
        """Parse a complete document: exactly one value, then end of input."""
        if self.current_token().type == TokenType.EOF:
            self._raise_parse_error(
                "Unexpected end of input, expected a value",
                self.current_token().position,
                ["The document must contain an object, array or scalar value"],
            )

        try:
            result = self.parse_value()
        except RecursionError:
            message = "Nesting depth exceeds the interpreter recursion limit"
            position = self.current_token().position
            if self.error_reporter:
                raise self.error_reporter.create_security_error(message, position) from None
            raise SecurityError(message, position) from None

        trailing = self.current_token()
        if trailing.type != TokenType.EOF:
            self._raise_parse_error(
                "Unexpected trailing content after top-level value",
                trailing.position,
                ["A document holds exactly one top-level value"],
            )
        return result

    def parse_value(self) -> Value:
        """Parse a JSON value (string, number, boolean, null, object, or array)."""
        token = self.current_token()

        if token.type == TokenType.STRING:
            self.advance()
            return token.value

        if token.type == TokenType.NUMBER:
            self.advance()
            return self.parse_number_token(token)

        if token.type == TokenType.BOOLEAN:
            self.advance()
            return self.parse_boolean_token(token)

        if token.type == TokenType.NULL:
            self.advance()
            return None

        if token.type == TokenType.LBRACE:
            return self.parse_object()

        if token.type == TokenType.LBRACKET:
            return self.parse_array()

        if token.type == TokenType.EOF:
            self._raise_parse_error(
                "Unexpected end of input, expected a value", token.position
            )

        self._raise_parse_error(
            f"Unexpected token '{token.value}', expected a value",
            token.position,
            ErrorSuggestionEngine.suggest_for_unexpected_token(str(token.value)),
        )

    def parse_object(self) -> dict[str, Value]:
        """Parse a JSON object into a dictionary."""
        start = self.advance()
        self.validate_and_enter_structure(start.position)

        obj: dict[str, Value] = {}

        if self.current_token().type == TokenType.RBRACE:
            self.advance()
            self.validate_and_exit_structure()
            return obj

        while True:
            key = self._parse_object_key()
            self._expect_colon()
            self.store_member(obj, key, self.parse_value())

            if not self._continue_after_member(TokenType.RBRACE, "object"):
                break

        self.advance()
        self.validate_and_exit_structure()
        return obj

    def parse_array(self) -> list[Value]:
        """Parse a JSON array into a list."""
        start = self.advance()
        self.validate_and_enter_structure(start.position)

        arr: list[Value] = []

        if self.current_token().type == TokenType.RBRACKET:
            self.advance()
            self.validate_and_exit_structure()
            return arr

        while True:
            arr.append(self.parse_value())

            if not self._continue_after_member(TokenType.RBRACKET, "array"):
                break

        self.advance()
        self.validate_and_exit_structure()
        return arr

    def _parse_object_key(self) -> str:
        """Parse an object key and return it."""
        key_token = self.current_token()

        if key_token.type == TokenType.STRING:
            self.advance()
            return key_token.value

        if key_token.type == TokenType.EOF:
            self._raise_unclosed("object", key_token.position)

        suggestions = ["Object keys must be double-quoted strings"]
        if key_token.type == TokenType.RBRACE:
            suggestions = ErrorSuggestionEngine.suggest_for_unexpected_token("}")
        self._raise_parse_error("Expected string key", key_token.position, suggestions)

    def _expect_colon(self) -> None:
        """Expect and consume a colon token."""
        token = self.current_token()
        if token.type == TokenType.COLON:
            self.advance()
            return

        if token.type == TokenType.EOF:
            self._raise_unclosed("object", token.position)

        self._raise_parse_error(
            "Expected ':' after key",
            token.position,
            ["Object keys must be followed by a colon"],
        )

    def _continue_after_member(self, closer: TokenType, structure: str) -> bool:
        """Consume a separating comma; False when the closer is next."""
        token = self.current_token()

        if token.type == TokenType.COMMA:
            self.advance()
            return True

        if token.type == closer:
            return False

        if token.type == TokenType.EOF:
            self._raise_unclosed(structure, token.position)

        self._raise_parse_error(
            f"Expected ',' or '{_CLOSERS[structure]}' after {structure} member",
            token.position,
            ErrorSuggestionEngine.suggest_for_unclosed_structure(structure),
        )

    def _raise_unclosed(self, structure: str, position: Position) -> NoReturn:
        self._raise_parse_error(
            f"Unexpected end of input, expected '{_CLOSERS[structure]}' "
            f"to close {structure}",
            position,
            ErrorSuggestionEngine.suggest_for_unclosed_structure(structure),
        )

    def _raise_parse_error(
        self, message: str, position: Position, suggestions: Optional[list[str]] = None
    ) -> NoReturn:
        if self.error_reporter:
            raise self.error_reporter.create_parse_error(message, position, suggestions)
        raise ParseError(message, position, suggestions=suggestions)


def parse_json(
    text: Union[str, bytes, bytearray], config: Optional[ParseConfig] = None
) -> Value:
    """
    Parse JSON text into a value.

    Args:
        text: JSON document (str, or UTF-8 bytes/bytearray)
        config: Optional ParseConfig for limits and error reporting

    Returns:
        The parsed value: None, bool, int, float, str, list or dict

    Raises:
        ParseError: If the text is not a well-formed JSON document
        SecurityError: If a configured limit is exceeded
    """
    if isinstance(text, (bytes, bytearray)):
        text = _decode_utf8(text)

    if config is None:
        config = ParseConfig()

    error_reporter = BaseParserMixin.create_error_reporter(text, config)
    validator = BaseParserMixin.create_validator(config, error_reporter)
    if validator:
        validator.validate_input_size(text)

    logger.debug(f"Parsing JSON document of {len(text)} characters")

    lexer = Lexer(text, error_reporter, validator)
    parser = Parser(lexer, config, error_reporter, validator)
    return parser.parse()


def load_json(fp: TextIO, config: Optional[ParseConfig] = None) -> Value:
    """
    Parse JSON from a file-like object.

    Same as parse_json() but reads the whole document from fp first.
    """
    return parse_json(fp.read(), config)


def _decode_utf8(data: Union[bytes, bytearray]) -> str:
    """Decode UTF-8 input, reporting the first invalid byte as a ParseError."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        prefix = data[: exc.start].decode("utf-8")
        line_start = prefix.rfind("\n") + 1
        position = Position(
            len(prefix), prefix.count("\n") + 1, len(prefix) - line_start + 1
        )
        raise ParseError(
            f"Invalid UTF-8 byte 0x{data[exc.start]:02X}",
            position,
            suggestions=["Encode the document as UTF-8 or pass it as str"],
        ) from None
