"""
Base parser functionality shared between the JSON and XML parsers.
"""

from typing import Any, Optional

from ..security.exceptions import ErrorReporter
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .tokenizer import Position, Token


class BaseParserMixin:
    """Common parsing functionality shared between different parsers."""

    validator: Optional[LimitValidator]

    @staticmethod
    def create_validator(
        config: ParseConfig, error_reporter: Optional[ErrorReporter] = None
    ) -> Optional[LimitValidator]:
        """Create a limit validator when the configuration sets limits."""
        if config.limits:
            return LimitValidator(config.limits, error_reporter)
        return None

    @staticmethod
    def create_error_reporter(
        text: str, config: ParseConfig
    ) -> Optional[ErrorReporter]:
        """Create an error reporter when context reporting is enabled."""
        if config.include_context:
            return ErrorReporter(text, config.max_error_context)
        return None

    def parse_number_token(self, token: Token) -> Any:
        """Parse a number token into int or float."""
        value = token.value
        if "." in value or "e" in value.lower():
            return float(value)
        try:
            return int(value)
        except ValueError:
            # int() refuses decimal strings beyond sys.get_int_max_str_digits()
            self._raise_parse_error(
                f"Integer literal of {len(value)} characters is too long to convert",
                token.position,
                ["Set ParseLimits.max_number_length to bound integer size"],
            )

    def parse_boolean_token(self, token: Token) -> bool:
        """Parse a boolean token."""
        return bool(token.value)

    def store_member(self, obj: dict[str, Any], key: str, value: Any) -> None:
        """Store an object member; a repeated key keeps its slot, last value wins."""
        obj[key] = value

    def validate_and_enter_structure(
        self, position: Optional[Position] = None
    ) -> None:
        """Validate and enter a structure if a validator exists."""
        if self.validator:
            self.validator.enter_structure(position)

    def validate_and_exit_structure(self) -> None:
        """Exit a structure if a validator exists."""
        if self.validator:
            self.validator.exit_structure()
