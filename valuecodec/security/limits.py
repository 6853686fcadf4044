"""
Resource limits for valuecodec parsers.
This module guards parsers against oversized or pathologically nested input.
"""

from typing import TYPE_CHECKING, NoReturn, Optional

from ..utils.config import ParseLimits
from .exceptions import ErrorReporter, SecurityError

if TYPE_CHECKING:
    from ..core.tokenizer import Position


class LimitValidator:
    """Validates parsing limits to prevent resource exhaustion."""

    def __init__(
        self, limits: ParseLimits, error_reporter: Optional[ErrorReporter] = None
    ):
        self.limits = limits
        self.error_reporter = error_reporter
        self.nesting_depth = 0

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            self._raise_limit_error(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
            )

    def validate_string_length(
        self, string: str, position: Optional["Position"] = None
    ) -> None:
        """Validate that string length is within limits."""
        if len(string) > self.limits.max_string_length:
            self._raise_limit_error(
                f"String length {len(string)} exceeds limit "
                f"{self.limits.max_string_length}",
                position,
            )

    def validate_number_length(
        self, number_str: str, position: Optional["Position"] = None
    ) -> None:
        """Validate that number literal length is within limits."""
        if len(number_str) > self.limits.max_number_length:
            self._raise_limit_error(
                f"Number length {len(number_str)} exceeds limit "
                f"{self.limits.max_number_length}",
                position,
            )

    def enter_structure(self, position: Optional["Position"] = None) -> None:
        """Track entering a nested structure and validate depth."""
        self.nesting_depth += 1
        if self.nesting_depth > self.limits.max_nesting_depth:
            self._raise_limit_error(
                f"Nesting depth {self.nesting_depth} exceeds limit "
                f"{self.limits.max_nesting_depth}",
                position,
            )

    def exit_structure(self) -> None:
        """Track exiting a nested structure."""
        if self.nesting_depth > 0:
            self.nesting_depth -= 1

    def _raise_limit_error(
        self, message: str, position: Optional["Position"] = None
    ) -> NoReturn:
        if self.error_reporter:
            raise self.error_reporter.create_security_error(message, position)
        raise SecurityError(message, position)
