"""
Configuration and limits for valuecodec parsing and serialization.

This module defines resource limits, error reporting options and output
layout settings.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass
class ParseLimits:
    """Resource limits applied while parsing JSON or XML text."""

    max_input_size: int = 10 * 1024 * 1024
    max_string_length: int = 1024 * 1024
    max_number_length: int = 100
    max_nesting_depth: int = 256

    def __post_init__(self) -> None:
        for name in (
            "max_input_size",
            "max_string_length",
            "max_number_length",
            "max_nesting_depth",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""

    include_context: bool = True
    max_error_context: int = 50


@dataclass
class ParseConfig:
    """Configuration options for valuecodec parsers."""

    limits: Optional[ParseLimits] = field(default_factory=ParseLimits)
    error_reporting: ErrorReporting = field(default_factory=ErrorReporting)

    @classmethod
    def unlimited(cls) -> "ParseConfig":
        """Create a configuration that enforces no resource limits."""
        return cls(limits=None)

    @property
    def include_context(self) -> bool:
        """Whether parse errors carry a context excerpt."""
        return self.error_reporting.include_context

    @property
    def max_error_context(self) -> int:
        """Maximum characters of context to include in errors."""
        return self.error_reporting.max_error_context


class IndentStep(Enum):
    """Indentation inserted per nesting level by the pretty printers."""

    TWO_SPACES = "  "
    THREE_SPACES = "   "
    FOUR_SPACES = "    "
    TABS = "\t"


@dataclass
class SerializeConfig:
    """Layout options shared by the JSON, XML and literal writers."""

    indent: IndentStep = IndentStep.TWO_SPACES
