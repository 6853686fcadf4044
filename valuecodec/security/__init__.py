"""
valuecodec Errors and Resource Limits.

This module provides the exception hierarchy and parsing limits.
"""

from .exceptions import (
    CodecError,
    ErrorContext,
    ErrorKind,
    ErrorReporter,
    ErrorSuggestionEngine,
    ParseError,
    SecurityError,
    XmlFormatError,
)
from .limits import LimitValidator

__all__ = [
    'CodecError', 'ErrorContext', 'ErrorKind', 'ErrorReporter',
    'ErrorSuggestionEngine', 'ParseError', 'SecurityError', 'XmlFormatError',
    'LimitValidator'
]
