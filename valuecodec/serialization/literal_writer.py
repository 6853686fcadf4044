"""
Renders JSON output as a concatenated, double-quoted source string literal.
"""

from typing import Any, Optional

from ..core.constants import LITERAL_LINE_JOINER, LITERAL_TERMINATOR
from ..core.value import Display
from ..utils.config import SerializeConfig
from .escaping import escape_literal
from .json_writer import serialize_json


def serialize_json_as_literal(
    value: Any,
    *,
    display: Optional[Display] = None,
    config: Optional[SerializeConfig] = None,
) -> str:
    """
    Serialize value to JSON and wrap each output line in a string literal.

    Every line but the last keeps an escaped newline; the fragments are
    joined with '\\n + ' and the statement ends with ';':

        "[\\n"
         + "  null\\n"
         + "]";
    """
    lines = serialize_json(value, display=display, config=config).split("\n")

    fragments = [f'"{escape_literal(line)}\\n"' for line in lines[:-1]]
    fragments.append(f'"{escape_literal(lines[-1])}"')
    return LITERAL_LINE_JOINER.join(fragments) + LITERAL_TERMINATOR
