"""
Pretty-printing JSON writer.

Output puts one element or entry per line, indented by the configured step
per nesting level. Empty lists and maps keep a blank interior line
("[\\n\\n]"); empty arrays adapted from host tuples or buffers print as "[]".
"""

import logging
from typing import Any, Optional, TextIO

from ..core.constants import NULL_TEXT
from ..core.value import Display, PrimitiveArray, Value, ValueKind, kind_of, to_value
from ..utils.config import SerializeConfig
from .builder import IndentedWriter
from .escaping import escape_json
from .numbers import format_number

logger = logging.getLogger(__name__)


class JsonWriter:
    """Writes a value tree as indented JSON text."""

    def __init__(self, writer: IndentedWriter):
        self.writer = writer

    def write_value(self, value: Value) -> None:
        kind = kind_of(value)

        if kind == ValueKind.NULL:
            self.writer.append(NULL_TEXT)
        elif kind == ValueKind.BOOLEAN:
            self.writer.append("true" if value else "false")
        elif kind in (ValueKind.INTEGER, ValueKind.FLOAT):
            self.writer.append(format_number(value))
        elif kind == ValueKind.STRING:
            self.write_string(value)
        elif kind == ValueKind.RAW:
            self.writer.append(value.text)
        elif kind == ValueKind.LIST:
            self.write_list(value)
        else:
            self.write_map(value)

    def write_string(self, text: str) -> None:
        self.writer.append('"').append(escape_json(text)).append('"')

    def write_list(self, items: Any) -> None:
        if isinstance(items, PrimitiveArray) and not items:
            self.writer.append("[]")
            return

        self.writer.open("[")
        for index, item in enumerate(items):
            if index:
                self.writer.append(",").newline()
            self.writer.fill_spaces()
            self.write_value(item)
        self.writer.close("]")

    def write_map(self, entries: dict[str, Value]) -> None:
        self.writer.open("{")
        for index, (key, item) in enumerate(entries.items()):
            if index:
                self.writer.append(",").newline()
            self.writer.fill_spaces()
            self.write_string(key)
            self.writer.append(": ")
            self.write_value(item)
        self.writer.close("}")


def serialize_json(
    value: Any,
    *,
    display: Optional[Display] = None,
    config: Optional[SerializeConfig] = None,
) -> str:
    """
    Serialize a value or host object to pretty-printed JSON.

    Args:
        value: A value, or host data accepted by to_value()
        display: Optional callable rendering unsupported objects verbatim
        config: Optional SerializeConfig selecting the indent step

    Returns:
        JSON text

    Raises:
        TypeError: If value holds an unsupported object and no display
            callable was given
    """
    config = config or SerializeConfig()
    writer = IndentedWriter(config.indent)
    JsonWriter(writer).write_value(to_value(value, display))

    text = writer.getvalue()
    logger.debug(f"Serialized JSON document of {len(text)} characters")
    return text


def dump_json(
    value: Any,
    fp: TextIO,
    *,
    display: Optional[Display] = None,
    config: Optional[SerializeConfig] = None,
) -> None:
    """Serialize value as JSON and write it to a file-like object."""
    fp.write(serialize_json(value, display=display, config=config))
