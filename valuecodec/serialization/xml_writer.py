"""
Pretty-printing XML writer.

A top-level map with a single entry becomes the document element itself;
anything else is wrapped in <root>. Map entries become child elements named
by their key, list items become <element> children.
"""

import logging
from typing import Any, Optional, TextIO

from ..core.constants import NULL_TEXT, XML_ITEM_TAG, XML_PROLOG, XML_ROOT_TAG
from ..core.value import Display, PrimitiveArray, Value, ValueKind, kind_of, to_value
from ..utils.config import SerializeConfig
from .builder import IndentedWriter
from .escaping import escape_xml
from .numbers import format_number

logger = logging.getLogger(__name__)


class XmlWriter:
    """Writes a value tree as indented XML elements."""

    def __init__(self, writer: IndentedWriter):
        self.writer = writer

    def write_document(self, value: Value) -> None:
        self.writer.append(XML_PROLOG).newline()

        if isinstance(value, dict) and len(value) == 1:
            tag, content = next(iter(value.items()))
            logger.debug(f"Using single map key '{tag}' as the document element")
            self.write_element(tag, content)
            return

        self.writer.open(f"<{XML_ROOT_TAG}>")
        if kind_of(value) in (ValueKind.LIST, ValueKind.MAP):
            self.write_children(value)
        else:
            self.writer.append(self.text_of(value))
        self.writer.close(f"</{XML_ROOT_TAG}>")

    def write_element(self, tag: str, value: Value) -> None:
        if kind_of(value) not in (ValueKind.LIST, ValueKind.MAP):
            self.writer.append(f"<{tag}>{self.text_of(value)}</{tag}>")
            return

        self.writer.open(f"<{tag}>")
        self.write_children(value)
        self.writer.close(f"</{tag}>")

    def write_children(self, value: Value) -> None:
        """Write the child elements of a list or map, one per line."""
        if isinstance(value, dict):
            children = list(value.items())
        elif isinstance(value, PrimitiveArray) and not value:
            children = [(XML_ITEM_TAG, "")]
        else:
            children = [(XML_ITEM_TAG, item) for item in value]

        for index, (tag, item) in enumerate(children):
            if index:
                self.writer.newline()
            self.writer.fill_spaces()
            self.write_element(tag, item)

    @staticmethod
    def text_of(value: Value) -> str:
        """Render a scalar as element text."""
        kind = kind_of(value)
        if kind == ValueKind.NULL:
            return NULL_TEXT
        if kind == ValueKind.BOOLEAN:
            return "true" if value else "false"
        if kind in (ValueKind.INTEGER, ValueKind.FLOAT):
            return format_number(value)
        if kind == ValueKind.RAW:
            return value.text
        return escape_xml(value)


def serialize_xml(
    value: Any,
    *,
    display: Optional[Display] = None,
    config: Optional[SerializeConfig] = None,
) -> str:
    """
    Serialize a value or host object to a pretty-printed XML document.

    Keys are used as tag names verbatim; callers are responsible for keys
    that are not valid XML names.
    """
    config = config or SerializeConfig()
    writer = IndentedWriter(config.indent)
    XmlWriter(writer).write_document(to_value(value, display))
    return writer.getvalue()


def dump_xml(
    value: Any,
    fp: TextIO,
    *,
    display: Optional[Display] = None,
    config: Optional[SerializeConfig] = None,
) -> None:
    """Serialize value as XML and write it to a file-like object."""
    fp.write(serialize_xml(value, display=display, config=config))
