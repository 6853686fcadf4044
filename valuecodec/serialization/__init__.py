"""
valuecodec Serialization.

This module provides the JSON, XML and string-literal writers and the escape
tables they share.
"""

from .escaping import (
    JSON_ESCAPES,
    LITERAL_ESCAPES,
    XML_ESCAPES,
    EscapeTable,
    escape_json,
    escape_literal,
    escape_xml,
)
from .json_writer import dump_json, serialize_json
from .literal_writer import serialize_json_as_literal
from .numbers import format_float, format_number
from .xml_writer import dump_xml, serialize_xml

__all__ = [
    'JSON_ESCAPES', 'LITERAL_ESCAPES', 'XML_ESCAPES', 'EscapeTable',
    'escape_json', 'escape_literal', 'escape_xml',
    'dump_json', 'serialize_json', 'serialize_json_as_literal',
    'format_float', 'format_number', 'dump_xml', 'serialize_xml',
]
