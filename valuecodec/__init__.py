"""
valuecodec - generic-object codec for JSON, XML and source string literals.

valuecodec converts between textual JSON, textual XML and an in-memory value
model built from plain Python objects (None, bool, int, float, str, list,
dict) plus Raw text and PrimitiveArray markers.

Key Features:
- Strict recursive-descent JSON parser with line/column error positions
- Pretty-printed JSON and XML output with a configurable indent step
- XML reader mapping elements, repeated tags and text onto the value model
- JSON rendered as a concatenated, quoted source-code string literal
- Per-target escape tables for JSON, XML and literal output
- Resource limits to keep hostile input from exhausting memory or the stack

Quick Start:
    import valuecodec

    data = valuecodec.parse_json('{"name": "value", "items": [1, 2.5]}')
    text = valuecodec.serialize_json(data)
    xml = valuecodec.serialize_xml(data)
    same = valuecodec.parse_xml(xml)["root"]

    # Host objects outside the model need an explicit display function
    valuecodec.serialize_json([object()], display=repr)
"""

from .core.engine import load_json, parse_json
from .core.tokenizer import Position
from .core.value import PrimitiveArray, Raw, ValueKind, kind_of, to_value, values_equal
from .core.xml_parser import load_xml, parse_xml
from .security.exceptions import (
    CodecError,
    ErrorKind,
    ParseError,
    SecurityError,
    XmlFormatError,
)
from .serialization.escaping import escape_json, escape_literal, escape_xml
from .serialization.json_writer import dump_json, serialize_json
from .serialization.literal_writer import serialize_json_as_literal
from .serialization.xml_writer import dump_xml, serialize_xml
from .utils.config import (
    ErrorReporting,
    IndentStep,
    ParseConfig,
    ParseLimits,
    SerializeConfig,
)

__version__ = "0.1.0"
__author__ = "valuecodec contributors"

__all__ = [
    # Readers
    "parse_json", "load_json", "parse_xml", "load_xml",
    # Writers
    "serialize_json", "dump_json", "serialize_xml", "dump_xml",
    "serialize_json_as_literal",
    # Escaping
    "escape_json", "escape_xml", "escape_literal",
    # Value model
    "to_value", "values_equal", "kind_of", "ValueKind", "Raw", "PrimitiveArray",
    # Configuration classes
    "ParseConfig", "ParseLimits", "ErrorReporting", "SerializeConfig", "IndentStep",
    # Exception classes
    "CodecError", "ParseError", "XmlFormatError", "SecurityError", "ErrorKind",
    "Position",
]
