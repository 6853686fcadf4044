"""
valuecodec Core Parsing Engine.

This module provides the JSON and XML readers and the value model they produce.
"""

from .engine import parse_json, load_json, Parser
from .tokenizer import Lexer, Token, TokenType, Position, SourceCursor
from .value import PrimitiveArray, Raw, ValueKind, kind_of, to_value, values_equal
from .xml_parser import parse_xml, load_xml, XmlParser

__all__ = [
    'parse_json', 'load_json', 'Parser',
    'Lexer', 'Token', 'TokenType', 'Position', 'SourceCursor',
    'PrimitiveArray', 'Raw', 'ValueKind', 'kind_of', 'to_value', 'values_equal',
    'parse_xml', 'load_xml', 'XmlParser',
]
