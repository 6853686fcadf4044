"""
XML reader for valuecodec - converts element trees into values.

The reader understands the subset of XML the XML writer produces plus the
common decorations of real documents: a prolog, comments, processing
instructions and attributes (which are checked for well-formedness and then
dropped). Element content maps onto the value model as follows:

- a leaf element yields its decoded text
- children with distinct tags yield a dict keyed by tag
- repeated sibling tags collapse into a list in document order
- non-whitespace text mixed with children is kept under "#text"
"""

import logging
from typing import Optional, TextIO, Union

import regex

from ..security.exceptions import SecurityError, XmlFormatError
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .constants import XML_ENTITIES, XML_TEXT_KEY, XML_WHITESPACE, format_code_point
from .parser_base import BaseParserMixin
from .tokenizer import SourceCursor
from .value import Value

logger = logging.getLogger(__name__)

# C0 controls other than TAB, LF and CR are not allowed anywhere in a document
_FORBIDDEN_CONTROL = regex.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F]")
_NAME = regex.compile(r"[^\s<>/=\"'!?&]+")
_REFERENCE = regex.compile(r"&(?:(#x[0-9A-Fa-f]{1,6}|#[0-9]{1,7}|[A-Za-z_][\w.\-]*);)?")


def decode_entities(text: str) -> str:
    """Replace character and predefined entity references in text."""
    if "&" not in text:
        return text
    return _REFERENCE.sub(_resolve_reference, text)


def _resolve_reference(match: "regex.Match[str]") -> str:
    name = match.group(1)
    if name is None:
        raise XmlFormatError(
            "Malformed entity reference",
            ["Write '&amp;' for a literal ampersand"],
        )

    if name.startswith("#"):
        code_point = int(name[2:], 16) if name[1] == "x" else int(name[1:])
        if code_point > 0x10FFFF:
            raise XmlFormatError(f"Character reference &{name}; is out of range")
        return chr(code_point)

    if name not in XML_ENTITIES:
        raise XmlFormatError(
            f"Unknown entity &{name};",
            ["Only &lt; &gt; &amp; &quot; &apos; and numeric references are supported"],
        )
    return XML_ENTITIES[name]


class XmlParser(SourceCursor, BaseParserMixin):
    """Recursive-descent reader for a single XML document."""

    def __init__(self, text: str, validator: Optional[LimitValidator] = None):
        super().__init__(text)
        self.validator = validator

    def parse(self) -> dict[str, Value]:
        """Parse the whole document into {root_tag: content}."""
        forbidden = _FORBIDDEN_CONTROL.search(self.text)
        if forbidden:
            raise XmlFormatError(
                f"Illegal control character {format_code_point(forbidden.group())} "
                f"at offset {forbidden.start()}"
            )

        self._skip_misc()
        if not self.startswith("<"):
            raise XmlFormatError(
                "Missing root element" if self.at_end() else "Text outside of root element"
            )

        try:
            tag, content = self.parse_element()
        except RecursionError:
            raise SecurityError(
                "Nesting depth exceeds the interpreter recursion limit"
            ) from None

        self._skip_misc()
        if not self.at_end():
            raise XmlFormatError(f"Unexpected content after root element <{tag}>")

        return {tag: content}

    def parse_element(self) -> tuple[str, Value]:
        """Parse one element starting at '<' and return (tag, content)."""
        self.advance()
        tag = self._read_name("element")
        self.validate_and_enter_structure()

        if self._read_attributes():
            self.validate_and_exit_structure()
            return tag, ""

        children: list[tuple[str, Value]] = []
        text_parts: list[str] = []

        while True:
            if self.at_end():
                raise XmlFormatError(f"Unclosed element <{tag}>")

            if self.startswith("</"):
                self._read_closing_tag(tag)
                break

            if self.startswith("<!--"):
                self._skip_until("-->", "comment")
            elif self.startswith("<?"):
                self._skip_until("?>", "processing instruction")
            elif self.startswith("<!"):
                raise XmlFormatError(
                    "Unsupported markup declaration inside element; "
                    "CDATA and DTDs are not supported"
                )
            elif self.startswith("<"):
                children.append(self.parse_element())
            else:
                text_parts.append(self._read_text())

        self.validate_and_exit_structure()
        return tag, self._build_content(children, "".join(text_parts))

    def _build_content(self, children: list[tuple[str, Value]], text: str) -> Value:
        if self.validator:
            self.validator.validate_string_length(text)

        if not children:
            return text

        grouped: dict[str, list[Value]] = {}
        for tag, content in children:
            grouped.setdefault(tag, []).append(content)

        result: dict[str, Value] = {
            tag: contents[0] if len(contents) == 1 else contents
            for tag, contents in grouped.items()
        }

        stripped = text.strip()
        if stripped:
            result[XML_TEXT_KEY] = stripped
        return result

    def _read_attributes(self) -> bool:
        """Consume the rest of a start tag; True when it was self-closing."""
        while True:
            self._skip_whitespace()

            if self.startswith("/>"):
                self.advance_by(2)
                return True
            if self.startswith(">"):
                self.advance()
                return False
            if self.at_end():
                raise XmlFormatError("Unexpected end of input inside a start tag")

            self._read_name("attribute")
            self._skip_whitespace()
            if self.peek() != "=":
                raise XmlFormatError("Expected '=' after attribute name")
            self.advance()
            self._skip_whitespace()

            quote = self.peek()
            if quote not in ("'", '"'):
                raise XmlFormatError("Attribute values must be quoted")
            self.advance()
            end = self.text.find(quote, self.pos)
            if end < 0:
                raise XmlFormatError("Unterminated attribute value")
            decode_entities(self.advance_by(end - self.pos))
            self.advance()

    def _read_closing_tag(self, tag: str) -> None:
        self.advance_by(2)
        closing = self._read_name("closing tag")
        if closing != tag:
            raise XmlFormatError(
                f"Mismatched closing tag </{closing}>, expected </{tag}>"
            )
        self._skip_whitespace()
        if self.peek() != ">":
            raise XmlFormatError(f"Expected '>' to end closing tag </{tag}>")
        self.advance()

    def _read_name(self, what: str) -> str:
        match = _NAME.match(self.text, self.pos)
        if not match:
            raise XmlFormatError(f"Expected {what} name at offset {self.pos}")
        return self.advance_by(len(match.group()))

    def _read_text(self) -> str:
        end = self.text.find("<", self.pos)
        if end < 0:
            end = len(self.text)
        return decode_entities(self.advance_by(end - self.pos))

    def _skip_whitespace(self) -> None:
        while self.peek() and self.peek() in XML_WHITESPACE:
            self.advance()

    def _skip_until(self, terminator: str, what: str) -> None:
        end = self.text.find(terminator, self.pos)
        if end < 0:
            raise XmlFormatError(f"Unterminated {what}")
        self.advance_by(end + len(terminator) - self.pos)

    def _skip_misc(self) -> None:
        """Skip whitespace, the prolog, comments and processing instructions."""
        while True:
            self._skip_whitespace()
            if self.startswith("<?"):
                self._skip_until("?>", "processing instruction")
            elif self.startswith("<!--"):
                self._skip_until("-->", "comment")
            elif self.startswith("<!"):
                raise XmlFormatError("DOCTYPE and other declarations are not supported")
            else:
                return


def parse_xml(
    text: Union[str, bytes, bytearray], config: Optional[ParseConfig] = None
) -> dict[str, Value]:
    """
    Parse an XML document into a value.

    Args:
        text: XML document (str, or UTF-8 bytes/bytearray)
        config: Optional ParseConfig for limits

    Returns:
        A single-entry dict mapping the root tag to its content

    Raises:
        XmlFormatError: If the text is not a well-formed document
        SecurityError: If a configured limit is exceeded
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise XmlFormatError(
                f"Invalid UTF-8 byte 0x{text[exc.start]:02X} at offset {exc.start}"
            ) from None

    if config is None:
        config = ParseConfig()

    validator = BaseParserMixin.create_validator(config)
    if validator:
        validator.validate_input_size(text)

    logger.debug(f"Parsing XML document of {len(text)} characters")
    return XmlParser(text, validator).parse()


def load_xml(fp: TextIO, config: Optional[ParseConfig] = None) -> dict[str, Value]:
    """Parse an XML document read from a file-like object."""
    return parse_xml(fp.read(), config)
