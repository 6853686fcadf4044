"""
Indented text buffer used by the pretty printers.
"""

import io

from ..utils.config import IndentStep


class IndentedWriter:
    """Accumulates output text while tracking the current nesting level."""

    def __init__(self, indent: IndentStep = IndentStep.TWO_SPACES):
        self._buffer = io.StringIO()
        self._step = indent.value
        self.level = 0

    def append(self, text: str) -> "IndentedWriter":
        self._buffer.write(text)
        return self

    def newline(self) -> "IndentedWriter":
        return self.append("\n")

    def fill_spaces(self) -> "IndentedWriter":
        """Write the indentation for the current level."""
        return self.append(self._step * self.level)

    def open(self, opener: str) -> "IndentedWriter":
        """Write an opener and move to a fresh line one level deeper."""
        self.append(opener)
        self.level += 1
        return self.newline()

    def close(self, closer: str) -> "IndentedWriter":
        """Leave the current level and write its closer on its own line."""
        self.level -= 1
        self.newline()
        self.fill_spaces()
        return self.append(closer)

    def getvalue(self) -> str:
        return self._buffer.getvalue()
