"""
Indentation-tracking text accumulator for emitting braced code.

Every nested scope is entered through a ``with`` block, so the closing
brace is written exactly once on every exit path, including early
returns and exceptions raised by the code filling the scope.
"""

from contextlib import contextmanager
from typing import Iterator, List


class CodeBlock:
    """Accumulates lines of code at a tracked indentation level."""

    def __init__(self, indent_level: int = 0, indent: str = "\t"):
        """
        Initialize a code block.

        Args:
            indent_level: Indentation level of the first line
            indent: Text used for one level of indentation
        """
        if indent_level < 0:
            raise ValueError("Indentation level cannot be negative")

        self.indent = indent
        self._level = indent_level
        self._lines: List[str] = []
        self._opened = 0
        self._closed = 0

    @property
    def level(self) -> int:
        """Current indentation level."""
        return self._level

    @property
    def opened(self) -> int:
        """Number of scopes opened so far."""
        return self._opened

    @property
    def closed(self) -> int:
        """Number of scopes closed so far."""
        return self._closed

    def append_line(self, text: str = "") -> "CodeBlock":
        """
        Append a line prefixed with the current indentation.

        Empty text produces an empty line without trailing whitespace.
        """
        if text:
            self._lines.append(f"{self.indent * self._level}{text}")
        else:
            self._lines.append("")
        return self

    def append_shifted(self, text: str) -> "CodeBlock":
        """Append a line indented one level deeper than the current one."""
        self._lines.append(f"{self.indent * (self._level + 1)}{text}")
        return self

    def append_label(self, text: str) -> "CodeBlock":
        """Append a line one level shallower, e.g. an access specifier."""
        self._lines.append(f"{self.indent * max(self._level - 1, 0)}{text}")
        return self

    @contextmanager
    def block(self, closing: str = "}") -> Iterator["CodeBlock"]:
        """
        Open a braced scope.

        Writes ``{`` immediately and indents; on exit restores the
        previous level and writes ``closing``.

        Args:
            closing: Closing text, e.g. ``"};"`` for class declarations
        """
        self.append_line("{")
        self._opened += 1
        self._level += 1
        try:
            yield self
        finally:
            self._level -= 1
            self.append_line(closing)
            self._closed += 1

    def __str__(self) -> str:
        return "\n".join(self._lines)
