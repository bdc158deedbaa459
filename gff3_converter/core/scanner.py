#!/usr/bin/env python3

"""
Line cursor with a single line of lookahead.
"""

from typing import Iterable, Iterator, Optional

from .exceptions import FormatError


class LineCursor:
    """Read lines one at a time, with peek, tracking the source position."""

    def __init__(self, stream: Iterable[str], name: str = "<stdin>"):
        self._lines: Iterator[str] = iter(stream)
        self._buffer: Optional[str] = None
        self.name = name
        self.line_number = 0

    def _read(self) -> Optional[str]:
        try:
            line = next(self._lines, None)
        except UnicodeDecodeError as e:
            raise FormatError(f"input is not valid text ({e.reason})", self.name, self.line_number + 1)
        if line is None:
            return None
        return line.rstrip('\r\n')

    def peek(self) -> Optional[str]:
        """Return the next line without consuming it, None at end of stream."""
        if self._buffer is None:
            self._buffer = self._read()
        return self._buffer

    def consume(self) -> Optional[str]:
        """Return and discard the next line, None at end of stream."""
        if self._buffer is not None:
            line, self._buffer = self._buffer, None
        else:
            line = self._read()
        if line is not None:
            self.line_number += 1
        return line

    def at_end(self) -> bool:
        return self.peek() is None

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.consume()
            if line is None:
                return
            yield line
