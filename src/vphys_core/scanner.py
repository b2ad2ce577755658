"""Lexical scanner: cursor movement over raw KV3 text."""

from __future__ import annotations

from .errors import MalformedDocument


WHITESPACE = frozenset(" \t\r\n")
TOKEN_DELIMITERS = frozenset("{}[],= \t\r\n")


class Scanner:
    """A single forward cursor over an immutable text buffer.

    The skip routines are idempotent and never move the cursor backwards.
    A loop that stops making progress raises ``MalformedDocument``.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    # -- Inspection -----------------------------------------------------

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        """Character at ``pos + offset``, or ``""`` past the end."""
        i = self.pos + offset
        if 0 <= i < len(self.text):
            return self.text[i]
        return ""

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def location(self, offset: int | None = None) -> str:
        """Human readable ``line:column`` for *offset* (default: cursor)."""
        if offset is None:
            offset = self.pos
        offset = min(offset, len(self.text))
        line = self.text.count("\n", 0, offset) + 1
        column = offset - (self.text.rfind("\n", 0, offset) + 1) + 1
        return f"{line}:{column}"

    def error(self, message: str) -> MalformedDocument:
        return MalformedDocument(
            f"{message} at offset {self.pos} (line {self.location()})", self.pos
        )

    # -- Movement -------------------------------------------------------

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.text))

    def expect(self, char: str) -> None:
        if self.peek() != char:
            found = self.peek() or "end of input"
            raise self.error(f"expected {char!r}, found {found!r}")
        self.pos += 1

    def _next_line(self) -> None:
        newline = self.text.find("\n", self.pos)
        self.pos = len(self.text) if newline == -1 else newline + 1

    def skip_header(self) -> None:
        """Skip leading lines (e.g. ``<!-- kv3 ... -->``) until one starts with ``{``."""
        while not self.at_end() and self.peek() != "{":
            before = self.pos
            self._next_line()
            if self.pos <= before:
                raise self.error("no progress")

    def skip_whitespace(self) -> None:
        text = self.text
        pos = self.pos
        while pos < len(text) and text[pos] in WHITESPACE:
            pos += 1
        self.pos = pos

    def skip_line_comments(self) -> None:
        """Skip ``//`` comment lines and ``/* */`` block comments."""
        while self.peek() == "/":
            before = self.pos
            if self.startswith("/*"):
                close = self.text.find("*/", self.pos + 2)
                if close == -1:
                    raise self.error("unclosed comment")
                self.pos = close + 2
            else:
                self._next_line()
            if self.pos <= before:
                raise self.error("no progress")

    def skip_trivia(self) -> None:
        """Skip any mix of whitespace and comments."""
        while True:
            before = self.pos
            self.skip_whitespace()
            self.skip_line_comments()
            if self.pos == before:
                return

    def token_end(self) -> int:
        """Offset of the next delimiter from the cursor, or end of input.

        Quotes are not special: a quoted token keeps its quote characters.
        """
        text = self.text
        end = self.pos
        while end < len(text) and text[end] not in TOKEN_DELIMITERS:
            end += 1
        return end
