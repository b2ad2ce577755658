"""Reader layer: recursive-descent parser from KV3 text to a value tree."""

from __future__ import annotations

import logging

from .scanner import Scanner
from .values import KArray, KBlob, KObject, KScalar, Value


LOGGER = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse(text: str) -> Value:
    """Parse a KV3 text document and return its root value.

    Any leading header line(s) before the first ``{`` are discarded.
    Content after the root value is ignored.
    """
    parser = Parser(text)
    parser.scanner.skip_header()
    LOGGER.debug("header skipped, root value starts at offset %d", parser.scanner.pos)
    root = parser.parse_value()
    LOGGER.debug("parsed %d characters", len(text))
    return root


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class Parser:
    def __init__(self, text: str) -> None:
        self.scanner = Scanner(text)

    def parse_value(self) -> Value:
        sc = self.scanner
        sc.skip_trivia()

        if sc.at_end():
            raise sc.error("unexpected end of input")

        ch = sc.peek()
        if ch == "{":
            return self.parse_object()
        if ch == "[":
            return self.parse_array()
        if ch == "#" and sc.peek(1) == "[":
            return self.parse_byte_blob()

        start = sc.pos
        end = sc.token_end()
        sc.pos = end
        return KScalar(sc.text[start:end])

    def parse_object(self) -> KObject:
        sc = self.scanner
        sc.expect("{")
        entries: dict[str, Value] = {}

        while True:
            sc.skip_trivia()
            if sc.at_end():
                raise sc.error("unclosed object")
            if sc.peek() == "}":
                sc.advance()
                return KObject(entries)

            before = sc.pos
            key_end = sc.token_end()
            if key_end == sc.pos:
                raise sc.error("empty key")
            key = sc.text[sc.pos:key_end]
            sc.pos = key_end

            sc.skip_whitespace()
            if sc.peek() == "=":
                sc.advance()

            # last write wins on duplicate keys
            entries[key] = self.parse_value()

            sc.skip_whitespace()
            if sc.peek() == ",":
                sc.advance()
            if sc.pos == before:
                raise sc.error("no progress")

    def parse_array(self) -> KArray:
        sc = self.scanner
        sc.expect("[")
        items: list[Value] = []

        while True:
            sc.skip_trivia()
            if sc.at_end():
                raise sc.error("unclosed array")
            if sc.peek() == "]":
                sc.advance()
                return KArray(tuple(items))

            before = sc.pos
            items.append(self.parse_value())

            sc.skip_whitespace()
            if sc.peek() == ",":
                sc.advance()
            if sc.pos == before:
                raise sc.error("no progress")

    def parse_byte_blob(self) -> KBlob:
        """``#[ AA BB ... ]`` → KBlob with whitespace collapsed to single spaces."""
        sc = self.scanner
        sc.expect("#")
        sc.expect("[")
        close = sc.text.find("]", sc.pos)
        if close == -1:
            raise sc.error("unclosed byte array")
        raw = sc.text[sc.pos:close]
        sc.pos = close + 1
        return KBlob(" ".join(raw.split()))
