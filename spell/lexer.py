"""
Character-level helpers for the spell parser.

The cursor knows about nesting and quoting so that the parser itself only
deals with lines, tags and bodies.
"""
import string
from typing import List

from .errors import UnmatchedNestError

# Characters allowed inside a tag name
NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_-")

OPENERS = "([{"
CLOSERS = ")]}"
INDENT = "\t"


def line_and_column(text: str, idx: int):
    """1-based line and column of a character offset."""
    line = text.count("\n", 0, idx) + 1
    column = idx - text.rfind("\n", 0, idx)
    return line, column


class Cursor:
    """A read position over normalized template text."""

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        idx = self.pos + offset
        if 0 <= idx < len(self.text):
            return self.text[idx]
        return ""

    def advance(self, n: int = 1) -> str:
        chunk = self.text[self.pos:self.pos + n]
        self.pos = min(self.pos + n, len(self.text))
        return chunk

    def line_end(self) -> int:
        end = self.text.find("\n", self.pos)
        return len(self.text) if end == -1 else end

    def read_while(self, chars) -> str:
        start = self.pos
        while not self.at_end and self.text[self.pos] in chars:
            self.pos += 1
        return self.text[start:self.pos]

    def skip_balanced(self) -> str:
        """
        Consumes a modifier span and returns it.

        The span ends at the first space or newline seen at nesting depth
        zero, which is left unconsumed. Double-quoted runs are opaque.
        """
        start = self.pos
        text = self.text
        depth = 0
        in_quotes = False
        i = start
        while i < len(text):
            c = text[i]
            if in_quotes:
                if c == '"':
                    in_quotes = False
            elif c == '"':
                in_quotes = True
            elif c in OPENERS:
                depth += 1
            elif c in CLOSERS:
                depth -= 1
            elif c in " \n" and depth <= 0:
                self.pos = i
                return text[start:i]
            i += 1
        line, column = line_and_column(text, start)
        raise UnmatchedNestError(line, column)


def _split_top_level(text: str, is_boundary, keep_separator: bool) -> List[str]:
    pieces: List[str] = []
    current = ""
    depth = 0
    in_quotes = False
    for c in text:
        if in_quotes:
            current += c
            if c == '"':
                in_quotes = False
            continue
        if c == '"':
            in_quotes = True
            current += c
            continue
        if depth == 0 and is_boundary(c):
            if current:
                pieces.append(current)
            current = c if keep_separator else ""
            if c in OPENERS:
                depth += 1
            continue
        if c in OPENERS:
            depth += 1
        elif c in CLOSERS:
            depth -= 1
        current += c
    if current:
        pieces.append(current)
    return pieces


def split_modifiers(span: str) -> List[str]:
    """
    Splits a modifier span like `.card#main(href="a.b")` into its tokens.

    A new token starts at every `.`, `#` or `(` that is neither quoted nor
    nested inside brackets.
    """
    return _split_top_level(span.strip(), lambda c: c in ".#(", keep_separator=True)


def split_attributes(token: str) -> List[str]:
    """Splits the inside of an attribute list token on unquoted, unnested commas."""
    inner = token[1:]
    if inner.endswith(")"):
        inner = inner[:-1]
    return _split_top_level(inner, lambda c: c == ",", keep_separator=False)
