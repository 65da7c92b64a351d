import logging
import re
from typing import Dict, List, Optional, Tuple

from .element import Element
from .lexer import INDENT, NAME_CHARS, Cursor, split_attributes, split_modifiers

logger = logging.getLogger(__name__)

# Trailing modifier token that turns the body into a flat text block
MULTILINE_SENTINEL = "."

_LEADING_WHITESPACE = re.compile(r"^[ \t]+", re.MULTILINE)


def normalize_indentation(text: str) -> str:
    """
    Turns every group of four spaces in a line's leading whitespace into one
    tab and makes sure the text ends with a newline.
    """
    text = text.replace("\r\n", "\n")
    text = _LEADING_WHITESPACE.sub(lambda m: m.group(0).replace("    ", INDENT), text)
    if not text.endswith("\n"):
        text += "\n"
    return text


def parse_attributes(tokens: List[str]) -> Dict[str, Optional[str]]:
    """Collects `(k=v, k2="v2", k3)` tokens into one attribute mapping."""
    attrs: Dict[str, Optional[str]] = {}
    for token in tokens:
        for piece in split_attributes(token):
            key, sep, value = piece.partition("=")
            key = key.strip()
            if not key:
                continue
            attrs[key] = value if sep else None
    return attrs


def _dedent(text: str, levels: int) -> str:
    prefix = re.compile(r"^\t{0,%d}" % levels, re.MULTILINE)
    return prefix.sub("", text)


class Parser:
    """
    Builds the element forest for one piece of template source.

    Offsets used by `parse_block` refer to the normalized text held in
    `self.text`, not to the source that was passed in.
    """

    def __init__(self, source: str):
        self.text = normalize_indentation(source)

    def parse_block(self, indent_level: int, start: int) -> Tuple[List[Element], int]:
        """
        Parses sibling elements at `indent_level` starting at `start`.

        Returns the elements and the offset of the first line that belongs
        to an outer level (or the end of the text).
        """
        elements: List[Element] = []
        cursor = Cursor(self.text, start)

        while not cursor.at_end:
            if cursor.peek() == "\n":
                cursor.advance()
                continue
            line_start = cursor.pos
            # Spaces left over from normalization don't hide the tabs after them
            depth = cursor.read_while(" \t").count(INDENT)

            # Skip forward to the tag name; lines without one are ignored
            line_end = cursor.line_end()
            while cursor.pos < line_end and cursor.peek() not in NAME_CHARS:
                cursor.advance()
            if cursor.pos >= line_end:
                continue

            if depth < indent_level:
                return elements, line_start

            tag_name = cursor.read_while(NAME_CHARS)
            element = self._parse_element(cursor, tag_name, indent_level)
            elements.append(element)

        return elements, cursor.pos

    def _parse_element(self, cursor: Cursor, tag_name: str, indent_level: int) -> Element:
        span = cursor.skip_balanced()
        tokens = split_modifiers(span)
        logger.debug("%s modifiers: %r", tag_name, tokens)

        element = Element(
            tag_name,
            attrs=parse_attributes([t for t in tokens if t.startswith("(")]),
            classes=[t[1:] for t in tokens if t.startswith(".") and len(t) > 1],
            id=next((t[1:] for t in tokens if t.startswith("#")), None),
        )

        if tokens and tokens[-1] == MULTILINE_SENTINEL:
            element.inner_text = self._read_text_block(cursor, indent_level) or None
            return element

        # Whatever follows the modifiers on this line is inline text
        line_end = cursor.line_end()
        inline = self.text[cursor.pos + 1:line_end] if cursor.peek() == " " else ""
        element.inner_text = inline or None
        cursor.pos = line_end

        # Inline text or not, indented lines below are children
        children, end = self.parse_block(indent_level + 1, cursor.pos)
        element.children = children
        cursor.pos = end
        return element

    def _read_text_block(self, cursor: Cursor, indent_level: int) -> str:
        """Consumes everything up to the next line indented at or above `indent_level`."""
        text = self.text
        start = cursor.pos + 1
        boundary = re.compile(r"^\t{0,%d}(?!\t)" % indent_level, re.MULTILINE)

        match = boundary.search(text, start)
        # The boundary line starts right after the newline that ends the block
        end = match.start() - 1 if match else len(text)
        end = max(end, cursor.pos)
        cursor.pos = end
        return _dedent(text[start:end], indent_level + 1)


def parse(text: str, indent_level: int = 0, start: int = 0) -> Tuple[List[Element], int]:
    """
    Parses template source into a list of elements.

    Returns the elements found at `indent_level` and the offset (into the
    normalized text) at which parsing stopped.
    """
    return Parser(text).parse_block(indent_level, start)
