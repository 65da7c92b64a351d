from typing import Callable, List, Optional

from .element import Element
from .richtext import render_text as default_render_text

INDENT = "\t"

# Text longer than this goes on its own indented line
LONG_TEXT = 70


def _open_tag(el: Element) -> str:
    out = "<" + el.tag_name
    if el.attrs:
        out += " " + " ".join(key if value is None or value == "" else f"{key}={value}" for key, value in el.attrs.items())
    if el.id:
        out += f' id="{el.id}"'
    if el.classes:
        out += f' class="{" ".join(el.classes)}"'
    return out + ">"


def _indent_block(text: str) -> str:
    return INDENT + text.replace("\n", "\n" + INDENT)


def gen(elements: List[Element], render_text: Optional[Callable[[str], str]] = None) -> str:
    """Converts an element tree to HTML, one sibling per line."""
    render = render_text or default_render_text
    rendered = []
    for el in elements:
        out = _open_tag(el)

        if el.inner_text:
            if el.not_markdown:
                out += el.inner_text
            elif len(el.inner_text) > LONG_TEXT:
                out += "\n" + INDENT + render(el.inner_text) + "\n"
            else:
                out += render(el.inner_text)

        if el.children:
            out += "\n" + _indent_block(gen(el.children, render)) + "\n"

        if el.inner_text or el.children or not el.single_tag:
            out += f"</{el.tag_name}>"
        rendered.append(out)
    return "\n".join(rendered)
