from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List

from .crawler import crawl
from .element import DOCTYPE_TAG, Element, doctype, viewport_meta

if TYPE_CHECKING:
    from .compiler import CompileOptions


@dataclass
class NormalizedDocument:
    elements: List[Element]
    found_script_sources: List[str] = field(default_factory=list)


def _take_child(parent: Element, tag_name: str):
    """Removes and returns the first child with `tag_name`, or None."""
    for idx, child in enumerate(parent.children):
        if child.tag_name == tag_name:
            return parent.children.pop(idx)
    return None


def modify(elements: List[Element], options: "CompileOptions") -> NormalizedDocument:
    """
    Shapes a parsed tree into a full document.

    Guarantees a single html root holding head then body, moves head-only
    tags into the head, resolves components, and puts the doctype first.
    This is more or less what a browser makes of loose HTML.
    """
    elements = [e for e in elements if e.tag_name != DOCTYPE_TAG]

    html = next((e for e in elements if e.tag_name == "html"), None)
    if html is None:
        html = Element("html", children=elements)
        elements = [html]

    # The head is kept out of html while the rest of the tree is crawled
    head = _take_child(html, "head") or Element("head")
    if html.find_child("body") is None:
        html.children = [Element("body", children=html.children)]

    head.children.append(viewport_meta())

    registry: Dict[str, Element] = {}
    head_results = crawl(head.children, registry, True, options)
    body_results = crawl(elements, registry, False, options)
    head.children.extend(head_results.head_elements + body_results.head_elements)

    html.children.insert(0, head)
    elements.insert(0, doctype())

    return NormalizedDocument(
        elements=elements,
        found_script_sources=head_results.script_sources + body_results.script_sources,
    )
