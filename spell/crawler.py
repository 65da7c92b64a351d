"""
The rewriting pass run over a parsed tree.

The walk is depth-first and in document order, which is what makes the
component system "define on first use": a component can only be used after
the element that defines it.
"""
import copy
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List

from .element import HEAD_TAGS, Element
from .scripts import compile_script

if TYPE_CHECKING:
    from .compiler import CompileOptions

logger = logging.getLogger(__name__)

# Attribute that marks an element as a component
COMPONENT_MARKER = "@"
COMPONENT_TAG = "div"


@dataclass
class CrawlResult:
    script_sources: List[str] = field(default_factory=list)
    head_elements: List[Element] = field(default_factory=list)

    def extend(self, other: "CrawlResult") -> None:
        self.script_sources.extend(other.script_sources)
        self.head_elements.extend(other.head_elements)


def instantiate(template: Element, usage: Element) -> Element:
    """Builds a component instance: template content first, then the usage's own children."""
    return Element(
        template.tag_name,
        attrs=dict(template.attrs),
        classes=list(template.classes),
        id=template.id,
        inner_text=template.inner_text,
        children=copy.deepcopy(template.children) + list(usage.children),
        single_tag=template.single_tag,
    )


def _to_js_extension(src: str) -> str:
    if src.endswith(".ts"):
        return src[:-2] + "js"
    if src.endswith('.ts"'):
        return src[:-3] + 'js"'
    return src


def crawl(elements: List[Element], registry: Dict[str, Element], is_head: bool, options: "CompileOptions") -> CrawlResult:
    """
    Rewrites `elements` in place.

    Resolves components, retags css/style/script elements, compiles inline
    scripts, and (outside the head) pulls head-only tags out of the tree.
    Returns the script sources found and the elements that were pulled out.
    """
    result = CrawlResult()
    kept: List[Element] = []

    for el in list(elements):
        if el.tag_name == "css":
            el.tag_name = "style"

        if COMPONENT_MARKER in el.attrs:
            if el.tag_name not in registry:
                # First sighting defines the component; it's never rendered itself
                name = el.tag_name
                del el.attrs[COMPONENT_MARKER]
                el.tag_name = COMPONENT_TAG
                registry[name] = el
                logger.debug("Defined component %s", name)
                continue

            instance = instantiate(registry[el.tag_name], el)
            result.extend(crawl(instance.children, registry, is_head, options))
            kept.append(instance)
            continue

        if el.tag_name == "style" and "src" in el.attrs:
            el.tag_name = "link"
            el.attrs = {"rel": '"stylesheet"', "href": el.attrs["src"]}
        elif el.tag_name == "script":
            if "src" in el.attrs:
                src = el.attrs["src"]
                # A bare `src` flag names no file to build
                if src:
                    if options.convert_script_extension_to_js:
                        el.attrs["src"] = _to_js_extension(src)
                    result.script_sources.append(src)
            elif el.inner_text:
                compiler = options.script_compiler or compile_script
                el.inner_text = compiler(el.inner_text)

        if el.children:
            result.extend(crawl(el.children, registry, is_head, options))

        if not is_head and el.tag_name in HEAD_TAGS:
            result.head_elements.append(el)
            continue

        kept.append(el)

    elements[:] = kept
    return result
