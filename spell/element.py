from dataclasses import dataclass, field
from typing import Dict, List, Optional

# Tags whose text body is emitted verbatim instead of rendered as markdown
RAW_TEXT_TAGS = ("style", "css", "script")

# Tags that always end up inside <head>
HEAD_TAGS = ("title", "css", "style", "meta", "link")

DOCTYPE_TAG = "!DOCTYPE html"


@dataclass
class Element:
    """
    A single node of the template tree.

    Attribute values are kept exactly as written in the source, quotes
    included, so `(id="x")` is stored as {'id': '"x"'}. A value of None is a
    boolean attribute.
    """
    tag_name: str
    attrs: Dict[str, Optional[str]] = field(default_factory=dict)
    classes: List[str] = field(default_factory=list)
    id: Optional[str] = None
    inner_text: Optional[str] = None
    children: List["Element"] = field(default_factory=list)
    single_tag: bool = False

    @property
    def not_markdown(self) -> bool:
        return self.tag_name in RAW_TEXT_TAGS

    def find_child(self, tag_name: str) -> Optional["Element"]:
        for child in self.children:
            if child.tag_name == tag_name:
                return child
        return None


def doctype() -> Element:
    return Element(DOCTYPE_TAG, single_tag=True)


def viewport_meta() -> Element:
    # <meta name="viewport" content="width=device-width,initial-scale=1.0">
    return Element("meta", attrs={
        "name": '"viewport"',
        "content": '"width=device-width,initial-scale=1.0"',
    })
