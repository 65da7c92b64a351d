import re

import markdown

EXTENSIONS = ["fenced_code", "tables"]

_SINGLE_PARAGRAPH = re.compile(r"\A<p>(.*)</p>\Z", re.DOTALL)


def render_text(raw: str) -> str:
    """
    Renders element text as markdown.

    Text that comes out as one plain paragraph is returned without the <p>
    wrapper, so `p Hello` gives `<p>Hello</p>` rather than a nested paragraph.
    """
    html = markdown.markdown(raw, extensions=EXTENSIONS)
    match = _SINGLE_PARAGRAPH.match(html)
    if match and "<p>" not in match.group(1):
        return match.group(1)
    return html
