import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from .document import modify
from .generator import gen
from .parser import parse

logger = logging.getLogger(__name__)


@dataclass
class CompileOptions:
    # Rewrite `script(src="x.ts")` to point at x.js
    convert_script_extension_to_js: bool = False
    # Overrides the shared esbuild binding for inline scripts
    script_compiler: Optional[Callable[[str], str]] = None


class SpellCompiler:
    """
    Spell Compiler
    Compiles spell source code to a complete HTML document.

    Features:
    - Indentation-based hierarchy (tabs, or groups of four spaces)
    - Classes (.name), ids (#name) and attribute lists ((k=v, k2="v2", flag))
    - Inline text after the tag, multi-line text blocks with a trailing '.'
    - Markdown rendering of text, except inside style/css/script
    - Components: an element with the '@' attribute defines a component, later
      elements with the same tag and '@' are replaced by it
    - title/style/meta/link are moved into <head> wherever they are written
    - Inline <script> bodies are compiled as TypeScript
    - Automatic <!DOCTYPE html>, <html>, <head>, <body> and viewport meta
    """

    def __init__(self, options: Optional[CompileOptions] = None):
        self.options = options or CompileOptions()
        self.script_sources: List[str] = []

    def compile(self, source: str) -> str:
        """
        Compiles spell source to HTML.

        Never raises: on failure the source and error are logged and an empty
        string is returned.
        """
        self.script_sources = []
        try:
            elements, _ = parse(source)
            document = modify(elements, self.options)
            self.script_sources = document.found_script_sources
            return gen(document.elements)
        except Exception:
            logger.exception("Tried compiling:\n%s", source)
            return ""

    def compile_file(self, path) -> str:
        return self.compile(Path(path).read_text(encoding="utf-8"))


def compile(source: str, options: Optional[CompileOptions] = None) -> str:
    return SpellCompiler(options).compile(source)
