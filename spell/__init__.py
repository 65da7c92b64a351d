from .compiler import CompileOptions, SpellCompiler, compile
from .element import Element
from .errors import ScriptCompileError, SpellError, UnmatchedNestError
from .parser import parse

__all__ = [
    "CompileOptions",
    "Element",
    "ScriptCompileError",
    "SpellCompiler",
    "SpellError",
    "UnmatchedNestError",
    "compile",
    "parse",
]
