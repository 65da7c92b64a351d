class SpellError(ValueError):
    """Base class for errors raised while compiling spell source."""


class UnmatchedNestError(SpellError):
    """A modifier span opened a bracket or quote that never closed."""

    def __init__(self, line: int, column: int):
        self.line = line
        self.column = column
        super().__init__(f"Spell Compile Error ({line}:{column}): Unmatched nest")


class ScriptCompileError(SpellError):
    """The external script compiler rejected its input."""


class ConfigError(SpellError):
    """The build configuration file is missing something it needs."""
