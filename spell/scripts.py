"""
Binding to the external TypeScript/JavaScript compiler.

The compiler is the `esbuild` executable. Locating it happens once per
process, on first use, and every thread that asks for it before that load is
finished waits for the same load instead of starting its own.
"""
import logging
import shutil
import subprocess
import threading
from typing import Callable, List, Optional

from .errors import ScriptCompileError

logger = logging.getLogger(__name__)

Transform = Callable[[str, Optional[str], bool], str]

DEFAULT_EXECUTABLE = "esbuild"
TARGET = "es2022"


def identity_transform(source: str, filename: Optional[str] = None, minify: bool = False) -> str:
    return source


class ScriptCompiler:
    """Lazily-loaded handle on the script compiler."""

    def __init__(self, executable: str = DEFAULT_EXECUTABLE):
        self.executable = executable
        self._lock = threading.Lock()
        self._ready = threading.Event()
        self._transform: Transform = identity_transform

    @property
    def ready(self) -> bool:
        return self._ready.is_set()

    def start(self, background: bool = False) -> None:
        """Loads the compiler, or waits for a load already in progress."""
        if self._ready.is_set():
            return
        if background:
            threading.Thread(target=self.start, daemon=True).start()
            return
        with self._lock:
            if self._ready.is_set():
                return
            self._transform = self._load()
            self._ready.set()

    def _load(self) -> Transform:
        path = shutil.which(self.executable)
        if path is None:
            logger.warning("Script compiler '%s' not found, scripts will be passed through unchanged.", self.executable)
            return identity_transform
        logger.info("TypeScript compiler loaded! (%s)", path)

        def transform(source: str, filename: Optional[str] = None, minify: bool = False) -> str:
            return run_esbuild(path, source, filename, minify)

        return transform

    def compile(self, source: str, filename: Optional[str] = None, minify: bool = False) -> str:
        """
        Compiles TypeScript (or plain JavaScript) to JavaScript.

        When `filename` is given the output carries an inline source map
        pointing at it.
        """
        self.start()
        return self._transform(source, filename, minify)


def esbuild_command(executable: str, filename: Optional[str] = None, minify: bool = False) -> List[str]:
    cmd = [executable, "--loader=tsx", f"--target={TARGET}"]
    if filename:
        cmd += ["--sourcemap=inline", f"--sourcefile={filename}"]
    if minify:
        cmd.append("--minify")
    return cmd


def run_esbuild(executable: str, source: str, filename: Optional[str] = None, minify: bool = False) -> str:
    completed = subprocess.run(
        esbuild_command(executable, filename, minify),
        input=source,
        check=False,
        capture_output=True,
        text=True,
    )
    if completed.returncode != 0:
        raise ScriptCompileError(
            f"esbuild failed with exit code {completed.returncode}:\n{completed.stderr.strip()}"
        )
    return completed.stdout


_compiler = ScriptCompiler()


def configure_script_compiler(executable: str) -> ScriptCompiler:
    """Points the shared compiler at another executable. Only useful before first use."""
    global _compiler
    _compiler = ScriptCompiler(executable)
    return _compiler


def start_script_compiler(background: bool = True) -> None:
    _compiler.start(background=background)


def compile_script(source: str, filename: Optional[str] = None, minify: bool = False) -> str:
    return _compiler.compile(source, filename, minify)
