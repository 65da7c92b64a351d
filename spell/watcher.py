from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler
from pathlib import Path
from .compiler import SpellCompiler
from .errors import ScriptCompileError
from .scripts import compile_script


def script_targets(spl_path, html_path, script_sources):
    """
    Yields (ts_path, js_path) for every local `.ts` script a page links to.

    Sources are resolved next to the .spl file; the compiled .js goes next
    to the written page, where the rewritten link points.
    """
    for src in script_sources:
        src = src.strip('"')
        if not src.endswith(".ts") or "://" in src:
            continue
        rel = src.lstrip("/")
        yield Path(spl_path).parent / rel, Path(html_path).parent / (rel[:-2] + "js")


def build_scripts(spl_path, html_path, script_sources):
    for ts_path, js_path in script_targets(spl_path, html_path, script_sources):
        if not ts_path.is_file():
            print(f"Warning: Script '{ts_path}' does not exist. Skipping.")
            continue
        try:
            js = compile_script(ts_path.read_text(encoding="utf-8"), str(ts_path))
        except ScriptCompileError as e:
            print(f"Failed to compile {ts_path}: {e}")
            continue
        js_path.parent.mkdir(parents=True, exist_ok=True)
        js_path.write_text(js, encoding="utf-8")
        print(f"Compiled {ts_path} -> {js_path}")


def trigger_recompile(write_pairs, compiler):
    for (k, v) in write_pairs.items():
        html = compiler.compile_file(k)
        if not html:
            print(f"Failed to compile {k}, see the log for details.")
            continue
        with open(v, "w+") as f:
            f.write(html)
        print(f"Compiled {k} -> {v}")
        if compiler.options.convert_script_extension_to_js:
            build_scripts(k, v, compiler.script_sources)


class ChangeHandler(FileSystemEventHandler):
    def __init__(self, files_to_watch, write_pairs, compiler):
        self.files_to_watch = {x.resolve() for x in files_to_watch} # Absolute paths (sources + extra watched files)
        self.write_pairs = write_pairs       # Dict {src: dst}
        self.compiler = compiler

    def on_modified(self, event):
        if event.is_directory:
            return

        src_path_abs = Path(event.src_path).resolve()
        if src_path_abs in self.files_to_watch:
            print(f"\nDetected modification in: {src_path_abs}")
            trigger_recompile(self.write_pairs, self.compiler)


def run_watcher(write_pairs, watch_paths, options=None):
    """Builds every page once, then rebuilds them all whenever a watched file changes."""
    files_to_watch = set(write_pairs.keys()) | watch_paths
    compiler = SpellCompiler(options)
    trigger_recompile(write_pairs, compiler)

    dirs_to_watch = {p.parent for p in files_to_watch if p.parent.is_dir()}
    if not dirs_to_watch:
        print("Error: Nothing to watch.")
        return

    observer = Observer()
    event_handler = ChangeHandler(files_to_watch, write_pairs, compiler)
    for dir_path in dirs_to_watch:
        observer.schedule(event_handler, str(dir_path), recursive=False)

    observer.start()
    print(f"Watching {len(files_to_watch)} file(s). Press Ctrl+C to stop.")
    try:
        while observer.is_alive():
            observer.join(timeout=1)
    except KeyboardInterrupt:
        pass
    finally:
        observer.stop()
        observer.join()
