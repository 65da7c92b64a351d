from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Set

import yaml

from .compiler import CompileOptions
from .errors import ConfigError


@dataclass
class BuildConfig:
    """
    Contents of a build configuration file:

        write:
          - src: pages/index.spl
            dst: public/index.html
        watch:
          - components/*.spl
        convert_script_extension_to_js: true
        esbuild: /usr/local/bin/esbuild
    """
    write_pairs: Dict[Path, Path]
    watch_paths: Set[Path] = field(default_factory=set)
    convert_script_extension_to_js: bool = False
    esbuild: Optional[str] = None

    @property
    def compile_options(self) -> CompileOptions:
        return CompileOptions(convert_script_extension_to_js=self.convert_script_extension_to_js)


def parse_config(cfg, base_path: Path = Path(".")) -> BuildConfig:
    if not isinstance(cfg, dict) or not cfg.get("write"):
        raise ConfigError("Configuration must list at least one 'write' entry.")
    try:
        write_pairs = {Path(to_write["src"]): Path(to_write["dst"]) for to_write in cfg["write"]}
    except (KeyError, TypeError):
        raise ConfigError("Every 'write' entry needs a 'src' and a 'dst'.")
    watch_paths = {watch_path for watch_path_str in cfg.get("watch", []) for watch_path in base_path.glob(watch_path_str)}
    return BuildConfig(
        write_pairs=write_pairs,
        watch_paths=watch_paths,
        convert_script_extension_to_js=bool(cfg.get("convert_script_extension_to_js", False)),
        esbuild=cfg.get("esbuild"),
    )


def load_config(path, base_path: Path = Path(".")) -> BuildConfig:
    with open(path, "r") as f:
        return parse_config(yaml.safe_load(f), base_path)
