"""
Unit tests for build configuration loading.
"""

from pathlib import Path

import pytest

from spell.config import load_config, parse_config
from spell.errors import ConfigError


class TestParseConfig:
    def test_write_pairs(self):
        cfg = parse_config({"write": [{"src": "a.spl", "dst": "out/a.html"}]})
        assert cfg.write_pairs == {Path("a.spl"): Path("out/a.html")}
        assert cfg.watch_paths == set()
        assert not cfg.convert_script_extension_to_js
        assert cfg.esbuild is None

    def test_missing_write(self):
        with pytest.raises(ConfigError):
            parse_config({"watch": ["*.spl"]})

    def test_empty_file(self):
        with pytest.raises(ConfigError):
            parse_config(None)

    def test_incomplete_write_entry(self):
        with pytest.raises(ConfigError):
            parse_config({"write": [{"src": "a.spl"}]})

    def test_watch_globs(self, tmp_path):
        (tmp_path / "one.spl").write_text("p")
        (tmp_path / "two.spl").write_text("p")
        (tmp_path / "notes.txt").write_text("")
        cfg = parse_config({"write": [{"src": "a", "dst": "b"}], "watch": ["*.spl"]}, tmp_path)
        assert cfg.watch_paths == {tmp_path / "one.spl", tmp_path / "two.spl"}

    def test_compile_options(self):
        cfg = parse_config({"write": [{"src": "a", "dst": "b"}], "convert_script_extension_to_js": True})
        assert cfg.compile_options.convert_script_extension_to_js


class TestLoadConfig:
    def test_yaml_file(self, tmp_path):
        path = tmp_path / "build.yaml"
        path.write_text(
            "write:\n"
            "  - src: index.spl\n"
            "    dst: index.html\n"
            "esbuild: /usr/bin/esbuild\n"
        )
        cfg = load_config(path, tmp_path)
        assert cfg.write_pairs == {Path("index.spl"): Path("index.html")}
        assert cfg.esbuild == "/usr/bin/esbuild"
