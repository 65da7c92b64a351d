from .config import load_config
from .scripts import configure_script_compiler, start_script_compiler
from .compiler import SpellCompiler
from .watcher import run_watcher, trigger_recompile
import argparse
import logging
import time


def main():
    parser = argparse.ArgumentParser(
                        prog='spell',
                        description='Compiles .spl templates to HTML and rebuilds them when they change')
    parser.add_argument('config', help='YAML build configuration')
    parser.add_argument('--once', action='store_true', help='compile every write pair and exit')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO,
                        format='%(asctime)s - %(message)s',
                        datefmt='%Y-%m-%d %H:%M:%S')

    if args.once:
        cfg = load_config(args.config)
        if cfg.esbuild:
            configure_script_compiler(cfg.esbuild)
        trigger_recompile(cfg.write_pairs, SpellCompiler(cfg.compile_options))
        return

    while True:
        try:
            cfg = load_config(args.config)
            if cfg.esbuild:
                configure_script_compiler(cfg.esbuild)
            start_script_compiler()
            run_watcher(cfg.write_pairs, cfg.watch_paths, cfg.compile_options)
            return
        except Exception as e:
            print(f"Error: {e}")
            print("Please check your configuration and try again, attempting to reload in 3 seconds...")
            time.sleep(3)


if __name__ == '__main__':
    main()
