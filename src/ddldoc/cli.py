"""Command line entry point.

Usage:
    ddldoc TREE.json [TREE.json ...] [-o OUTPUT_DIR] [--config FILE] [-v | -q]

Exit codes: 0 on success, 1 when a tree or the configuration is invalid or
a file cannot be read or written, 2 on usage errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from ddldoc import __version__
from ddldoc.config import GeneratorConfig, load_config
from ddldoc.errors import DdlDocError
from ddldoc.extractor import RunState
from ddldoc.generator import generate_documentation
from ddldoc.tree import load_tree

DEFAULT_OUTPUT_DIR = Path("docs")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ddldoc",
        description="Generate Markdown protocol documentation from DDL parse trees",
    )
    parser.add_argument("trees", nargs="+", type=Path, help="Parse tree JSON file(s)")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument("--config", type=Path, help="TOML configuration file")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    try:
        config = load_config(args.config) if args.config else GeneratorConfig()
        # One counter for every tree of this invocation
        run_state = RunState()
        for tree_path in args.trees:
            tree = load_tree(tree_path)
            generate_documentation(tree, args.output, config=config, run_state=run_state)
    except (DdlDocError, OSError) as e:
        print(f"ddldoc: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
