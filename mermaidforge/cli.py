# mermaidforge/cli.py
"""Command line front end: render the mermaid blocks of a markdown file."""
from __future__ import annotations

import argparse
import logging
import shutil
import sys
from typing import List, Optional

from .core import render_mermaid_blocks
from .errors import InvalidModeError, InvalidWidthError
from .models.mode import RenderMode
from .render.engine import EngineConfig, MermaidAsciiCLI


def _read_input(path: str) -> str:
    # Read without newline translation so CRLF documents round-trip exactly.
    if path == "-":
        return sys.stdin.buffer.read().decode("utf-8")
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def resolve_width(value: Optional[int]) -> int:
    """Explicit width, else the terminal's column count. Negative is rejected."""
    if value is None:
        return shutil.get_terminal_size().columns
    if value < 0:
        raise InvalidWidthError(f"invalid --width value {value}: must be 0 (unbounded) or positive")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mermaidforge",
        description="Render ```mermaid blocks in a markdown document as ASCII/Unicode diagrams.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Markdown file (default: stdin)")
    parser.add_argument(
        "--render-mermaid",
        default=RenderMode.PLAIN.value,
        metavar="{plain,ascii,unicode}",
        help="How to render mermaid blocks (default: plain, i.e. unchanged)",
    )
    parser.add_argument("-w", "--width", type=int, default=None, help="Document width in columns; 0 for unbounded")
    parser.add_argument("--engine", default=None, help="Path to the mermaid-ascii executable")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        mode = RenderMode.parse(args.render_mermaid, strict=True)
        width = resolve_width(args.width)
    except (InvalidModeError, InvalidWidthError) as e:
        parser.error(str(e))

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = EngineConfig.from_env()
    if args.engine:
        config.executable = args.engine

    try:
        content = _read_input(args.input)
    except OSError as e:
        print(f"mermaidforge: {e}", file=sys.stderr)
        return 1

    output = render_mermaid_blocks(
        content,
        mode,
        width,
        engine=MermaidAsciiCLI(config),
        logger=logging.getLogger("mermaidforge") if args.verbose else None,
    )
    sys.stdout.write(output)
    return 0
