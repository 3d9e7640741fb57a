"""Command-line front end for mathspan.

``mathspan render [FILE]`` prints the rendered text; ``mathspan segments
[FILE]`` shows how the input was split. Both read stdin when FILE is omitted.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

from mathspan import setup_logging
from mathspan.config import get_settings
from mathspan.render import ENGINES, MathRenderer, get_engine

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mathspan.parsing import Segment

console = Console()


def _build_parser() -> argparse.ArgumentParser:
    """Build argparse parser for the render and segments subcommands."""
    parser = argparse.ArgumentParser(
        prog="mathspan",
        description="Render LaTeX math embedded in plain text.",
    )
    parser.add_argument(
        "--engine",
        choices=sorted(ENGINES),
        default=None,
        help="Typesetting backend (default: ENGINE__BACKEND or latex2mathml)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render_p = sub.add_parser("render", help="Render text with embedded math")
    render_p.add_argument(
        "file", nargs="?", type=Path, help="Input file (default: stdin)"
    )

    segments_p = sub.add_parser("segments", help="Show text/math segments")
    segments_p.add_argument(
        "file", nargs="?", type=Path, help="Input file (default: stdin)"
    )

    return parser


def _read_input(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _segments_table(segments: Sequence[Segment]) -> Table:
    table = Table(title=f"{len(segments)} segments")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind")
    table.add_column("Display")
    table.add_column("Content", overflow="fold")
    for index, segment in enumerate(segments):
        kind_style = "cyan" if segment.is_math else "white"
        table.add_row(
            str(index),
            f"[{kind_style}]{segment.kind}[/]",
            "yes" if segment.display else "",
            Text(repr(segment.content)),
        )
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``mathspan`` console script."""
    args = _build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings)

    renderer = MathRenderer(engine=get_engine(args.engine or settings.engine.backend))

    try:
        text = _read_input(args.file)
    except OSError as exc:
        console.print(f"[red]Cannot read input:[/] {exc}")
        return 1

    if args.command == "segments":
        console.print(_segments_table(renderer.segments(text)))
    else:
        # Plain stdout: rendered markup must not be reinterpreted as rich markup
        sys.stdout.write(renderer.render(text) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
