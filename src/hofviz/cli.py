"""
hofviz Unified Command-Line Interface

Exposes three subcommands:

    hofviz render     --data <csv> [...]   Write the interactive HTML chart
    hofviz summary    --data <csv> [...]   Print the gender summary text
    hofviz categories --data <csv>         List categories in walkthrough order

The package must be installed (``pip install -e .``) for the ``hofviz`` entry
point to be available.

Package Location: src/hofviz/cli.py
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from .utils.logging import configure_logging

log = logging.getLogger(__name__)


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\n❌  Error: {message}", file=sys.stderr)
    sys.exit(1)


def _resolve_data_path(raw: str) -> Path:
    """Resolve ``--data`` to an absolute path that exists.

    Args:
        raw: Path as typed on the command line.

    Returns:
        Absolute Path to the CSV.

    Raises:
        SystemExit: If the file does not exist.
    """
    data_path = Path(raw).expanduser().resolve()
    if not data_path.is_file():
        _die(f"Dataset not found: {data_path}")
    return data_path


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_render(args: argparse.Namespace) -> None:
    """Load the dataset and write the diverging bar chart as HTML.

    Args:
        args: Parsed CLI arguments.
    """
    from hofviz.data import DatasetLoadError
    from hofviz.reports.generators import ChartGenerator

    data_path = _resolve_data_path(args.data)
    output_dir = Path(args.output).expanduser().resolve()

    print(f"\n📊  Rendering chart for {data_path.name}")
    print(f"    Output:   {output_dir / args.filename}")
    print(f"    Category: {args.category or 'all'}")

    gen = ChartGenerator(data_path, output_dir)
    try:
        out_path = gen.generate(
            category=args.category,
            filename=args.filename,
            interval_ms=args.interval,
            auto_play=args.auto_play,
        )
    except DatasetLoadError as exc:
        _die(str(exc))
    except ValueError as exc:
        if args.verbose:
            traceback.print_exc()
        _die(str(exc))

    print(f"\n✅  Chart saved → {out_path}")


def handle_summary(args: argparse.Namespace) -> None:
    """Print the men / women / percentage summary for one category.

    Args:
        args: Parsed CLI arguments.
    """
    from hofviz.analysis import filter_records, summarize
    from hofviz.data import DatasetLoadError, load_inductees
    from hofviz.plotting import annotation_text

    data_path = _resolve_data_path(args.data)
    try:
        records = load_inductees(data_path)
    except DatasetLoadError as exc:
        _die(str(exc))

    summary = summarize(filter_records(records, args.category))
    print(annotation_text(summary, args.category, sep="\n"))


def handle_categories(args: argparse.Namespace) -> None:
    """Print every category in walkthrough order, one per line.

    Args:
        args: Parsed CLI arguments.
    """
    from hofviz.analysis import list_categories
    from hofviz.data import DatasetLoadError, load_inductees

    data_path = _resolve_data_path(args.data)
    try:
        records = load_inductees(data_path)
    except DatasetLoadError as exc:
        _die(str(exc))

    for category in list_categories(records):
        print(category)


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``render``, ``summary`` and
        ``categories`` subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="hofviz",
        description=(
            "hofviz – Hall of Fame inductees by gender\n"
            "Diverging bar chart and summary statistics from an inductee CSV."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Debug-level logging and full tracebacks on errors.",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # render
    # ------------------------------------------------------------------
    p_render = subs.add_parser(
        "render",
        help="Write the interactive diverging bar chart as HTML.",
        description=(
            "Build the diverging bar chart (male up, female/mixed down) with\n"
            "a category dropdown, timed walkthrough, tooltips, legend and a\n"
            "gender summary annotation, and save it as standalone HTML."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_render.add_argument(
        "--data",
        required=True,
        metavar="CSV",
        help="Inductee CSV with category, class_year and gender columns.",
    )
    p_render.add_argument(
        "--output",
        default="outputs",
        metavar="DIR",
        help="Output directory (default: ./outputs).",
    )
    p_render.add_argument(
        "--filename",
        default="inductees_by_gender.html",
        metavar="NAME",
        help="Output file name (default: inductees_by_gender.html).",
    )
    p_render.add_argument(
        "--category",
        default=None,
        metavar="NAME",
        help="Category shown when the page loads (default: all).",
    )
    p_render.add_argument(
        "--interval",
        type=int,
        default=3000,
        metavar="MS",
        help="Milliseconds per category during the walkthrough (default: 3000).",
    )
    p_render.add_argument(
        "--no-auto-play",
        dest="auto_play",
        action="store_false",
        default=True,
        help="Do not start the walkthrough when the page loads.",
    )
    p_render.set_defaults(func=handle_render)

    # ------------------------------------------------------------------
    # summary
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summary",
        help="Print the number of men and women inducted and the share of women.",
    )
    p_sum.add_argument(
        "--data",
        required=True,
        metavar="CSV",
        help="Inductee CSV.",
    )
    p_sum.add_argument(
        "--category",
        default=None,
        metavar="NAME",
        help="Restrict to one category (default: all).",
    )
    p_sum.set_defaults(func=handle_summary)

    # ------------------------------------------------------------------
    # categories
    # ------------------------------------------------------------------
    p_cat = subs.add_parser(
        "categories",
        help="List categories in order of first appearance.",
    )
    p_cat.add_argument(
        "--data",
        required=True,
        metavar="CSV",
        help="Inductee CSV.",
    )
    p_cat.set_defaults(func=handle_categories)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``hofviz`` console script entry point
    in ``pyproject.toml``.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``.
    """
    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, json_logs=args.json_logs)
    log.debug("Dispatching command", extra={"command": args.command})
    args.func(args)


if __name__ == "__main__":
    main()
