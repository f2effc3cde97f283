"""CLI commands for profile-trophy."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from profile_trophy.card import render_trophies
from profile_trophy.config import get_render_defaults, set_render_default
from profile_trophy.display import (
    print_config,
    print_error,
    print_render_result,
    print_themes,
    print_trophies,
)
from profile_trophy.errors import TrophyError
from profile_trophy.filters import select_trophies, sort_by_rank
from profile_trophy.logging_setup import configure_logging
from profile_trophy.stats import load_statistics
from profile_trophy.themes import THEMES, get_theme
from profile_trophy.trophies import build_catalog

logger = logging.getLogger("profile_trophy.cli")


def _column_limit(value: str) -> int:
    """argparse type: positive integer, or -1 for a single row."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number == 0 or number < -1:
        raise argparse.ArgumentTypeError("must be a positive integer or -1")
    return number


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="profile-trophy",
        description="Compute and render profile achievement trophies",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="Show resolved trophies as a table")
    list_parser.add_argument("stats", help="Path to aggregate statistics JSON")
    list_parser.add_argument("--title", "-t", action="append", default=[], help="Trophy name filter (repeatable; --title=-Name excludes)")
    list_parser.add_argument("--rank", "-r", action="append", default=[], help="Rank filter (repeatable; --rank=-C excludes)")
    list_parser.add_argument("--all", "-a", action="store_true", help="Include secret trophies")

    render_parser = subparsers.add_parser("render", help="Write an SVG trophy card")
    render_parser.add_argument("stats", help="Path to aggregate statistics JSON")
    render_parser.add_argument("--output", "-o", default="trophy-card.svg", help="Output file path")
    render_parser.add_argument("--theme", default=None, help="Theme name")
    render_parser.add_argument("--title", "-t", action="append", default=[], help="Trophy name filter (repeatable)")
    render_parser.add_argument("--rank", "-r", action="append", default=[], help="Rank filter (repeatable)")
    render_parser.add_argument("--columns", type=_column_limit, default=None, help="Max columns (-1 = one row)")
    render_parser.add_argument("--rows", type=_positive_int, default=None, help="Max rows")
    render_parser.add_argument("--panel-size", type=_positive_int, default=None, help="Panel size in px")
    render_parser.add_argument("--margin-w", type=_non_negative_int, default=None, help="Horizontal margin in px")
    render_parser.add_argument("--margin-h", type=_non_negative_int, default=None, help="Vertical margin in px")
    render_parser.add_argument("--no-bg", action="store_true", default=None, help="Transparent panel background")
    render_parser.add_argument("--no-frame", action="store_true", default=None, help="Hide panel frame")

    subparsers.add_parser("themes", help="List available themes")

    config_parser = subparsers.add_parser("config", help="Show or change render defaults")
    config_sub = config_parser.add_subparsers(dest="config_command")
    config_set = config_sub.add_parser("set", help="Store a render default")
    config_set.add_argument("key", help="Setting name")
    config_set.add_argument("value", help="Setting value")
    config_sub.add_parser("show", help="Show render defaults")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return

    try:
        if args.command == "list":
            do_list(Path(args.stats), titles=args.title, ranks=args.rank, include_hidden=args.all)
        elif args.command == "render":
            do_render(
                Path(args.stats),
                output=args.output,
                theme=args.theme,
                titles=args.title,
                ranks=args.rank,
                max_column=args.columns,
                max_row=args.rows,
                panel_size=args.panel_size,
                margin_width=args.margin_w,
                margin_height=args.margin_h,
                no_background=args.no_bg,
                no_frame=args.no_frame,
            )
        elif args.command == "themes":
            do_themes()
        elif args.command == "config":
            if args.config_command == "set":
                do_config_set(args.key, args.value)
            else:
                do_config_show()
    except TrophyError as exc:
        logger.debug("command %s failed: %s", args.command, exc)
        print_error(exc.user_message)
        sys.exit(1)


def do_list(
    stats_path: Path,
    titles: list[str] | None = None,
    ranks: list[str] | None = None,
    include_hidden: bool = False,
) -> dict:
    """Resolve trophies for a statistics file and print them as a table."""
    stats = load_statistics(stats_path)
    selected = sort_by_rank(select_trophies(
        build_catalog(stats), titles or [], ranks or [], include_hidden=include_hidden,
    ))
    rows = [t.to_dict() for t in selected]
    print_trophies(rows)
    return {"ok": True, "trophies": rows, "count": len(rows)}


def do_render(
    stats_path: Path,
    output: str = "trophy-card.svg",
    theme: str | None = None,
    titles: list[str] | None = None,
    ranks: list[str] | None = None,
    max_column: int | None = None,
    max_row: int | None = None,
    panel_size: int | None = None,
    margin_width: int | None = None,
    margin_height: int | None = None,
    no_background: bool | None = None,
    no_frame: bool | None = None,
    config_path: Path | None = None,
) -> dict:
    """Render an SVG card. Unset options fall back to the configured defaults."""
    defaults = get_render_defaults(config_path)
    overrides = {
        "theme": theme,
        "max_column": max_column,
        "max_row": max_row,
        "panel_size": panel_size,
        "margin_width": margin_width,
        "margin_height": margin_height,
        "no_background": no_background,
        "no_frame": no_frame,
    }
    options = {k: (v if v is not None else defaults[k]) for k, v in overrides.items()}

    colors = get_theme(options.pop("theme"))
    stats = load_statistics(stats_path)
    selected = sort_by_rank(select_trophies(build_catalog(stats), titles or [], ranks or []))
    svg = render_trophies(selected, colors, **options)

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(svg, encoding="utf-8")
    logger.info("wrote %d trophies to %s", len(selected), output_path)

    result = {"ok": True, "output": str(output_path), "count": len(selected)}
    print_render_result(result)
    return result


def do_themes() -> dict:
    names = sorted(THEMES)
    default = get_render_defaults()["theme"]
    print_themes(names, default)
    return {"ok": True, "themes": names}


def do_config_set(key: str, value: str, config_path: Path | None = None) -> dict:
    """Store a render default. Theme names are checked before saving."""
    if key == "theme":
        get_theme(value)
        value = value.strip().lower()
    stored = set_render_default(key, value, config_path)
    print_config(get_render_defaults(config_path))
    return {"ok": True, "key": key, "value": stored}


def do_config_show(config_path: Path | None = None) -> dict:
    options = get_render_defaults(config_path)
    print_config(options)
    return {"ok": True, "options": options}
