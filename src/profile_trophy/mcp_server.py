"""MCP server for profile-trophy.

Exposes trophy resolution and card rendering as MCP tools.
Run via: python3 -m profile_trophy.mcp_server
"""
from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from profile_trophy.card import render_trophies
from profile_trophy.errors import TrophyError
from profile_trophy.filters import select_trophies, sort_by_rank
from profile_trophy.stats import AggregateStatistics
from profile_trophy.themes import DEFAULT_THEME, THEMES, get_theme
from profile_trophy.trophies import build_catalog

mcp = FastMCP(name="profile-trophy")


@mcp.tool()
def get_trophies(
    stats: dict[str, Any],
    titles: list[str] | None = None,
    include_hidden: bool = False,
) -> dict[str, Any]:
    """Resolve every trophy for a statistics snapshot.

    stats: aggregate counters (totalCommits, totalStargazers, ... or snake_case).
    titles: optional trophy names; '-Name' excludes. Secret trophies appear only
            when named or when include_hidden is true.
    """
    try:
        trophies = build_catalog(AggregateStatistics.from_dict(stats))
        selected = select_trophies(trophies, titles or [], include_hidden=include_hidden)
        rows = [t.to_dict() for t in sort_by_rank(selected)]
    except TrophyError as exc:
        return {"error": exc.user_message}
    return {"trophies": rows, "count": len(rows)}


@mcp.tool()
def get_trophy_card(
    stats: dict[str, Any],
    theme: str = DEFAULT_THEME,
    titles: list[str] | None = None,
    ranks: list[str] | None = None,
    columns: int = 8,
    rows: int = 3,
) -> dict[str, Any]:
    """Render an SVG trophy card for a statistics snapshot."""
    try:
        colors = get_theme(theme)
        trophies = build_catalog(AggregateStatistics.from_dict(stats))
        selected = sort_by_rank(select_trophies(trophies, titles or [], ranks or []))
        svg = render_trophies(selected, colors, max_column=columns, max_row=rows)
    except TrophyError as exc:
        return {"error": exc.user_message}
    except ValueError as exc:
        return {"error": str(exc)}
    return {"svg": svg, "count": len(selected)}


@mcp.tool()
def list_themes() -> dict[str, Any]:
    """List theme names usable with get_trophy_card."""
    return {"themes": sorted(THEMES)}


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
