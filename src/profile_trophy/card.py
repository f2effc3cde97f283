"""Grid layout of trophy panels into a single SVG card."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from profile_trophy.badge import (
    DEFAULT_NO_BACKGROUND,
    DEFAULT_NO_FRAME,
    DEFAULT_PANEL_SIZE,
    render_trophy_svg,
)
from profile_trophy.filters import select_trophies, sort_by_rank
from profile_trophy.stats import AggregateStatistics
from profile_trophy.themes import ThemeColors
from profile_trophy.trophies import TrophyState, build_catalog

logger = logging.getLogger("profile_trophy.card")

DEFAULT_MAX_COLUMN = 8
DEFAULT_MAX_ROW = 3
DEFAULT_MARGIN_W = 0
DEFAULT_MARGIN_H = 0


def grid_shape(count: int, max_column: int, max_row: int) -> tuple[int, int]:
    """Return (columns, rows) for count panels. max_column == -1 puts all in one row."""
    if max_column == 0 or max_column < -1 or max_row < 1:
        raise ValueError(f"Invalid grid limits: max_column={max_column}, max_row={max_row}")
    if count <= 0:
        return (0, 0)
    if max_column == -1:
        max_column = count
    columns = min(count, max_column)
    rows = min((count - 1) // max_column + 1, max_row)
    return (columns, rows)


def card_size(
    columns: int, rows: int, panel_size: int, margin_width: int, margin_height: int
) -> tuple[int, int]:
    """Return (width, height) in px for a grid."""
    if columns <= 0 or rows <= 0:
        return (0, 0)
    width = panel_size * columns + margin_width * (columns - 1)
    height = panel_size * rows + margin_height * (rows - 1)
    return (width, height)


def render_trophies(
    trophies: list[TrophyState],
    theme: ThemeColors,
    max_column: int = DEFAULT_MAX_COLUMN,
    max_row: int = DEFAULT_MAX_ROW,
    panel_size: int = DEFAULT_PANEL_SIZE,
    margin_width: int = DEFAULT_MARGIN_W,
    margin_height: int = DEFAULT_MARGIN_H,
    no_background: bool = DEFAULT_NO_BACKGROUND,
    no_frame: bool = DEFAULT_NO_FRAME,
) -> str:
    """Lay out already-selected trophies in order. Panels past max_row are dropped."""
    columns, rows = grid_shape(len(trophies), max_column, max_row)
    width, height = card_size(columns, rows, panel_size, margin_width, margin_height)

    panels: list[str] = []
    for i, trophy in enumerate(trophies[: columns * rows]):
        column = i % columns
        row = i // columns
        x = panel_size * column + margin_width * column
        y = panel_size * row + margin_height * row
        panels.append(
            render_trophy_svg(trophy, theme, x, y, panel_size, no_background, no_frame)
        )

    return (
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        f'fill="none" xmlns="http://www.w3.org/2000/svg">\n'
        + "".join(panels)
        + "</svg>\n"
    )


def render_card(
    stats: AggregateStatistics,
    theme: ThemeColors,
    names: Iterable[str] = (),
    ranks: Iterable[str] = (),
    max_column: int = DEFAULT_MAX_COLUMN,
    max_row: int = DEFAULT_MAX_ROW,
    panel_size: int = DEFAULT_PANEL_SIZE,
    margin_width: int = DEFAULT_MARGIN_W,
    margin_height: int = DEFAULT_MARGIN_H,
    no_background: bool = DEFAULT_NO_BACKGROUND,
    no_frame: bool = DEFAULT_NO_FRAME,
) -> str:
    """Build the catalog from stats, select and sort trophies, and render the card."""
    selected = sort_by_rank(select_trophies(build_catalog(stats), names, ranks))
    logger.debug("rendering card with %d trophies", len(selected))
    return render_trophies(
        selected, theme,
        max_column=max_column, max_row=max_row, panel_size=panel_size,
        margin_width=margin_width, margin_height=margin_height,
        no_background=no_background, no_frame=no_frame,
    )
