"""SVG trophy panel generation for profile-trophy.

Renders one resolved trophy as a square panel: title, rank emblem, two message
lines, and a next-rank progress bar. Pure functions, no side effects.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from profile_trophy.progress import clamp_progress
from profile_trophy.ranks import RankLevel
from profile_trophy.themes import ThemeColors
from profile_trophy.trophies import TrophyState

DEFAULT_PANEL_SIZE = 110
DEFAULT_NO_BACKGROUND = False
DEFAULT_NO_FRAME = False

_FRAME_COLOR = "#e1e4e8"
_FONT_FAMILY = "Segoe UI,Helvetica,Arial,sans-serif,Apple Color Emoji,Segoe UI Emoji"
_BAR_MAX_WIDTH = 80

_S_FAMILY = {RankLevel.SSS, RankLevel.SS, RankLevel.S}
_A_FAMILY = {RankLevel.AAA, RankLevel.AA, RankLevel.A}
_B_FAMILY = {RankLevel.B, RankLevel.C}


def rank_color(rank: RankLevel, theme: ThemeColors) -> str:
    """Emblem color for a rank family."""
    if rank == RankLevel.SECRET:
        return theme.secret_rank
    if rank in _S_FAMILY:
        return theme.s_rank
    if rank in _A_FAMILY:
        return theme.a_rank
    if rank in _B_FAMILY:
        return theme.b_rank
    return theme.default_rank


def _rank_emblem(rank: RankLevel, theme: ThemeColors) -> str:
    color = rank_color(rank, theme)
    label = "★" if rank == RankLevel.SECRET else rank.value
    font_size = 16 if len(label) <= 2 else 12
    return (
        f'<circle cx="55" cy="48" r="22" fill="{theme.icon_circle}" '
        f'stroke="{color}" stroke-width="4"/>\n'
        f'          <text x="55" y="{48 + font_size // 3}" text-anchor="middle" '
        f'font-family="{_FONT_FAMILY}" font-weight="bold" font-size="{font_size}" '
        f'fill="{color}">{escape(label)}</text>'
    )


def next_rank_bar(title: str, progress: float, color: str) -> str:
    """Animated progress bar toward the next rank. progress is clamped to [0, 1]."""
    width = _BAR_MAX_WIDTH * clamp_progress(progress)
    bar_id = f"{title}-rank-progress"
    return f'''<style>
          @keyframes {title}RankAnimation {{
            from {{ width: 0px; }}
            to {{ width: {width:g}px; }}
          }}
          #{bar_id} {{ animation: {title}RankAnimation 1s forwards ease-in-out; }}
          </style>
          <rect x="15" y="101" rx="1" width="{_BAR_MAX_WIDTH}" height="3.2" opacity="0.3" fill="{color}"/>
          <rect id="{bar_id}" x="15" y="101" rx="1" width="{width:g}" height="3.2" opacity="1" fill="{color}"/>'''


def render_trophy_svg(
    trophy: TrophyState,
    theme: ThemeColors,
    x: int = 0,
    y: int = 0,
    panel_size: int = DEFAULT_PANEL_SIZE,
    no_background: bool = DEFAULT_NO_BACKGROUND,
    no_frame: bool = DEFAULT_NO_FRAME,
) -> str:
    """Render one trophy panel as a nested <svg> placed at (x, y)."""
    bar = next_rank_bar(escape(trophy.title), trophy.progress, theme.next_rank_bar)
    return f'''<svg x="{x}" y="{y}" width="{panel_size}" height="{panel_size}" viewBox="0 0 {panel_size} {panel_size}" fill="none" xmlns="http://www.w3.org/2000/svg">
          <rect x="0.5" y="0.5" rx="4.5" width="{panel_size - 1}" height="{panel_size - 1}" stroke="{_FRAME_COLOR}" fill="{theme.background}" stroke-opacity="{0 if no_frame else 1}" fill-opacity="{0 if no_background else 1}"/>
          {_rank_emblem(trophy.rank, theme)}
          <text x="50%" y="18" text-anchor="middle" font-family="{_FONT_FAMILY}" font-weight="bold" font-size="13" fill="{theme.title}">{escape(trophy.title)}</text>
          <text x="50%" y="85" text-anchor="middle" font-family="{_FONT_FAMILY}" font-weight="bold" font-size="10.5" fill="{theme.text}">{escape(trophy.top_message)}</text>
          <text x="50%" y="97" text-anchor="middle" font-family="{_FONT_FAMILY}" font-weight="bold" font-size="10" fill="{theme.text}">{escape(trophy.bottom_message)}</text>
          {bar}
        </svg>
'''
