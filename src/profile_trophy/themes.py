"""Color themes for trophy rendering."""

from __future__ import annotations

from dataclasses import dataclass

from profile_trophy.errors import UnknownThemeError

DEFAULT_THEME = "default"


@dataclass(frozen=True)
class ThemeColors:
    background: str
    title: str
    text: str
    next_rank_bar: str
    icon_circle: str
    s_rank: str
    a_rank: str
    b_rank: str
    secret_rank: str
    default_rank: str


THEMES: dict[str, ThemeColors] = {
    "default": ThemeColors(
        background="#FFF", title="#000", text="#666", next_rank_bar="#0366d6",
        icon_circle="#FFF", s_rank="#FAD200", a_rank="#B0B0B0",
        b_rank="#A18D66", secret_rank="#FF45F2", default_rank="#A18D66",
    ),
    "flat": ThemeColors(
        background="#FFF", title="#000", text="#666", next_rank_bar="#0366d6",
        icon_circle="#FFF", s_rank="#EEBF30", a_rank="#C4C4C4",
        b_rank="#B08A5A", secret_rank="#FF45F2", default_rank="#B08A5A",
    ),
    "onedark": ThemeColors(
        background="#282c34", title="#e5c07b", text="#abb2bf", next_rank_bar="#e5c07b",
        icon_circle="#e5c07b", s_rank="#e5c07b", a_rank="#98c379",
        b_rank="#61afef", secret_rank="#c678dd", default_rank="#5c6370",
    ),
    "gruvbox": ThemeColors(
        background="#282828", title="#fabd2f", text="#8ec07c", next_rank_bar="#fabd2f",
        icon_circle="#fe8019", s_rank="#fabd2f", a_rank="#8ec07c",
        b_rank="#83a598", secret_rank="#d3869b", default_rank="#928374",
    ),
    "dracula": ThemeColors(
        background="#282a36", title="#ff79c6", text="#f8f8f2", next_rank_bar="#ff79c6",
        icon_circle="#f8f8f2", s_rank="#f1fa8c", a_rank="#50fa7b",
        b_rank="#8be9fd", secret_rank="#bd93f9", default_rank="#6272a4",
    ),
    "monokai": ThemeColors(
        background="#272822", title="#f92672", text="#f8f8f2", next_rank_bar="#f92672",
        icon_circle="#f8f8f2", s_rank="#e6db74", a_rank="#a6e22e",
        b_rank="#66d9ef", secret_rank="#ae81ff", default_rank="#75715e",
    ),
    "nord": ThemeColors(
        background="#2e3440", title="#88c0d0", text="#d8dee9", next_rank_bar="#88c0d0",
        icon_circle="#eceff4", s_rank="#ebcb8b", a_rank="#a3be8c",
        b_rank="#81a1c1", secret_rank="#b48ead", default_rank="#4c566a",
    ),
}


def get_theme(name: str) -> ThemeColors:
    """Case-insensitive theme lookup. Raises UnknownThemeError if not found."""
    theme = THEMES.get(name.strip().lower())
    if theme is None:
        raise UnknownThemeError(name, sorted(THEMES))
    return theme
