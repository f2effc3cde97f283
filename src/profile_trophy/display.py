"""Rich terminal display for profile-trophy."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()

# Rank value -> Rich color name
_RANK_COLORS: dict[str, str] = {
    "SECRET": "magenta",
    "SSS": "gold1",
    "SS": "gold1",
    "S": "gold1",
    "AAA": "grey70",
    "AA": "grey70",
    "A": "grey70",
    "B": "dark_orange3",
    "C": "dark_orange3",
    "?": "grey50",
}


def _rank_color(rank: str) -> str:
    return _RANK_COLORS.get(rank, "white")


def progress_bar(progress: float, width: int = 20) -> str:
    """Render a progress fraction as text: [████████░░░░░░░░░░░░]. Clamped to [0, 1]."""
    ratio = max(0.0, min(progress, 1.0))
    filled = int(ratio * width)
    empty = width - filled
    return "[" + "█" * filled + "░" * empty + "]"


def print_trophies(trophies: list[dict]) -> None:
    """Print resolved trophies (TrophyState.to_dict() rows) as a table."""
    if not trophies:
        console.print("[yellow]No trophies match the requested filters.[/]")
        return

    table = Table(title="Trophies", box=box.ROUNDED, show_lines=False)
    table.add_column("Trophy", style="bold")
    table.add_column("Rank", justify="center")
    table.add_column("Title")
    table.add_column("Score", justify="right")
    table.add_column("Next Rank")

    for trophy in trophies:
        rank = trophy["rank"]
        color = _rank_color(rank)
        progress = trophy["progress"]
        bar = progress_bar(progress, width=12)
        pct = int(max(0.0, min(progress, 1.0)) * 100)
        name = trophy["title"]
        if trophy.get("hidden"):
            name = f"{name} [dim](secret)[/]"
        table.add_row(
            name,
            f"[bold {color}]{rank}[/]",
            trophy["top_message"],
            trophy["bottom_message"],
            f"{bar} {pct}%",
        )

    console.print(table)


def print_render_result(result: dict) -> None:
    console.print(
        f"[green]Wrote {result['count']} trophies to[/] [bold]{escape(result['output'])}[/]"
    )


def print_themes(names: list[str], default: str) -> None:
    lines = [""]
    for name in names:
        marker = " [green](default)[/]" if name == default else ""
        lines.append(f"  {name}{marker}")
    lines.append("")
    console.print(Panel("\n".join(lines), title="[bold]Themes[/]", box=box.ROUNDED, width=40))


def print_config(options: dict) -> None:
    table = Table(title="Render defaults", box=box.ROUNDED)
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    for key in sorted(options):
        table.add_row(key, escape(str(options[key])))
    console.print(table)


def print_error(message: str) -> None:
    console.print(f"[red]{escape(message)}[/]")
