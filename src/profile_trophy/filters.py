"""Selecting and ordering resolved trophies for display.

Pure functions over lists of TrophyState; inputs are never mutated.
"""

from __future__ import annotations

from collections.abc import Iterable

from profile_trophy.errors import InvalidFilterError
from profile_trophy.ranks import RankLevel, parse_rank, rank_index
from profile_trophy.trophies import TrophyState

EXCLUDE_PREFIX = "-"


def _matches(trophy: TrophyState, wanted: set[str]) -> bool:
    return any(title.lower() in wanted for title in trophy.filter_titles)


def filter_by_names(trophies: list[TrophyState], names: Iterable[str]) -> list[TrophyState]:
    """Keep trophies whose filter titles match one of names, case-insensitively.

    An empty names list returns every non-hidden trophy. Hidden trophies are
    only returned when named explicitly.
    """
    wanted = {n.strip().lower() for n in names if n.strip()}
    if not wanted:
        return [t for t in trophies if not t.hidden]
    return [t for t in trophies if _matches(t, wanted)]


def filter_by_exclusions(trophies: list[TrophyState], names: Iterable[str]) -> list[TrophyState]:
    """Drop trophies named with a leading '-' (e.g. '-Stars'). Other names are ignored."""
    excluded = {
        n.strip()[len(EXCLUDE_PREFIX):].lower()
        for n in names
        if n.strip().startswith(EXCLUDE_PREFIX)
    }
    if not excluded:
        return list(trophies)
    return [t for t in trophies if not _matches(t, excluded)]


def _parse_ranks(values: Iterable[str]) -> set[RankLevel]:
    ranks: set[RankLevel] = set()
    for value in values:
        rank = parse_rank(value)
        if rank is None:
            raise InvalidFilterError(value)
        ranks.add(rank)
    return ranks


def filter_by_ranks(trophies: list[TrophyState], ranks: Iterable[str]) -> list[TrophyState]:
    """Keep trophies with a listed rank, or drop '-' prefixed ranks if any are given.

    Raises InvalidFilterError for an unrecognised rank name.
    """
    values = [r.strip() for r in ranks if r.strip()]
    if not values:
        return list(trophies)
    exclusions = [v[len(EXCLUDE_PREFIX):] for v in values if v.startswith(EXCLUDE_PREFIX)]
    if exclusions:
        excluded = _parse_ranks(exclusions)
        return [t for t in trophies if t.rank not in excluded]
    included = _parse_ranks(values)
    return [t for t in trophies if t.rank in included]


def sort_by_rank(trophies: list[TrophyState]) -> list[TrophyState]:
    """Strictest rank first; equal ranks keep catalog order."""
    return sorted(trophies, key=lambda t: rank_index(t.rank))


def select_trophies(
    trophies: list[TrophyState],
    names: Iterable[str] = (),
    ranks: Iterable[str] = (),
    include_hidden: bool = False,
) -> list[TrophyState]:
    """Apply name inclusion, name exclusion, then rank filtering.

    include_hidden starts from every trophy instead of the visible ones when
    no names are given to include.
    """
    names = list(names)
    included = [n for n in names if n.strip() and not n.strip().startswith(EXCLUDE_PREFIX)]
    if include_hidden and not included:
        selected = list(trophies)
    else:
        selected = filter_by_names(trophies, included)
    selected = filter_by_exclusions(selected, names)
    return filter_by_ranks(selected, ranks)
