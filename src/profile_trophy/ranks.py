"""Rank levels and rank resolution. Pure functions, no side effects."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger("profile_trophy.ranks")


class RankLevel(str, Enum):
    SECRET = "SECRET"
    SSS = "SSS"
    SS = "SS"
    S = "S"
    AAA = "AAA"
    AA = "AA"
    A = "A"
    B = "B"
    C = "C"
    UNKNOWN = "?"


# Strictest first. SECRET sits above SSS so hidden trophies sort to the front
# and never have a next rank.
RANK_ORDER: tuple[RankLevel, ...] = (
    RankLevel.SECRET,
    RankLevel.SSS,
    RankLevel.SS,
    RankLevel.S,
    RankLevel.AAA,
    RankLevel.AA,
    RankLevel.A,
    RankLevel.B,
    RankLevel.C,
    RankLevel.UNKNOWN,
)

MAX_RANK = RankLevel.SSS


@dataclass(frozen=True)
class RankCondition:
    rank: RankLevel
    message: str
    required_score: float  # may be negative: always-true floor


def rank_index(rank: RankLevel) -> int:
    """Position of rank in RANK_ORDER (0 = strictest)."""
    return RANK_ORDER.index(rank)


def stricter_rank(rank: RankLevel) -> RankLevel | None:
    """Return the level immediately stricter than rank, or None at the top."""
    index = rank_index(rank)
    if index == 0:
        return None
    return RANK_ORDER[index - 1]


def sort_conditions(conditions: list[RankCondition]) -> list[RankCondition]:
    """Stable sort, strictest rank first. Duplicate ranks keep declaration order."""
    return sorted(conditions, key=lambda c: rank_index(c.rank))


def resolve_rank(
    score: float, conditions: list[RankCondition]
) -> tuple[RankLevel, RankCondition | None]:
    """Return (achieved_rank, matched_condition) for score.

    The strictest condition whose required_score is met wins, regardless of
    the order conditions were supplied in. No match yields (UNKNOWN, None).
    """
    for condition in sort_conditions(conditions):
        if score >= condition.required_score:
            logger.debug(
                "score %s resolved to %s (required %s)",
                score, condition.rank.value, condition.required_score,
            )
            return condition.rank, condition
    logger.debug("score %s matched no rank condition", score)
    return RankLevel.UNKNOWN, None


def parse_rank(value: str) -> RankLevel | None:
    """Case-insensitive lookup by value ('SSS', 'a', '?', 'secret'). None if unknown."""
    normalized = value.strip().upper()
    for rank in RankLevel:
        if rank.value == normalized:
            return rank
    return None
