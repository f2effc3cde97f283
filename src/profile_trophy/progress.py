"""Progress toward the next rank. Pure functions, no side effects."""

from __future__ import annotations

import logging

from profile_trophy.errors import CatalogConfigurationError
from profile_trophy.ranks import MAX_RANK, RankCondition, RankLevel, stricter_rank

logger = logging.getLogger("profile_trophy.progress")


def next_rank_progress(
    rank: RankLevel,
    rank_condition: RankCondition | None,
    score: float,
    conditions: list[RankCondition],
) -> float:
    """Linear progress from the achieved rank's threshold to the next stricter one.

    Returns 0.0 when unranked and 1.0 at the ceiling (SSS, or SECRET which has
    nothing above it). The value is not clamped: callers drawing a bar clamp it.

    Raises CatalogConfigurationError if the ladder has no condition for the
    next stricter rank, or if the two thresholds are equal.
    """
    if rank == RankLevel.UNKNOWN:
        return 0.0

    next_rank = stricter_rank(rank)
    if next_rank is None or rank == MAX_RANK:
        return 1.0

    if rank_condition is None:
        raise CatalogConfigurationError(
            f"Rank {rank.value} has no matched condition; resolve the rank first"
        )

    next_condition = next((c for c in conditions if c.rank == next_rank), None)
    if next_condition is None:
        logger.error(
            "ladder has %s but no %s threshold", rank.value, next_rank.value
        )
        raise CatalogConfigurationError(
            f"No rank condition for {next_rank.value} above {rank.value}",
            "Trophy ladder is incomplete; this is a catalog bug.",
        )

    distance = next_condition.required_score - rank_condition.required_score
    if distance == 0:
        logger.error(
            "thresholds for %s and %s are both %s",
            rank.value, next_rank.value, rank_condition.required_score,
        )
        raise CatalogConfigurationError(
            f"Thresholds for {rank.value} and {next_rank.value} are equal "
            f"({rank_condition.required_score})",
            "Trophy ladder has equal adjacent thresholds; this is a catalog bug.",
        )

    return (score - rank_condition.required_score) / distance


def clamp_progress(progress: float) -> float:
    """Clamp a progress fraction to [0, 1] for drawing."""
    return max(0.0, min(progress, 1.0))
