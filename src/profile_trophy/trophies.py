"""Trophy catalog: kind definitions, trophy state, and catalog building."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from profile_trophy.errors import CatalogConfigurationError
from profile_trophy.progress import next_rank_progress
from profile_trophy.ranks import (
    RANK_ORDER,
    RankCondition,
    RankLevel,
    rank_index,
    resolve_rank,
)
from profile_trophy.stats import AggregateStatistics

logger = logging.getLogger("profile_trophy.trophies")

DEFAULT_TOP_MESSAGE = "Unknown"


def abridge_score(score: float) -> str:
    """Short score label: 0.4 -> '0pt', 42 -> '42pt', 1234 -> '1.2kpt'."""
    if abs(score) < 1:
        return "0pt"
    if abs(score) > 999:
        return f"{score / 1000:.1f}kpt"
    if isinstance(score, float) and score.is_integer():
        score = int(score)
    return f"{score}pt"


@dataclass
class TrophyState:
    score: float
    rank_conditions: list[RankCondition]
    rank: RankLevel = RankLevel.UNKNOWN
    rank_condition: RankCondition | None = None
    top_message: str = DEFAULT_TOP_MESSAGE
    bottom_message: str = ""
    title: str = ""
    filter_titles: list[str] = field(default_factory=list)
    hidden: bool = False

    @classmethod
    def resolve(cls, score: float, rank_conditions: list[RankCondition]) -> TrophyState:
        """Build a state and resolve its rank once."""
        state = cls(
            score=score,
            rank_conditions=list(rank_conditions),
            bottom_message=abridge_score(score),
        )
        rank, condition = resolve_rank(score, state.rank_conditions)
        if condition is not None:
            state.rank = rank
            state.rank_condition = condition
            state.top_message = condition.message
        return state

    @property
    def progress(self) -> float:
        """Unclamped progress toward the next rank."""
        return next_rank_progress(
            self.rank, self.rank_condition, self.score, self.rank_conditions
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "rank": self.rank.value,
            "top_message": self.top_message,
            "bottom_message": self.bottom_message,
            "progress": self.progress,
            "hidden": self.hidden,
            "score": self.score,
        }


ScoreSelector = Callable[[AggregateStatistics, list[TrophyState]], float]


@dataclass(frozen=True)
class TrophyKind:
    key: str
    title: str
    filter_titles: tuple[str, ...]
    rank_conditions: tuple[RankCondition, ...]
    score_selector: ScoreSelector
    hidden: bool = False
    bottom_label: str | None = None  # replaces the abridged score when set


def _stat(name: str) -> ScoreSelector:
    """Selector reading one AggregateStatistics field."""
    def select(stats: AggregateStatistics, resolved: list[TrophyState]) -> float:
        return getattr(stats, name)
    return select


def _all_super_rank(stats: AggregateStatistics, resolved: list[TrophyState]) -> float:
    """1 if every visible trophy built so far reached an S-family rank, else 0."""
    graduated = [t for t in resolved if not t.hidden]
    if graduated and all(t.rank.value.startswith("S") for t in graduated):
        return 1
    return 0


def _secret(message: str, required_score: float) -> tuple[RankCondition, ...]:
    return (RankCondition(RankLevel.SECRET, message, required_score),)


CATALOG: tuple[TrophyKind, ...] = (
    TrophyKind(
        key="stars",
        title="Stars",
        filter_titles=("Star", "Stars"),
        rank_conditions=(RankCondition(RankLevel.SSS, "Super Stargazer", 1),),
        score_selector=_stat("total_stargazers"),
    ),
    TrophyKind(
        key="commits",
        title="Commits",
        filter_titles=("Commit", "Commits"),
        rank_conditions=(RankCondition(RankLevel.SSS, "God Committer", 1),),
        score_selector=_stat("total_commits"),
    ),
    TrophyKind(
        key="followers",
        title="Followers",
        filter_titles=("Follower", "Followers"),
        rank_conditions=(RankCondition(RankLevel.SSS, "Super Celebrity", 1),),
        score_selector=_stat("total_followers"),
    ),
    TrophyKind(
        key="issues",
        title="Issues",
        filter_titles=("Issue", "Issues"),
        rank_conditions=(RankCondition(RankLevel.SSS, "God Issuer", 1),),
        score_selector=_stat("total_issues"),
    ),
    TrophyKind(
        key="pull_requests",
        title="PullRequest",
        filter_titles=("PR", "PullRequest", "Pulls", "Puller"),
        rank_conditions=(RankCondition(RankLevel.SSS, "God Puller", 1),),
        score_selector=_stat("total_pull_requests"),
    ),
    TrophyKind(
        key="repositories",
        title="Repositories",
        filter_titles=("Repo", "Repository", "Repositories"),
        rank_conditions=(RankCondition(RankLevel.SSS, "God Repo Creator", 1),),
        score_selector=_stat("total_repositories"),
    ),
    TrophyKind(
        key="reviews",
        title="Reviews",
        filter_titles=("Review", "Reviews"),
        rank_conditions=(
            RankCondition(RankLevel.SSS, "God Reviewer", 1),
            RankCondition(RankLevel.SS, "Deep Reviewer", 0),
            RankCondition(RankLevel.S, "Super Reviewer", 0),
            RankCondition(RankLevel.AAA, "Ultra Reviewer", 0),
            RankCondition(RankLevel.AA, "Hyper Reviewer", 0),
            RankCondition(RankLevel.A, "Active Reviewer", 8),
            RankCondition(RankLevel.B, "Intermediate Reviewer", -1),
            RankCondition(RankLevel.C, "New Reviewer", -1),
        ),
        score_selector=_stat("total_reviews"),
    ),
    TrophyKind(
        key="account_duration",
        title="Experience",
        filter_titles=("Experience", "Duration", "Since"),
        rank_conditions=(RankCondition(RankLevel.SSS, "Seasoned Veteran", 1),),
        score_selector=_stat("duration_days"),
    ),
    # Secret trophies: one SECRET gate each, hidden unless asked for by name.
    # all_super_rank must stay after every visible kind.
    TrophyKind(
        key="all_super_rank",
        title="AllSuperRank",
        filter_titles=("AllSuperRank",),
        rank_conditions=_secret("S Rank Hacker", 1),
        score_selector=_all_super_rank,
        hidden=True,
        bottom_label="All S Rank",
    ),
    TrophyKind(
        key="multiple_lang",
        title="MultiLanguage",
        filter_titles=("MultipleLang", "MultiLanguage"),
        rank_conditions=_secret("Rainbow Lang User", 10),
        score_selector=_stat("language_count"),
        hidden=True,
    ),
    TrophyKind(
        key="long_time_account",
        title="LongTimeUser",
        filter_titles=("LongTimeUser",),
        rank_conditions=_secret("Village Elder", 10),
        score_selector=_stat("duration_year"),
        hidden=True,
    ),
    TrophyKind(
        key="ancient_account",
        title="AncientUser",
        filter_titles=("AncientUser",),
        rank_conditions=_secret("Ancient User", 1),
        score_selector=_stat("ancient_account"),
        hidden=True,
        bottom_label="Before 2010",
    ),
    TrophyKind(
        key="og_account",
        title="OGUser",
        filter_titles=("OGUser",),
        rank_conditions=_secret("OG User", 1),
        score_selector=_stat("og_account"),
        hidden=True,
        bottom_label="Joined 2008",
    ),
    TrophyKind(
        key="joined_2020",
        title="Joined2020",
        filter_titles=("Joined2020",),
        rank_conditions=_secret("Everything started...", 1),
        score_selector=_stat("joined_2020"),
        hidden=True,
        bottom_label="Joined 2020",
    ),
    TrophyKind(
        key="multiple_organizations",
        title="Organizations",
        filter_titles=("Organizations", "Orgs", "Teams"),
        rank_conditions=_secret("Jack of all Trades", 3),
        score_selector=_stat("total_organizations"),
        hidden=True,
    ),
)


def get_kind(key: str) -> TrophyKind:
    """Look up a catalog kind by key. Raises KeyError if absent.

    Authoring and test helper; the build path iterates CATALOG directly.
    """
    for kind in CATALOG:
        if kind.key == key:
            return kind
    raise KeyError(key)


def build_trophy(kind: TrophyKind, score: float) -> TrophyState:
    """Resolve score against kind's ladder and apply the kind's fixed metadata."""
    state = TrophyState.resolve(score, list(kind.rank_conditions))
    state.title = kind.title
    state.filter_titles = list(kind.filter_titles)
    state.hidden = kind.hidden
    if kind.bottom_label is not None:
        state.bottom_message = kind.bottom_label
    return state


def build_catalog(stats: AggregateStatistics) -> list[TrophyState]:
    """One TrophyState per catalog kind, in CATALOG order."""
    trophies: list[TrophyState] = []
    for kind in CATALOG:
        score = kind.score_selector(stats, trophies)
        trophies.append(build_trophy(kind, score))
    logger.debug(
        "built %d trophies: %s",
        len(trophies),
        ", ".join(f"{t.title}={t.rank.value}" for t in trophies),
    )
    return trophies


def validate_ladder(conditions: list[RankCondition] | tuple[RankCondition, ...]) -> None:
    """Check a ladder's real ranks are contiguous in RANK_ORDER.

    Every rank from the loosest used up to the strictest used must be present,
    so any achievable rank below the top has a next threshold. SECRET
    conditions are exempt: they have no next rank.
    Raises CatalogConfigurationError on a gap.
    """
    real = {c.rank for c in conditions if c.rank not in (RankLevel.SECRET, RankLevel.UNKNOWN)}
    if not real:
        return
    strictest = min(rank_index(r) for r in real)
    loosest = max(rank_index(r) for r in real)
    missing = [r for r in RANK_ORDER[strictest:loosest + 1] if r not in real]
    if missing:
        raise CatalogConfigurationError(
            "Ladder is missing ranks: " + ", ".join(r.value for r in missing)
        )


def validate_catalog(catalog: tuple[TrophyKind, ...] = CATALOG) -> None:
    """Validate every kind's ladder. Raises CatalogConfigurationError naming the kind.

    Authoring and test helper: build_catalog does not call it. The shipped
    CATALOG is checked by the test suite, and a gap that slips through still
    fails at resolution time in next_rank_progress.
    """
    for kind in catalog:
        try:
            validate_ladder(kind.rank_conditions)
        except CatalogConfigurationError as exc:
            logger.error("trophy kind %s has a malformed ladder: %s", kind.key, exc)
            raise CatalogConfigurationError(f"{kind.key}: {exc}") from exc
