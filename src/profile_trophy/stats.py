"""Aggregate profile statistics consumed by the trophy catalog."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from profile_trophy.errors import StatisticsError

# camelCase spellings accepted from JSON produced by other tools
_CAMEL_ALIASES: dict[str, str] = {
    "totalCommits": "total_commits",
    "totalFollowers": "total_followers",
    "totalIssues": "total_issues",
    "totalOrganizations": "total_organizations",
    "totalPullRequests": "total_pull_requests",
    "totalReviews": "total_reviews",
    "totalStargazers": "total_stargazers",
    "totalRepositories": "total_repositories",
    "languageCount": "language_count",
    "durationYear": "duration_year",
    "durationDays": "duration_days",
    "ancientAccount": "ancient_account",
    "joined2020": "joined_2020",
    "ogAccount": "og_account",
}


@dataclass(frozen=True)
class AggregateStatistics:
    total_commits: int = 0
    total_followers: int = 0
    total_issues: int = 0
    total_organizations: int = 0
    total_pull_requests: int = 0
    total_reviews: int = 0
    total_stargazers: int = 0
    total_repositories: int = 0
    language_count: int = 0
    duration_year: int = 0
    duration_days: int = 0
    ancient_account: int = 0  # 0 or 1
    joined_2020: int = 0  # 0 or 1
    og_account: int = 0  # 0 or 1

    @classmethod
    def from_dict(cls, data: dict) -> AggregateStatistics:
        """Build from a dict with snake_case or camelCase keys.

        Missing keys default to 0; unknown keys are ignored.
        Raises StatisticsError if a value is not an integer.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, int] = {}
        for key, raw in data.items():
            name = _CAMEL_ALIASES.get(key, key)
            if name not in known:
                continue
            if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
                raise StatisticsError(
                    f"Statistic '{key}' must be an integer, got {raw!r}"
                )
            try:
                value = int(raw)
            except (ValueError, OverflowError):
                raise StatisticsError(
                    f"Statistic '{key}' must be an integer, got {raw!r}"
                ) from None
            if isinstance(raw, float) and raw != value:
                raise StatisticsError(
                    f"Statistic '{key}' must be an integer, got {raw!r}"
                )
            values[name] = value
        return cls(**values)

    def to_dict(self) -> dict:
        return asdict(self)


def load_statistics(path: Path) -> AggregateStatistics:
    """Read statistics from a JSON file. Raises StatisticsError on any failure."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise StatisticsError(
            f"Statistics file not found: {path}",
        ) from None
    except (json.JSONDecodeError, OSError) as exc:
        raise StatisticsError(
            f"Could not read statistics from {path}: {exc}",
        ) from exc
    if not isinstance(raw, dict):
        raise StatisticsError(f"Statistics file {path} must contain a JSON object")
    return AggregateStatistics.from_dict(raw)
