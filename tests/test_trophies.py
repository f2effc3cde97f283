"""Tests for the trophy catalog and trophy state."""

import pytest

from profile_trophy.errors import CatalogConfigurationError
from profile_trophy.ranks import RankCondition, RankLevel
from profile_trophy.stats import AggregateStatistics
from profile_trophy.trophies import (
    CATALOG,
    TrophyState,
    abridge_score,
    build_catalog,
    build_trophy,
    get_kind,
    validate_catalog,
    validate_ladder,
)

VISIBLE_TITLES = [
    "Stars", "Commits", "Followers", "Issues",
    "PullRequest", "Repositories", "Reviews", "Experience",
]
SECRET_TITLES = [
    "AllSuperRank", "MultiLanguage", "LongTimeUser", "AncientUser",
    "OGUser", "Joined2020", "Organizations",
]


def _by_title(trophies):
    return {t.title: t for t in trophies}


def _active_stats(**overrides):
    values = dict(
        total_commits=500, total_followers=20, total_issues=30,
        total_organizations=1, total_pull_requests=40, total_reviews=3,
        total_stargazers=1500, total_repositories=12, language_count=4,
        duration_year=6, duration_days=22, ancient_account=0,
        joined_2020=0, og_account=0,
    )
    values.update(overrides)
    return AggregateStatistics(**values)


class TestAbridgeScore:
    def test_zero(self):
        assert abridge_score(0) == "0pt"

    def test_fraction_below_one(self):
        assert abridge_score(0.5) == "0pt"

    def test_small_integer(self):
        assert abridge_score(42) == "42pt"

    def test_upper_plain_bound(self):
        assert abridge_score(999) == "999pt"

    def test_thousands(self):
        assert abridge_score(1000) == "1.0kpt"
        assert abridge_score(1234) == "1.2kpt"

    def test_negative_thousands(self):
        assert abridge_score(-1500) == "-1.5kpt"

    def test_negative_small(self):
        assert abridge_score(-5) == "-5pt"

    def test_integral_float(self):
        assert abridge_score(12.0) == "12pt"


class TestTrophyState:
    def test_defaults_when_unranked(self):
        state = TrophyState.resolve(0, [RankCondition(RankLevel.SSS, "Top", 1)])
        assert state.rank == RankLevel.UNKNOWN
        assert state.rank_condition is None
        assert state.top_message == "Unknown"
        assert state.bottom_message == "0pt"
        assert state.progress == 0.0

    def test_resolved_fields(self):
        ladder = [RankCondition(RankLevel.A, "Mid", 10), RankCondition(RankLevel.AA, "High", 20)]
        state = TrophyState.resolve(15, ladder)
        assert state.rank == RankLevel.A
        assert state.rank_condition == ladder[0]
        assert state.top_message == "Mid"
        assert state.bottom_message == "15pt"
        assert state.progress == 0.5

    def test_idempotent(self):
        ladder = [RankCondition(RankLevel.SSS, "Top", 5), RankCondition(RankLevel.SS, "Next", 2)]
        first = TrophyState.resolve(3, ladder)
        second = TrophyState.resolve(3, ladder)
        assert (first.rank, first.rank_condition, first.top_message) == (
            second.rank, second.rank_condition, second.top_message,
        )

    def test_keeps_own_copy_of_conditions(self):
        ladder = [RankCondition(RankLevel.SSS, "Top", 1)]
        state = TrophyState.resolve(1, ladder)
        ladder.append(RankCondition(RankLevel.SS, "Other", 0))
        assert len(state.rank_conditions) == 1

    def test_to_dict(self):
        state = build_trophy(get_kind("commits"), 7)
        data = state.to_dict()
        assert data == {
            "title": "Commits",
            "rank": "SSS",
            "top_message": "God Committer",
            "bottom_message": "7pt",
            "progress": 1.0,
            "hidden": False,
            "score": 7,
        }


class TestCatalogDefinitions:
    def test_catalog_order(self):
        assert [k.title for k in CATALOG] == VISIBLE_TITLES + SECRET_TITLES

    def test_keys_unique(self):
        keys = [k.key for k in CATALOG]
        assert len(keys) == len(set(keys))

    def test_visible_kinds_not_hidden(self):
        for kind in CATALOG[:8]:
            assert kind.hidden is False

    def test_secret_kinds_hidden_with_single_secret_gate(self):
        for kind in CATALOG[8:]:
            assert kind.hidden is True
            assert len(kind.rank_conditions) == 1
            assert kind.rank_conditions[0].rank == RankLevel.SECRET

    def test_graduated_kinds_define_max_rank(self):
        for kind in CATALOG[:8]:
            assert any(c.rank == RankLevel.SSS for c in kind.rank_conditions)

    def test_reviews_full_ladder(self):
        ranks = {c.rank for c in get_kind("reviews").rank_conditions}
        assert ranks == {
            RankLevel.SSS, RankLevel.SS, RankLevel.S, RankLevel.AAA,
            RankLevel.AA, RankLevel.A, RankLevel.B, RankLevel.C,
        }

    def test_filter_titles_include_title(self):
        for kind in CATALOG:
            assert kind.title in kind.filter_titles

    def test_get_kind_unknown(self):
        with pytest.raises(KeyError):
            get_kind("nope")

    def test_catalog_is_valid(self):
        validate_catalog()


class TestValidateLadder:
    def test_single_top_rank_is_valid(self):
        validate_ladder([RankCondition(RankLevel.SSS, "top", 1)])

    def test_contiguous_ladder_is_valid(self):
        validate_ladder([
            RankCondition(RankLevel.A, "a", 1),
            RankCondition(RankLevel.AA, "aa", 2),
            RankCondition(RankLevel.AAA, "aaa", 3),
        ])

    def test_gap_raises(self):
        with pytest.raises(CatalogConfigurationError) as exc_info:
            validate_ladder([
                RankCondition(RankLevel.SSS, "top", 100),
                RankCondition(RankLevel.S, "s", 10),
            ])
        assert "SS" in str(exc_info.value)

    def test_secret_exempt(self):
        validate_ladder([RankCondition(RankLevel.SECRET, "hidden", 1)])

    def test_validate_catalog_names_kind(self):
        from profile_trophy.trophies import TrophyKind

        broken = TrophyKind(
            key="broken",
            title="Broken",
            filter_titles=("Broken",),
            rank_conditions=(
                RankCondition(RankLevel.SSS, "top", 10),
                RankCondition(RankLevel.B, "low", 1),
            ),
            score_selector=lambda stats, resolved: 0,
        )
        with pytest.raises(CatalogConfigurationError, match="broken"):
            validate_catalog((broken,))


class TestBuildTrophy:
    def test_applies_metadata(self):
        state = build_trophy(get_kind("pull_requests"), 3)
        assert state.title == "PullRequest"
        assert state.filter_titles == ["PR", "PullRequest", "Pulls", "Puller"]
        assert state.hidden is False

    def test_bottom_label_overrides_score(self):
        state = build_trophy(get_kind("ancient_account"), 1)
        assert state.bottom_message == "Before 2010"
        assert state.rank == RankLevel.SECRET
        assert state.top_message == "Ancient User"

    def test_bottom_label_applies_when_unranked(self):
        state = build_trophy(get_kind("og_account"), 0)
        assert state.rank == RankLevel.UNKNOWN
        assert state.bottom_message == "Joined 2008"

    def test_no_label_keeps_abridged_score(self):
        state = build_trophy(get_kind("long_time_account"), 12)
        assert state.bottom_message == "12pt"
        assert state.top_message == "Village Elder"


class TestBuildCatalog:
    def test_one_state_per_kind(self):
        trophies = build_catalog(AggregateStatistics())
        assert [t.title for t in trophies] == VISIBLE_TITLES + SECRET_TITLES

    def test_empty_profile(self):
        trophies = _by_title(build_catalog(AggregateStatistics()))
        assert trophies["Stars"].rank == RankLevel.UNKNOWN
        assert trophies["Stars"].top_message == "Unknown"
        assert trophies["Stars"].bottom_message == "0pt"
        # Reviews has zero-threshold ranks, the strictest being SS
        assert trophies["Reviews"].rank == RankLevel.SS
        assert trophies["Reviews"].top_message == "Deep Reviewer"
        assert trophies["AllSuperRank"].rank == RankLevel.UNKNOWN

    def test_scores_come_from_matching_fields(self):
        stats = _active_stats()
        trophies = _by_title(build_catalog(stats))
        assert trophies["Stars"].score == stats.total_stargazers
        assert trophies["Commits"].score == stats.total_commits
        assert trophies["Followers"].score == stats.total_followers
        assert trophies["Issues"].score == stats.total_issues
        assert trophies["PullRequest"].score == stats.total_pull_requests
        assert trophies["Repositories"].score == stats.total_repositories
        assert trophies["Reviews"].score == stats.total_reviews
        assert trophies["Experience"].score == stats.duration_days
        assert trophies["MultiLanguage"].score == stats.language_count
        assert trophies["LongTimeUser"].score == stats.duration_year
        assert trophies["Organizations"].score == stats.total_organizations

    def test_active_profile_reaches_max_rank(self):
        trophies = _by_title(build_catalog(_active_stats()))
        for title in VISIBLE_TITLES:
            assert trophies[title].rank == RankLevel.SSS
            assert trophies[title].progress == 1.0
        assert trophies["Stars"].bottom_message == "1.5kpt"

    def test_all_super_rank_unlocked(self):
        trophies = _by_title(build_catalog(_active_stats()))
        assert trophies["AllSuperRank"].score == 1
        assert trophies["AllSuperRank"].rank == RankLevel.SECRET
        assert trophies["AllSuperRank"].top_message == "S Rank Hacker"
        assert trophies["AllSuperRank"].bottom_message == "All S Rank"

    def test_all_super_rank_counts_ss_reviews(self):
        trophies = _by_title(build_catalog(_active_stats(total_reviews=0)))
        assert trophies["Reviews"].rank == RankLevel.SS
        assert trophies["AllSuperRank"].rank == RankLevel.SECRET

    def test_all_super_rank_locked_by_one_missing(self):
        trophies = _by_title(build_catalog(_active_stats(total_issues=0)))
        assert trophies["AllSuperRank"].score == 0
        assert trophies["AllSuperRank"].rank == RankLevel.UNKNOWN

    def test_secret_thresholds(self):
        trophies = _by_title(build_catalog(_active_stats(
            language_count=10, total_organizations=3, duration_year=10,
            ancient_account=1, og_account=1, joined_2020=1,
        )))
        for title in SECRET_TITLES:
            assert trophies[title].rank == RankLevel.SECRET
            assert trophies[title].progress == 1.0

    def test_secret_thresholds_just_below(self):
        trophies = _by_title(build_catalog(_active_stats(
            language_count=9, total_organizations=2, duration_year=9,
        )))
        assert trophies["MultiLanguage"].rank == RankLevel.UNKNOWN
        assert trophies["Organizations"].rank == RankLevel.UNKNOWN
        assert trophies["LongTimeUser"].rank == RankLevel.UNKNOWN

    def test_every_progress_computable(self):
        for stats in (AggregateStatistics(), _active_stats(), _active_stats(total_reviews=8)):
            for trophy in build_catalog(stats):
                assert 0.0 <= trophy.progress <= 1.0

    def test_fresh_states_each_call(self):
        stats = _active_stats()
        first = build_catalog(stats)
        second = build_catalog(stats)
        assert first[0] is not second[0]
        assert [t.rank for t in first] == [t.rank for t in second]
