"""Unit tests for the ranking engine and leaderboard views."""

from __future__ import annotations

import pytest

from domain.leaderboards import (
    BEST_VIEWS,
    DEFAULT_VIEWS,
    PLAYER_TABLE_VIEW,
    WORST_VIEWS,
    LeaderboardView,
    build_leaderboard,
)
from domain.players import Player
from domain.ranking import MetricKey, SortDirection, metric_value, rank


def _ids(players: list[Player]) -> list[str]:
    return [player.id for player in players]


def _roster() -> list[Player]:
    return [
        Player(id="a", nickname="bravo", skill_rating=1200, total_kills=50, total_deaths=25, total_matches=5),
        Player(id="b", nickname="Alpha", skill_rating=900, total_kills=10, total_deaths=0, total_matches=1),
        Player(id="c", nickname="charlie", skill_rating=1500, total_kills=30, total_deaths=40, total_matches=3),
        Player(id="d", nickname="Delta", skill_rating=700, total_kills=0, total_deaths=5, total_matches=0),
    ]


@pytest.mark.parametrize("key", list(MetricKey))
def test_empty_input_yields_empty_sequence(key: MetricKey) -> None:
    assert rank([], key, SortDirection.ASC) == []
    assert rank([], key, SortDirection.DESC) == []


def test_rank_by_skill_rating_descending() -> None:
    assert _ids(rank(_roster(), MetricKey.SKILL_RATING, SortDirection.DESC)) == ["c", "a", "b", "d"]


def test_descending_reversed_equals_ascending_without_ties() -> None:
    players = _roster()
    descending = rank(players, MetricKey.SKILL_RATING, SortDirection.DESC)
    ascending = rank(players, MetricKey.SKILL_RATING, SortDirection.ASC)
    assert list(reversed(descending)) == ascending


def test_rank_uses_derived_kd_with_deathless_fallback() -> None:
    # kd: a=2.0, b=10 (no deaths), c=0.75, d=0.0
    assert _ids(rank(_roster(), MetricKey.KD, SortDirection.DESC)) == ["b", "a", "c", "d"]


def test_rank_by_name_is_case_insensitive() -> None:
    assert _ids(rank(_roster(), MetricKey.NAME, SortDirection.ASC)) == ["b", "a", "c", "d"]
    assert _ids(rank(_roster(), MetricKey.NAME, SortDirection.DESC)) == ["d", "c", "a", "b"]


def test_rank_by_name_ignores_accents() -> None:
    players = [
        Player(id="z", nickname="zeca"),
        Player(id="e", nickname="Élton"),
        Player(id="a", nickname="andre"),
        Player(id="e2", nickname="elton"),
    ]
    assert _ids(rank(players, MetricKey.NAME, SortDirection.ASC)) == ["a", "e2", "e", "z"]


@pytest.mark.parametrize("direction", list(SortDirection))
def test_rank_is_stable_for_equal_keys(direction: SortDirection) -> None:
    players = [
        Player(id="first", skill_rating=1000),
        Player(id="high", skill_rating=2000),
        Player(id="second", skill_rating=1000),
        Player(id="third", skill_rating=1000),
    ]
    ranked = _ids(rank(players, MetricKey.SKILL_RATING, direction))
    tied = [player_id for player_id in ranked if player_id != "high"]
    assert tied == ["first", "second", "third"]


def test_rank_does_not_mutate_input() -> None:
    players = _roster()
    snapshot = list(players)
    rank(players, MetricKey.KD, SortDirection.ASC)
    assert players == snapshot


def test_rank_accepts_any_iterable() -> None:
    ranked = rank(iter(_roster()), MetricKey.TOTAL_KILLS, SortDirection.DESC)
    assert _ids(ranked) == ["a", "c", "b", "d"]


def test_metric_value_matches_sort_value() -> None:
    player = _roster()[0]
    assert metric_value(player, MetricKey.KD) == pytest.approx(2.0)
    assert metric_value(player, MetricKey.SKILL_RATING) == 1200
    assert metric_value(player, MetricKey.NAME) == "bravo"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("kd", MetricKey.KD),
        ("KD", MetricKey.KD),
        ("hs", MetricKey.HEADSHOT_PCT),
        ("winRate", MetricKey.WIN_RATE_PCT),
        ("skillRating", MetricKey.SKILL_RATING),
        ("matches", MetricKey.TOTAL_MATCHES),
        ("nickname", MetricKey.NAME),
        (" adr ", MetricKey.ADR),
    ],
)
def test_metric_key_parse_accepts_aliases(text: str, expected: MetricKey) -> None:
    assert MetricKey.parse(text) is expected


def test_metric_key_parse_rejects_unknown_key() -> None:
    with pytest.raises(ValueError, match="Unknown metric key"):
        MetricKey.parse("elo")


def test_worst_view_excludes_players_below_min_matches() -> None:
    view = LeaderboardView(
        name="worst_kd",
        metric_key=MetricKey.KD,
        direction=SortDirection.ASC,
        min_matches=3,
    )
    entries = build_leaderboard(_roster(), view)
    assert [entry.player.id for entry in entries] == ["c", "a"]
    assert [entry.position for entry in entries] == [1, 2]
    assert entries[0].value == pytest.approx(0.75)


def test_min_matches_threshold_is_configurable() -> None:
    view = LeaderboardView(name="all_kd", metric_key=MetricKey.KD, min_matches=1)
    assert [entry.player.id for entry in build_leaderboard(_roster(), view)] == ["b", "a", "c"]


def test_limit_cuts_after_ranking() -> None:
    view = LeaderboardView(name="top1", metric_key=MetricKey.SKILL_RATING, limit=1)
    entries = build_leaderboard(_roster(), view)
    assert [entry.player.id for entry in entries] == ["c"]


def test_view_validation() -> None:
    with pytest.raises(ValueError, match="min_matches"):
        LeaderboardView(name="bad", metric_key=MetricKey.KD, min_matches=-1)
    with pytest.raises(ValueError, match="limit"):
        LeaderboardView(name="bad", metric_key=MetricKey.KD, limit=0)


def test_default_views_cover_best_worst_and_table() -> None:
    assert all(view.direction is SortDirection.DESC for view in BEST_VIEWS)
    assert all(view.direction is SortDirection.ASC for view in WORST_VIEWS)
    assert all(view.min_matches == 3 for view in WORST_VIEWS)
    assert PLAYER_TABLE_VIEW.min_matches == 1
    assert PLAYER_TABLE_VIEW.limit is None
    assert len(DEFAULT_VIEWS) == len(BEST_VIEWS) + len(WORST_VIEWS) + 1


def test_empty_leaderboard() -> None:
    assert build_leaderboard([], BEST_VIEWS[0]) == []
