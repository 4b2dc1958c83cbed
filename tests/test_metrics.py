"""Unit tests for derived player metrics."""

from __future__ import annotations

import pytest

from domain.metrics import (
    aces_per_match,
    adr,
    assists_per_match,
    derive_metrics,
    headshot_pct,
    kd,
    mvp_rate_pct,
    win_rate_pct,
)
from domain.players import PLACEHOLDER_NAME, Player


def _player(**overrides) -> Player:
    return Player(id="p1", nickname="fallen", **overrides)


def test_kd_without_deaths_is_raw_kill_count() -> None:
    assert kd(_player(total_kills=10, total_deaths=0)) == pytest.approx(10.0)


def test_kd_divides_kills_by_deaths() -> None:
    assert kd(_player(total_kills=30, total_deaths=20)) == pytest.approx(1.5)


def test_kd_for_empty_record_is_zero() -> None:
    assert kd(_player()) == pytest.approx(0.0)


@pytest.mark.parametrize(
    ("kills", "headshots", "expected"),
    [(0, 0, 0.0), (10, 5, 50.0), (8, 8, 100.0), (3, 0, 0.0)],
)
def test_headshot_pct(kills: int, headshots: int, expected: float) -> None:
    value = headshot_pct(_player(total_kills=kills, total_headshots=headshots))
    assert value == pytest.approx(expected)
    assert 0.0 <= value <= 100.0


def test_adr_guards_zero_rounds() -> None:
    assert adr(_player(total_damage=500, total_rounds_played=0)) == pytest.approx(0.0)
    assert adr(_player(total_damage=1750, total_rounds_played=20)) == pytest.approx(87.5)


def test_per_match_rates_guard_zero_matches() -> None:
    player = _player(matches_won=0, total_assists=4, total_mvps=2, total_5ks=1)
    assert win_rate_pct(player) == pytest.approx(0.0)
    assert assists_per_match(player) == pytest.approx(0.0)
    assert mvp_rate_pct(player) == pytest.approx(0.0)
    assert aces_per_match(player) == pytest.approx(0.0)


def test_per_match_rates() -> None:
    player = _player(
        total_matches=8,
        matches_won=6,
        total_assists=20,
        total_mvps=4,
        total_5ks=2,
    )
    assert win_rate_pct(player) == pytest.approx(75.0)
    assert assists_per_match(player) == pytest.approx(2.5)
    assert mvp_rate_pct(player) == pytest.approx(50.0)
    assert aces_per_match(player) == pytest.approx(0.25)


def test_derive_metrics_is_unrounded_and_repeatable() -> None:
    player = _player(
        total_kills=10,
        total_deaths=3,
        total_headshots=1,
        total_damage=1000,
        total_rounds_played=3,
        total_matches=3,
        matches_won=1,
        total_assists=1,
    )
    first = derive_metrics(player)
    second = derive_metrics(player)

    assert first == second
    assert first.kd == pytest.approx(10 / 3)
    assert first.headshot_pct == pytest.approx(10.0)
    assert first.adr == pytest.approx(1000 / 3)
    assert first.win_rate_pct == pytest.approx(100 / 3)
    assert first.assists_per_match == pytest.approx(1 / 3)


def test_display_name_falls_back_to_first_name_then_placeholder() -> None:
    assert Player(id="1", nickname="coldzera", first_name="Marcelo").display_name == "coldzera"
    assert Player(id="2", nickname="", first_name="Gabriel").display_name == "Gabriel"
    assert Player(id="3").display_name == PLACEHOLDER_NAME
