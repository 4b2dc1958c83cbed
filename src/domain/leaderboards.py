"""Leaderboard views expressed as configuration over the ranking engine."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from domain.players import Player
from domain.ranking import MetricKey, SortDirection, metric_value, rank

BEST_MIN_MATCHES = 3
WORST_MIN_MATCHES = 3
TABLE_MIN_MATCHES = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class LeaderboardView:
    """One (filter, metric, direction, limit) tuple."""

    name: str
    metric_key: MetricKey
    direction: SortDirection = SortDirection.DESC
    min_matches: int = 0
    limit: int | None = None
    title: str | None = None

    def __post_init__(self) -> None:
        if self.min_matches < 0:
            raise ValueError(f"view '{self.name}': min_matches must be >= 0")
        if self.limit is not None and self.limit <= 0:
            raise ValueError(f"view '{self.name}': limit must be > 0")


@dataclass(frozen=True)
class LeaderboardEntry:
    position: int
    player: Player
    value: float | str


def eligible_players(players: Iterable[Player], min_matches: int) -> list[Player]:
    return [player for player in players if player.total_matches >= min_matches]


def build_leaderboard(players: Iterable[Player], view: LeaderboardView) -> list[LeaderboardEntry]:
    """Filter, rank and cut one view. Positions start at 1."""
    ordered = rank(eligible_players(players, view.min_matches), view.metric_key, view.direction)
    if view.limit is not None:
        ordered = ordered[: view.limit]
    return [
        LeaderboardEntry(
            position=index,
            player=player,
            value=metric_value(player, view.metric_key),
        )
        for index, player in enumerate(ordered, start=1)
    ]


def _best(metric_key: MetricKey, title: str) -> LeaderboardView:
    return LeaderboardView(
        name=f"best_{metric_key.value}",
        metric_key=metric_key,
        direction=SortDirection.DESC,
        min_matches=BEST_MIN_MATCHES,
        limit=DEFAULT_LIMIT,
        title=title,
    )


def _worst(metric_key: MetricKey, title: str) -> LeaderboardView:
    return LeaderboardView(
        name=f"worst_{metric_key.value}",
        metric_key=metric_key,
        direction=SortDirection.ASC,
        min_matches=WORST_MIN_MATCHES,
        limit=DEFAULT_LIMIT,
        title=title,
    )


BEST_VIEWS: tuple[LeaderboardView, ...] = (
    _best(MetricKey.SKILL_RATING, "Top rating"),
    _best(MetricKey.KD, "Top K/D"),
    _best(MetricKey.HEADSHOT_PCT, "Top headshot %"),
    _best(MetricKey.WIN_RATE_PCT, "Top win rate"),
    _best(MetricKey.TOTAL_MVPS, "Most MVPs"),
    _best(MetricKey.ASSISTS_PER_MATCH, "Top assists per match"),
)

WORST_VIEWS: tuple[LeaderboardView, ...] = (
    _worst(MetricKey.SKILL_RATING, "Lowest rating"),
    _worst(MetricKey.KD, "Lowest K/D"),
    _worst(MetricKey.HEADSHOT_PCT, "Lowest headshot %"),
    _worst(MetricKey.WIN_RATE_PCT, "Lowest win rate"),
    _worst(MetricKey.ASSISTS_PER_MATCH, "Fewest assists per match"),
)

PLAYER_TABLE_VIEW = LeaderboardView(
    name="player_table",
    metric_key=MetricKey.SKILL_RATING,
    direction=SortDirection.DESC,
    min_matches=TABLE_MIN_MATCHES,
    title="All players",
)

DEFAULT_VIEWS: dict[str, LeaderboardView] = {
    view.name: view for view in (*BEST_VIEWS, *WORST_VIEWS, PLAYER_TABLE_VIEW)
}


__all__ = [
    "BEST_VIEWS",
    "DEFAULT_VIEWS",
    "LeaderboardEntry",
    "LeaderboardView",
    "PLAYER_TABLE_VIEW",
    "WORST_VIEWS",
    "build_leaderboard",
    "eligible_players",
]
