"""Player metric, ranking and team-balancing domain modules."""

from domain.leaderboards import LeaderboardEntry, LeaderboardView, build_leaderboard
from domain.metrics import DerivedMetrics, derive_metrics
from domain.players import Player
from domain.ranking import MetricKey, SortDirection, metric_value, rank
from domain.roster import (
    BalanceResult,
    BalanceWeight,
    PlayerNotInPoolError,
    RosterPartition,
    Team,
)

__all__ = [
    "BalanceResult",
    "BalanceWeight",
    "DerivedMetrics",
    "LeaderboardEntry",
    "LeaderboardView",
    "MetricKey",
    "Player",
    "PlayerNotInPoolError",
    "RosterPartition",
    "SortDirection",
    "Team",
    "build_leaderboard",
    "derive_metrics",
    "metric_value",
    "rank",
]
