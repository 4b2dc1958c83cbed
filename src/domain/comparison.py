"""Head-to-head stat comparison between two players."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from domain.players import Player
from domain.ranking import MetricKey, metric_value


class Winner(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    TIE = "tie"


@dataclass(frozen=True)
class ComparedStat:
    key: MetricKey
    label: str
    higher_is_better: bool = True
    is_percent: bool = False


@dataclass(frozen=True)
class StatComparison:
    stat: ComparedStat
    left_value: float
    right_value: float
    winner: Winner


DEFAULT_COMPARED_STATS: tuple[ComparedStat, ...] = (
    ComparedStat(MetricKey.SKILL_RATING, "Rating"),
    ComparedStat(MetricKey.KD, "K/D"),
    ComparedStat(MetricKey.TOTAL_KILLS, "Kills"),
    ComparedStat(MetricKey.TOTAL_DEATHS, "Deaths", higher_is_better=False),
    ComparedStat(MetricKey.TOTAL_ASSISTS, "Assists"),
    ComparedStat(MetricKey.HEADSHOT_PCT, "Headshot %", is_percent=True),
    ComparedStat(MetricKey.ADR, "ADR"),
    ComparedStat(MetricKey.TOTAL_DAMAGE, "Total damage"),
    ComparedStat(MetricKey.WIN_RATE_PCT, "Win rate", is_percent=True),
    ComparedStat(MetricKey.TOTAL_MATCHES, "Matches"),
    ComparedStat(MetricKey.TOTAL_MVPS, "MVPs"),
    ComparedStat(MetricKey.TOTAL_5KS, "Aces (5K)"),
)


def _winner(left: float, right: float, higher_is_better: bool) -> Winner:
    diff = left - right
    if diff == 0:
        return Winner.TIE
    if (diff > 0) == higher_is_better:
        return Winner.LEFT
    return Winner.RIGHT


def compare_players(
    left: Player,
    right: Player,
    stats: tuple[ComparedStat, ...] = DEFAULT_COMPARED_STATS,
) -> list[StatComparison]:
    """Compare two players stat by stat using the ranking engine's values."""
    comparisons: list[StatComparison] = []
    for stat in stats:
        if not stat.key.is_numeric:
            raise ValueError(f"Cannot compare non-numeric key '{stat.key.value}'")
        left_value = float(metric_value(left, stat.key))
        right_value = float(metric_value(right, stat.key))
        comparisons.append(
            StatComparison(
                stat=stat,
                left_value=left_value,
                right_value=right_value,
                winner=_winner(left_value, right_value, stat.higher_is_better),
            )
        )
    return comparisons


__all__ = [
    "ComparedStat",
    "DEFAULT_COMPARED_STATS",
    "StatComparison",
    "Winner",
    "compare_players",
]
