"""Ordering of players by a raw counter, a derived metric, or display name."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable
from enum import Enum

from domain import metrics
from domain.players import Player


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class MetricKey(str, Enum):
    """Sortable player fields."""

    NAME = "name"
    SKILL_RATING = "skill_rating"
    TOTAL_KILLS = "total_kills"
    TOTAL_DEATHS = "total_deaths"
    TOTAL_HEADSHOTS = "total_headshots"
    TOTAL_DAMAGE = "total_damage"
    TOTAL_ROUNDS_PLAYED = "total_rounds_played"
    TOTAL_ASSISTS = "total_assists"
    TOTAL_MATCHES = "total_matches"
    MATCHES_WON = "matches_won"
    TOTAL_MVPS = "total_mvps"
    TOTAL_5KS = "total_5ks"
    KD = "kd"
    HEADSHOT_PCT = "headshot_pct"
    ADR = "adr"
    WIN_RATE_PCT = "win_rate_pct"
    ASSISTS_PER_MATCH = "assists_per_match"
    MVP_RATE_PCT = "mvp_rate_pct"
    ACES_PER_MATCH = "aces_per_match"

    @property
    def is_numeric(self) -> bool:
        return self is not MetricKey.NAME

    @classmethod
    def parse(cls, value: str) -> MetricKey:
        """Resolve an enum value or one of the dashboard's short aliases."""
        text = value.strip()
        for candidate in (text, text.lower()):
            try:
                return cls(candidate)
            except ValueError:
                continue
        alias = _ALIASES.get(text) or _ALIASES.get(text.lower())
        if alias is not None:
            return alias
        accepted = ", ".join(key.value for key in cls)
        raise ValueError(f"Unknown metric key '{value}'. Expected one of: {accepted}")


_ALIASES: dict[str, MetricKey] = {
    "nickname": MetricKey.NAME,
    "skillRating": MetricKey.SKILL_RATING,
    "rating": MetricKey.SKILL_RATING,
    "kills": MetricKey.TOTAL_KILLS,
    "deaths": MetricKey.TOTAL_DEATHS,
    "headshots": MetricKey.TOTAL_HEADSHOTS,
    "damage": MetricKey.TOTAL_DAMAGE,
    "rounds": MetricKey.TOTAL_ROUNDS_PLAYED,
    "assists": MetricKey.TOTAL_ASSISTS,
    "matches": MetricKey.TOTAL_MATCHES,
    "wins": MetricKey.MATCHES_WON,
    "mvps": MetricKey.TOTAL_MVPS,
    "aces": MetricKey.TOTAL_5KS,
    "5ks": MetricKey.TOTAL_5KS,
    "hs": MetricKey.HEADSHOT_PCT,
    "winRate": MetricKey.WIN_RATE_PCT,
    "winrate": MetricKey.WIN_RATE_PCT,
    "assistsPerMatch": MetricKey.ASSISTS_PER_MATCH,
    "mvpRate": MetricKey.MVP_RATE_PCT,
}

_DERIVED: dict[MetricKey, Callable[[Player], float]] = {
    MetricKey.KD: metrics.kd,
    MetricKey.HEADSHOT_PCT: metrics.headshot_pct,
    MetricKey.ADR: metrics.adr,
    MetricKey.WIN_RATE_PCT: metrics.win_rate_pct,
    MetricKey.ASSISTS_PER_MATCH: metrics.assists_per_match,
    MetricKey.MVP_RATE_PCT: metrics.mvp_rate_pct,
    MetricKey.ACES_PER_MATCH: metrics.aces_per_match,
}


def metric_value(player: Player, key: MetricKey) -> float | str:
    """Return the exact value `rank` sorts on for this key."""
    if key is MetricKey.NAME:
        return player.display_name
    derived = _DERIVED.get(key)
    if derived is not None:
        return derived(player)
    return getattr(player, key.value)


def _name_sort_key(player: Player) -> tuple[str, str]:
    """Accent- and case-insensitive name order, accented spelling breaking ties."""
    folded = player.display_name.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return base, folded


def rank(
    players: Iterable[Player],
    metric_key: MetricKey,
    direction: SortDirection = SortDirection.DESC,
) -> list[Player]:
    """Sort players by one key.

    Equal keys keep their input order in both directions. Filtering (minimum
    matches and the like) is the caller's job.
    """
    if metric_key is MetricKey.NAME:
        return sorted(players, key=_name_sort_key, reverse=direction is SortDirection.DESC)

    def sort_key(player: Player) -> float:
        return float(metric_value(player, metric_key))

    return sorted(players, key=sort_key, reverse=direction is SortDirection.DESC)


__all__ = ["MetricKey", "SortDirection", "metric_value", "rank"]
