"""Derived per-player rates computed from cumulative counters.

Every function here is total: a zero denominator falls back to a defined value
instead of raising. Values are left unrounded; callers that sort or compare must
use these exact floats.
"""

from __future__ import annotations

from dataclasses import dataclass

from domain.players import Player


@dataclass(frozen=True)
class DerivedMetrics:
    kd: float
    headshot_pct: float
    adr: float
    win_rate_pct: float
    assists_per_match: float
    mvp_rate_pct: float
    aces_per_match: float


def kd(player: Player) -> float:
    """Kills per death; a deathless player scores their raw kill count."""
    if player.total_deaths > 0:
        return player.total_kills / player.total_deaths
    return float(player.total_kills)


def headshot_pct(player: Player) -> float:
    if player.total_kills > 0:
        return (player.total_headshots / player.total_kills) * 100.0
    return 0.0


def adr(player: Player) -> float:
    """Average damage per round played."""
    if player.total_rounds_played > 0:
        return player.total_damage / player.total_rounds_played
    return 0.0


def win_rate_pct(player: Player) -> float:
    if player.total_matches > 0:
        return (player.matches_won / player.total_matches) * 100.0
    return 0.0


def assists_per_match(player: Player) -> float:
    if player.total_matches > 0:
        return player.total_assists / player.total_matches
    return 0.0


def mvp_rate_pct(player: Player) -> float:
    if player.total_matches > 0:
        return (player.total_mvps / player.total_matches) * 100.0
    return 0.0


def aces_per_match(player: Player) -> float:
    if player.total_matches > 0:
        return player.total_5ks / player.total_matches
    return 0.0


def derive_metrics(player: Player) -> DerivedMetrics:
    """Compute every derived metric for one player."""
    return DerivedMetrics(
        kd=kd(player),
        headshot_pct=headshot_pct(player),
        adr=adr(player),
        win_rate_pct=win_rate_pct(player),
        assists_per_match=assists_per_match(player),
        mvp_rate_pct=mvp_rate_pct(player),
        aces_per_match=aces_per_match(player),
    )


__all__ = [
    "DerivedMetrics",
    "aces_per_match",
    "adr",
    "assists_per_match",
    "derive_metrics",
    "headshot_pct",
    "kd",
    "mvp_rate_pct",
    "win_rate_pct",
]
