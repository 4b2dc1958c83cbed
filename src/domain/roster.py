"""Two-team roster partitioning for community mixes.

A `RosterPartition` tracks one pool of players split into `available`, team A
and team B. Every tracked player sits in exactly one of the three lists. The
transition methods are the only mutators and they validate their input before
touching any list, so a rejected call leaves the partition unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from domain import metrics
from domain.players import Player

logger = logging.getLogger(__name__)

DEFAULT_GAP_THRESHOLD = 200

WeightFn = Callable[[Player], float]


class Team(str, Enum):
    A = "a"
    B = "b"


class RosterState(str, Enum):
    """Descriptive label derived from the partition contents."""

    IDLE = "idle"
    STAGED = "staged"
    ASSIGNED = "assigned"


class PlayerNotInPoolError(LookupError):
    """Raised when an operation names a player the partition does not track."""

    def __init__(self, player_id: str) -> None:
        super().__init__(f"player_id={player_id!r} is not part of the tracked pool")
        self.player_id = player_id


def skill_rating_weight(player: Player) -> float:
    return float(player.skill_rating)


class BalanceWeight(str, Enum):
    """Per-player weight used by the greedy balancer."""

    SKILL_RATING = "skill_rating"
    KD = "kd"

    @property
    def fn(self) -> WeightFn:
        if self is BalanceWeight.KD:
            return metrics.kd
        return skill_rating_weight


@dataclass(frozen=True)
class BalanceResult:
    team_a: tuple[Player, ...]
    team_b: tuple[Player, ...]
    weight_a: float
    weight_b: float

    @property
    def weight_gap(self) -> float:
        return abs(self.weight_a - self.weight_b)


def greedy_split(
    pool: Sequence[Player],
    weight: WeightFn = skill_rating_weight,
) -> tuple[list[Player], list[Player], float, float]:
    """Assign players, heaviest first, to whichever team has the lower running sum.

    Ties on weight keep pool order; ties on the running sums go to team A.
    """
    team_a: list[Player] = []
    team_b: list[Player] = []
    sum_a = 0.0
    sum_b = 0.0
    for player in sorted(pool, key=weight, reverse=True):
        player_weight = weight(player)
        if sum_a <= sum_b:
            team_a.append(player)
            sum_a += player_weight
        else:
            team_b.append(player)
            sum_b += player_weight
    return team_a, team_b, sum_a, sum_b


def _is_separated(player: Player, separated_ids: frozenset[str]) -> bool:
    if player.id in separated_ids:
        return True
    return player.steam_id64 is not None and player.steam_id64 in separated_ids


def enforce_separation(
    team_a: list[Player],
    team_b: list[Player],
    separated_ids: frozenset[str],
) -> tuple[list[Player], list[Player]]:
    """Break up one pair of separated players sharing a team.

    The second separated player of the crowded team swaps with the first
    non-separated player of the other team. Team sizes never change. When the
    other team has nobody to swap with, the other team is checked in turn.
    """
    if not separated_ids:
        return team_a, team_b

    for crowded, other, crowded_is_a in ((team_a, team_b, True), (team_b, team_a, False)):
        crowded_separated = [p for p in crowded if _is_separated(p, separated_ids)]
        if len(crowded_separated) < 2:
            continue

        mover = crowded_separated[1]
        candidates = [p for p in other if not _is_separated(p, separated_ids)]
        if not candidates:
            logger.warning(
                "Cannot separate player_id=%s: other team has no swappable player",
                mover.id,
            )
            continue

        swap = candidates[0]
        new_crowded = [p for p in crowded if p.id != mover.id] + [swap]
        new_other = [p for p in other if p.id != swap.id] + [mover]
        logger.debug("Separation swap: player_id=%s <-> player_id=%s", mover.id, swap.id)
        if crowded_is_a:
            return new_crowded, new_other
        return new_other, new_crowded

    return team_a, team_b


class RosterPartition:
    """Mutable available/team A/team B split for one balancing session."""

    def __init__(self, *, separated_player_ids: Iterable[str] = ()) -> None:
        self.separated_player_ids = frozenset(separated_player_ids)
        self._pool: dict[str, Player] = {}
        self._pool_order: list[Player] = []
        self._available: list[Player] = []
        self._teams: dict[Team, list[Player]] = {Team.A: [], Team.B: []}
        self._captains: dict[Team, str | None] = {Team.A: None, Team.B: None}

    @property
    def available(self) -> tuple[Player, ...]:
        return tuple(self._available)

    @property
    def team_a(self) -> tuple[Player, ...]:
        return tuple(self._teams[Team.A])

    @property
    def team_b(self) -> tuple[Player, ...]:
        return tuple(self._teams[Team.B])

    @property
    def pool(self) -> tuple[Player, ...]:
        return tuple(self._pool_order)

    @property
    def state(self) -> RosterState:
        if not self._pool:
            return RosterState.IDLE
        if self._teams[Team.A] or self._teams[Team.B]:
            return RosterState.ASSIGNED
        return RosterState.STAGED

    def members(self, team: Team) -> tuple[Player, ...]:
        return tuple(self._teams[Team(team)])

    def captain(self, team: Team) -> Player | None:
        captain_id = self._captains[Team(team)]
        return None if captain_id is None else self._pool[captain_id]

    def team_of(self, player: Player | str) -> Team | None:
        """Return the player's team, or None while the player is available."""
        tracked = self._resolve(player)
        for team, members in self._teams.items():
            if any(member.id == tracked.id for member in members):
                return team
        return None

    def reset(self, pool: Iterable[Player]) -> None:
        """Start a new session: everyone available, both teams empty."""
        players = list(pool)
        by_id: dict[str, Player] = {}
        for player in players:
            if player.id in by_id:
                raise ValueError(f"Duplicate player_id={player.id!r} in pool")
            by_id[player.id] = player

        self._pool = by_id
        self._pool_order = players
        self._available = list(players)
        self._teams = {Team.A: [], Team.B: []}
        self._captains = {Team.A: None, Team.B: None}
        logger.debug("Roster reset with %d players", len(players))

    def move_to_team(self, player: Player | str, target: Team) -> None:
        """Move a tracked player onto `target`, wherever it currently is."""
        tracked = self._resolve(player)
        target = Team(target)
        if self.team_of(tracked) is target:
            return

        self._detach(tracked)
        self._teams[target].append(tracked)
        logger.debug("Moved player_id=%s to team=%s", tracked.id, target.value)

        if self._has_separation_conflict(tracked, target):
            team_a, team_b = enforce_separation(
                self._teams[Team.A],
                self._teams[Team.B],
                self.separated_player_ids,
            )
            self._teams = {Team.A: team_a, Team.B: team_b}
            self._drop_stale_captains()

    def return_to_available(self, player: Player | str) -> None:
        """Take a tracked player off its team and back into `available`."""
        tracked = self._resolve(player)
        if self.team_of(tracked) is None:
            return

        self._detach(tracked)
        self._available.append(tracked)
        logger.debug("Returned player_id=%s to available", tracked.id)

    def set_captain(self, player: Player | str, team: Team) -> None:
        tracked = self._resolve(player)
        team = Team(team)
        if self.team_of(tracked) is not team:
            raise ValueError(f"player_id={tracked.id!r} is not on team {team.value}")
        self._captains[team] = tracked.id

    def auto_balance(
        self,
        pool: Iterable[Player] | None = None,
        *,
        weight: WeightFn | BalanceWeight = BalanceWeight.SKILL_RATING,
    ) -> BalanceResult:
        """Greedily split the pool into two teams and empty `available`.

        Passing `pool` resets the partition to it first; otherwise the pool from
        the last `reset` is balanced from scratch, discarding manual moves.
        """
        if pool is not None:
            self.reset(pool)

        weight_fn = weight.fn if isinstance(weight, BalanceWeight) else weight
        team_a, team_b, _, _ = greedy_split(self._pool_order, weight_fn)
        team_a, team_b = enforce_separation(team_a, team_b, self.separated_player_ids)

        self._available = []
        self._teams = {Team.A: team_a, Team.B: team_b}
        self._captains = {
            Team.A: team_a[0].id if team_a else None,
            Team.B: team_b[0].id if team_b else None,
        }

        result = BalanceResult(
            team_a=tuple(team_a),
            team_b=tuple(team_b),
            weight_a=sum(weight_fn(player) for player in team_a),
            weight_b=sum(weight_fn(player) for player in team_b),
        )
        logger.debug(
            "Auto-balanced %d players: team_a=%d team_b=%d weight_gap=%.2f",
            len(self._pool_order),
            len(team_a),
            len(team_b),
            result.weight_gap,
        )
        return result

    def team_rating(self, team: Team) -> int:
        return sum(player.skill_rating for player in self._teams[Team(team)])

    def team_rating_gap(self) -> int:
        return abs(self.team_rating(Team.A) - self.team_rating(Team.B))

    def team_average_rating(self, team: Team) -> float:
        members = self._teams[Team(team)]
        if not members:
            return 0.0
        return self.team_rating(team) / len(members)

    def team_average_kd(self, team: Team) -> float:
        members = self._teams[Team(team)]
        if not members:
            return 0.0
        return sum(metrics.kd(player) for player in members) / len(members)

    def is_unbalanced(self, threshold: float = DEFAULT_GAP_THRESHOLD) -> bool:
        return self.team_rating_gap() > threshold

    def _resolve(self, player: Player | str) -> Player:
        player_id = player if isinstance(player, str) else player.id
        tracked = self._pool.get(player_id)
        if tracked is None:
            logger.warning("Rejected roster operation for untracked player_id=%s", player_id)
            raise PlayerNotInPoolError(player_id)
        return tracked

    def _has_separation_conflict(self, player: Player, team: Team) -> bool:
        if not _is_separated(player, self.separated_player_ids):
            return False
        return any(
            member.id != player.id and _is_separated(member, self.separated_player_ids)
            for member in self._teams[team]
        )

    def _detach(self, player: Player) -> None:
        self._available = [p for p in self._available if p.id != player.id]
        for team in Team:
            self._teams[team] = [p for p in self._teams[team] if p.id != player.id]
        self._drop_stale_captains()

    def _drop_stale_captains(self) -> None:
        for team in Team:
            captain_id = self._captains[team]
            if captain_id is not None and all(p.id != captain_id for p in self._teams[team]):
                self._captains[team] = None


__all__ = [
    "BalanceResult",
    "BalanceWeight",
    "DEFAULT_GAP_THRESHOLD",
    "PlayerNotInPoolError",
    "RosterPartition",
    "RosterState",
    "Team",
    "enforce_separation",
    "greedy_split",
    "skill_rating_weight",
]
