"""Read-only access to player records in the community `users` table."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Boolean, Column, Integer, MetaData, String, Table, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from domain.players import Player

logger = logging.getLogger(__name__)

_metadata = MetaData()

_users = Table(
    "users",
    _metadata,
    Column("id", String, primary_key=True),
    Column("nickname", String),
    Column("first_name", String),
    Column("steam_id64", String),
    Column("profile_image_url", String),
    Column("is_admin", Boolean),
    Column("total_kills", Integer),
    Column("total_deaths", Integer),
    Column("total_headshots", Integer),
    Column("total_damage", Integer),
    Column("total_rounds_played", Integer),
    Column("total_assists", Integer),
    Column("total_matches", Integer),
    Column("matches_won", Integer),
    Column("total_mvps", Integer),
    Column("total_5ks", Integer),
    Column("skill_rating", Integer),
)

_COUNTER_COLUMNS = (
    "total_kills",
    "total_deaths",
    "total_headshots",
    "total_damage",
    "total_rounds_played",
    "total_assists",
    "total_matches",
    "matches_won",
    "total_mvps",
    "total_5ks",
)

DEFAULT_SKILL_RATING = 1000


def _row_to_player(row: Any) -> Player:
    counters = {column: int(getattr(row, column) or 0) for column in _COUNTER_COLUMNS}
    skill_rating = row.skill_rating if row.skill_rating is not None else DEFAULT_SKILL_RATING
    return Player(
        id=str(row.id),
        nickname=row.nickname,
        first_name=row.first_name,
        steam_id64=row.steam_id64,
        profile_image_url=row.profile_image_url,
        is_admin=bool(row.is_admin),
        skill_rating=int(skill_rating),
        **counters,
    )


def fetch_players(session: Session, *, min_matches: int = 0) -> list[Player]:
    """Load players ordered by id, optionally requiring a minimum match count."""
    if min_matches < 0:
        raise ValueError("min_matches must be >= 0")

    statement = select(_users).order_by(_users.c.id)
    if min_matches > 0:
        statement = statement.where(_users.c.total_matches >= min_matches)

    rows = session.execute(statement).all()
    players = [_row_to_player(row) for row in rows]
    logger.debug("Fetched %d players (min_matches=%d)", len(players), min_matches)
    return players


def fetch_players_by_ids(session: Session, player_ids: list[str]) -> list[Player]:
    """Load the given players, preserving the order of `player_ids`.

    Unknown ids raise `LookupError` listing every missing id.
    """
    if not player_ids:
        return []

    rows = session.execute(select(_users).where(_users.c.id.in_(player_ids))).all()
    by_id = {str(row.id): _row_to_player(row) for row in rows}
    missing = [player_id for player_id in player_ids if player_id not in by_id]
    if missing:
        raise LookupError(f"Unknown player ids: {missing}")
    return [by_id[player_id] for player_id in player_ids]


def create_users_table(engine: Engine) -> None:
    """Create the `users` table when missing (local fixtures and tests)."""
    _metadata.create_all(engine, tables=[_users])


def users_table() -> Table:
    return _users


__all__ = [
    "create_users_table",
    "fetch_players",
    "fetch_players_by_ids",
    "users_table",
]
