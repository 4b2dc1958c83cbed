"""Database repository helpers."""

from repositories.players import (
    create_users_table,
    fetch_players,
    fetch_players_by_ids,
    users_table,
)

__all__ = [
    "create_users_table",
    "fetch_players",
    "fetch_players_by_ids",
    "users_table",
]
