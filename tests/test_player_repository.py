"""Tests for loading players from the users table."""

from __future__ import annotations

import pytest
from sqlalchemy import insert

from db import create_db_engine, create_session_factory
from repositories.players import (
    create_users_table,
    fetch_players,
    fetch_players_by_ids,
    users_table,
)


_ROW_KEYS = (
    "id",
    "nickname",
    "first_name",
    "total_kills",
    "total_deaths",
    "total_matches",
    "matches_won",
    "skill_rating",
    "is_admin",
)


def _row(**values) -> dict:
    return {key: values.get(key) for key in _ROW_KEYS}


@pytest.fixture()
def session_factory():
    engine = create_db_engine("sqlite://")
    create_users_table(engine)
    with engine.begin() as connection:
        connection.execute(
            insert(users_table()),
            [
                _row(
                    id="b-2",
                    nickname="tarik",
                    total_kills=120,
                    total_deaths=100,
                    total_matches=5,
                    matches_won=3,
                    skill_rating=1100,
                    is_admin=True,
                ),
                _row(id="a-1", first_name="Nicolai", total_matches=1, skill_rating=950),
                _row(id="c-3", nickname="newbie"),
            ],
        )
    return create_session_factory(engine)


def test_fetch_players_orders_by_id_and_fills_defaults(session_factory) -> None:
    with session_factory() as session:
        players = fetch_players(session)

    assert [player.id for player in players] == ["a-1", "b-2", "c-3"]
    assert players[0].display_name == "Nicolai"
    assert players[1].total_kills == 120
    assert players[1].is_admin is True
    assert players[2].total_kills == 0
    assert players[2].total_5ks == 0
    assert players[2].skill_rating == 1000
    assert players[2].is_admin is False


def test_fetch_players_applies_min_matches(session_factory) -> None:
    with session_factory() as session:
        players = fetch_players(session, min_matches=3)
    assert [player.id for player in players] == ["b-2"]


def test_fetch_players_rejects_negative_min_matches(session_factory) -> None:
    with session_factory() as session:
        with pytest.raises(ValueError, match="min_matches"):
            fetch_players(session, min_matches=-1)


def test_fetch_players_by_ids_preserves_requested_order(session_factory) -> None:
    with session_factory() as session:
        players = fetch_players_by_ids(session, ["c-3", "a-1"])
    assert [player.id for player in players] == ["c-3", "a-1"]


def test_fetch_players_by_ids_reports_missing(session_factory) -> None:
    with session_factory() as session:
        with pytest.raises(LookupError, match="ghost"):
            fetch_players_by_ids(session, ["a-1", "ghost"])
        assert fetch_players_by_ids(session, []) == []
