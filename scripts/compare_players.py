#!/usr/bin/env python3
"""Compare two community players stat by stat."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import DEFAULT_DB_URL, create_db_engine, create_session_factory
from domain.comparison import StatComparison, Winner, compare_players
from repositories.players import fetch_players_by_ids

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Head-to-head player comparison.",
)


def _format(comparison: StatComparison, value: float) -> str:
    if comparison.stat.is_percent:
        return f"{value:.1f}%"
    if value.is_integer():
        return f"{int(value)}"
    return f"{value:.2f}"


@app.command()
def compare(
    left_id: Annotated[str, typer.Argument(help="First player id.")],
    right_id: Annotated[str, typer.Argument(help="Second player id.")],
    db_url: Annotated[
        str,
        typer.Option("--db-url", help="Database URL with the community users table."),
    ] = DEFAULT_DB_URL,
) -> None:
    """Print each compared stat with the better side marked."""
    if left_id == right_id:
        raise typer.BadParameter("Pick two different players")

    engine = create_db_engine(db_url)
    session_factory = create_session_factory(engine)
    with session_factory() as session:
        try:
            left, right = fetch_players_by_ids(session, [left_id, right_id])
        except LookupError as exc:
            raise typer.BadParameter(str(exc)) from exc

    typer.echo(f"{left.display_name:>14}  vs  {right.display_name:<14}")
    wins = {Winner.LEFT: 0, Winner.RIGHT: 0, Winner.TIE: 0}
    for comparison in compare_players(left, right):
        wins[comparison.winner] += 1
        left_mark = "<" if comparison.winner is Winner.LEFT else " "
        right_mark = ">" if comparison.winner is Winner.RIGHT else " "
        typer.echo(
            f"{_format(comparison, comparison.left_value):>12} {left_mark} "
            f"{comparison.stat.label:^14} {right_mark} "
            f"{_format(comparison, comparison.right_value):<12}"
        )
    typer.echo(
        f"left_wins={wins[Winner.LEFT]} right_wins={wins[Winner.RIGHT]} ties={wins[Winner.TIE]}"
    )


if __name__ == "__main__":
    app()
