#!/usr/bin/env python3
"""Print best/worst leaderboards built from the community player table."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import DEFAULT_DB_URL, create_db_engine, create_session_factory
from domain.leaderboard_config import load_leaderboard_view_configs
from domain.leaderboards import DEFAULT_VIEWS, LeaderboardView, build_leaderboard
from domain.players import Player
from domain.ranking import MetricKey, SortDirection
from repositories.players import fetch_players

DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "leaderboards"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = typer.Typer(
    add_completion=False,
    help="Leaderboards over derived player metrics.",
)


def _format_value(value: float | str) -> str:
    if isinstance(value, str):
        return value
    if float(value).is_integer():
        return f"{int(value)}"
    return f"{value:.2f}"


def _print_view(players: list[Player], view: LeaderboardView) -> None:
    entries = build_leaderboard(players, view)
    typer.echo(
        f"== {view.title or view.name} "
        f"(metric={view.metric_key.value} direction={view.direction.value} "
        f"min_matches={view.min_matches})"
    )
    if not entries:
        typer.echo("   no eligible players")
        return
    for entry in entries:
        typer.echo(
            f"{entry.position:3d}. {entry.player.display_name:<20} "
            f"{_format_value(entry.value):>10} matches={entry.player.total_matches}"
        )


@app.command()
def show_leaderboard(
    view_name: Annotated[
        list[str] | None,
        typer.Option(
            "--view",
            help="View name from the config directory or built-in defaults. Repeatable.",
        ),
    ] = None,
    metric: Annotated[
        str | None,
        typer.Option("--metric", help="Ad-hoc view: metric key (e.g. kd, hs, adr, skill_rating)."),
    ] = None,
    direction: Annotated[
        SortDirection,
        typer.Option("--direction", help="Ad-hoc view: sort direction."),
    ] = SortDirection.DESC,
    min_matches: Annotated[
        int,
        typer.Option("--min-matches", help="Ad-hoc view: minimum matches to be listed."),
    ] = 1,
    top_n: Annotated[
        int,
        typer.Option("--top-n", help="Ad-hoc view: number of rows. Use 0 for all."),
    ] = 10,
    config_dir: Annotated[
        Path | None,
        typer.Option("--config-dir", help="Directory with leaderboard view TOML files."),
    ] = None,
    db_url: Annotated[
        str,
        typer.Option("--db-url", help="Database URL with the community users table."),
    ] = DEFAULT_DB_URL,
    verbose: Annotated[bool, typer.Option("--verbose", "-V", help="Enable debug logging.")] = False,
) -> None:
    """Print one ad-hoc view, the named views, or every configured view."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if min_matches < 0:
        raise typer.BadParameter("--min-matches must be >= 0")
    if top_n < 0:
        raise typer.BadParameter("--top-n must be >= 0")

    views: list[LeaderboardView]
    if metric is not None:
        try:
            metric_key = MetricKey.parse(metric)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--metric") from exc
        views = [
            LeaderboardView(
                name="ad_hoc",
                metric_key=metric_key,
                direction=direction,
                min_matches=min_matches,
                limit=top_n or None,
            )
        ]
    else:
        available = dict(DEFAULT_VIEWS)
        target_dir = config_dir or DEFAULT_CONFIG_DIR
        if config_dir is not None or target_dir.is_dir():
            for config in load_leaderboard_view_configs(target_dir):
                available[config.name] = config.view
        if view_name:
            missing = [name for name in view_name if name not in available]
            if missing:
                raise typer.BadParameter(
                    f"Unknown views: {missing}. Available: {sorted(available)}",
                    param_hint="--view",
                )
            views = [available[name] for name in view_name]
        else:
            views = list(available.values())

    engine = create_db_engine(db_url)
    session_factory = create_session_factory(engine)
    with session_factory() as session:
        players = fetch_players(session)

    typer.echo(f"players={len(players)} views={len(views)}")
    for view in views:
        _print_view(players, view)


if __name__ == "__main__":
    app()
