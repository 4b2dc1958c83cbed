#!/usr/bin/env python3
"""Split selected community players into two balanced teams."""

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
from domain import metrics
from domain.balancing_config import BalancingConfig, load_balancing_configs
from domain.roster import BalanceWeight, RosterPartition, Team
from repositories.players import fetch_players, fetch_players_by_ids

DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "balancing"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Greedy two-team balancing for community mixes.",
)


def _select_config(config_dir: Path, config_name: str | None) -> BalancingConfig:
    configs = load_balancing_configs(config_dir)
    if config_name is None:
        return configs[0]
    for config in configs:
        if config.name == config_name or config.file_path.name == config_name:
            return config
    raise typer.BadParameter(
        f"No balancing config named '{config_name}' found in {config_dir}",
        param_hint="--config-name",
    )


def _print_team(partition: RosterPartition, team: Team) -> None:
    members = partition.members(team)
    captain = partition.captain(team)
    typer.echo(
        f"team_{team.value}: players={len(members)} "
        f"rating={partition.team_rating(team)} "
        f"avg_rating={partition.team_average_rating(team):.1f} "
        f"avg_kd={partition.team_average_kd(team):.2f}"
    )
    for player in members:
        marker = "*" if captain is not None and captain.id == player.id else " "
        typer.echo(
            f"  {marker} {player.display_name:<20} "
            f"rating={player.skill_rating:5d} kd={metrics.kd(player):5.2f}"
        )


@app.command()
def balance_teams(
    player_ids: Annotated[
        list[str] | None,
        typer.Option("--player-id", help="Player id to include. Repeatable."),
    ] = None,
    all_players: Annotated[
        bool,
        typer.Option("--all", help="Include every player with at least --min-matches matches."),
    ] = False,
    min_matches: Annotated[
        int,
        typer.Option("--min-matches", help="Minimum matches when using --all."),
    ] = 0,
    weight: Annotated[
        BalanceWeight | None,
        typer.Option("--weight", help="Override the configured balancing weight."),
    ] = None,
    config_dir: Annotated[
        Path,
        typer.Option("--config-dir", help="Directory with balancing TOML files."),
    ] = DEFAULT_CONFIG_DIR,
    config_name: Annotated[
        str | None,
        typer.Option("--config-name", help="Balancing config name or file name."),
    ] = None,
    db_url: Annotated[
        str,
        typer.Option("--db-url", help="Database URL with the community users table."),
    ] = DEFAULT_DB_URL,
    verbose: Annotated[bool, typer.Option("--verbose", "-V", help="Enable debug logging.")] = False,
) -> None:
    """Load the pool, auto-balance it and print both teams with their rating gap."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if not player_ids and not all_players:
        raise typer.BadParameter("Pass --player-id at least once or use --all")
    if min_matches < 0:
        raise typer.BadParameter("--min-matches must be >= 0")

    config = _select_config(config_dir, config_name)
    effective_weight = weight or config.weight

    engine = create_db_engine(db_url)
    session_factory = create_session_factory(engine)
    with session_factory() as session:
        if all_players:
            pool = fetch_players(session, min_matches=min_matches)
        else:
            try:
                pool = fetch_players_by_ids(session, list(player_ids or []))
            except LookupError as exc:
                raise typer.BadParameter(str(exc), param_hint="--player-id") from exc

    partition = RosterPartition(separated_player_ids=config.separated_player_ids)
    result = partition.auto_balance(pool, weight=effective_weight)

    typer.echo(
        f"config={config.name} weight={effective_weight.value} pool={len(pool)} "
        f"weight_gap={result.weight_gap:.2f}"
    )
    _print_team(partition, Team.A)
    _print_team(partition, Team.B)

    gap = partition.team_rating_gap()
    typer.echo(f"rating_gap={gap}")
    if partition.is_unbalanced(config.gap_threshold):
        logger.warning(
            "Teams are unbalanced: rating_gap=%d exceeds threshold=%.0f",
            gap,
            config.gap_threshold,
        )


if __name__ == "__main__":
    app()
