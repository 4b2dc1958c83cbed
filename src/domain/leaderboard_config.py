"""Load leaderboard view definitions from TOML files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from domain.config_base import BaseConfig, load_configs, parse_name_and_description
from domain.leaderboards import LeaderboardView
from domain.ranking import MetricKey, SortDirection


@dataclass(frozen=True)
class LeaderboardViewConfig(BaseConfig):
    """Configuration for one leaderboard view."""

    view: LeaderboardView

    def as_config_json(self) -> dict[str, Any]:
        return {
            "metric": self.view.metric_key.value,
            "direction": self.view.direction.value,
            "min_matches": self.view.min_matches,
            "limit": self.view.limit,
            "title": self.view.title,
        }


def load_leaderboard_view_configs(config_dir: Path) -> list[LeaderboardViewConfig]:
    """Load and validate all leaderboard view TOML files in a directory."""
    return load_configs(
        config_dir,
        _parse_leaderboard_view_config,
        duplicate_name_label="leaderboard view",
    )


def _parse_leaderboard_view_config(raw: dict[str, Any], file_path: Path) -> LeaderboardViewConfig:
    name, description = parse_name_and_description(raw, file_path)
    view_raw = raw.get("view", {})

    metric_value = view_raw.get("metric")
    if metric_value is None:
        raise ValueError(f"{file_path}: [view].metric is required")
    try:
        metric_key = MetricKey.parse(str(metric_value))
    except ValueError as exc:
        raise ValueError(f"{file_path}: [view].metric {exc}") from exc

    direction_value = str(view_raw.get("direction", SortDirection.DESC.value)).strip().lower()
    try:
        direction = SortDirection(direction_value)
    except ValueError as exc:
        raise ValueError(f"{file_path}: [view].direction must be 'asc' or 'desc'") from exc

    min_matches = int(view_raw.get("min_matches", 0))
    if min_matches < 0:
        raise ValueError(f"{file_path}: [view].min_matches must be >= 0")

    limit_value = view_raw.get("limit")
    limit = None if limit_value is None else int(limit_value)
    if limit is not None and limit <= 0:
        raise ValueError(f"{file_path}: [view].limit must be > 0")

    title_value = view_raw.get("title")
    title = None if title_value is None else str(title_value)

    return LeaderboardViewConfig(
        name=name,
        description=description,
        file_path=file_path,
        view=LeaderboardView(
            name=name,
            metric_key=metric_key,
            direction=direction,
            min_matches=min_matches,
            limit=limit,
            title=title,
        ),
    )


__all__ = ["LeaderboardViewConfig", "load_leaderboard_view_configs"]
