"""Load team-balancing policy from TOML files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from domain.config_base import BaseConfig, load_configs, parse_name_and_description
from domain.roster import DEFAULT_GAP_THRESHOLD, BalanceWeight


@dataclass(frozen=True)
class BalancingConfig(BaseConfig):
    """Policy knobs for one balancing setup."""

    weight: BalanceWeight = BalanceWeight.SKILL_RATING
    gap_threshold: float = float(DEFAULT_GAP_THRESHOLD)
    separated_player_ids: tuple[str, ...] = ()

    def as_config_json(self) -> dict[str, Any]:
        return {
            "weight": self.weight.value,
            "gap_threshold": self.gap_threshold,
            "separated_player_ids": list(self.separated_player_ids),
        }


def load_balancing_configs(config_dir: Path) -> list[BalancingConfig]:
    """Load and validate all balancing TOML files in a directory."""
    return load_configs(
        config_dir,
        _parse_balancing_config,
        duplicate_name_label="balancing",
    )


def _parse_balancing_config(raw: dict[str, Any], file_path: Path) -> BalancingConfig:
    name, description = parse_name_and_description(raw, file_path)
    balancing_raw = raw.get("balancing", {})

    weight_value = str(balancing_raw.get("weight", BalanceWeight.SKILL_RATING.value)).strip().lower()
    try:
        weight = BalanceWeight(weight_value)
    except ValueError as exc:
        accepted = ", ".join(item.value for item in BalanceWeight)
        raise ValueError(f"{file_path}: [balancing].weight must be one of: {accepted}") from exc

    gap_threshold = float(balancing_raw.get("gap_threshold", DEFAULT_GAP_THRESHOLD))
    if gap_threshold < 0.0:
        raise ValueError(f"{file_path}: [balancing].gap_threshold must be >= 0")

    separated_raw = balancing_raw.get("separated_player_ids", [])
    if not isinstance(separated_raw, list):
        raise ValueError(f"{file_path}: [balancing].separated_player_ids must be a list")
    separated_player_ids = tuple(str(value) for value in separated_raw)

    return BalancingConfig(
        name=name,
        description=description,
        file_path=file_path,
        weight=weight,
        gap_threshold=gap_threshold,
        separated_player_ids=separated_player_ids,
    )


__all__ = ["BalancingConfig", "load_balancing_configs"]
