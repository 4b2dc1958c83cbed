"""Player records supplied by the community database."""

from __future__ import annotations

from dataclasses import dataclass

PLACEHOLDER_NAME = "Player"


@dataclass(frozen=True)
class Player:
    """Read-only cumulative stats for one community player."""

    id: str
    nickname: str | None = None
    first_name: str | None = None
    steam_id64: str | None = None
    profile_image_url: str | None = None
    is_admin: bool = False
    total_kills: int = 0
    total_deaths: int = 0
    total_headshots: int = 0
    total_damage: int = 0
    total_rounds_played: int = 0
    total_assists: int = 0
    total_matches: int = 0
    matches_won: int = 0
    total_mvps: int = 0
    total_5ks: int = 0
    skill_rating: int = 1000

    @property
    def display_name(self) -> str:
        if self.nickname:
            return self.nickname
        if self.first_name:
            return self.first_name
        return PLACEHOLDER_NAME


__all__ = ["PLACEHOLDER_NAME", "Player"]
