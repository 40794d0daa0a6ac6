"""Pydantic schemas for league data."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

from src.errors import EmptyRosterError


class Division(str, Enum):
    """League division."""
    EAST = "east"
    WEST = "west"
    CENTRAL = "central"


class Player(BaseModel):
    """Rostered player with season totals."""
    model_config = ConfigDict(frozen=True)

    name: str
    goals: int = Field(default=0, ge=0)
    skill_rate: float = 0.0


class Team(BaseModel):
    """Team standing at the end of the season."""
    model_config = ConfigDict(frozen=True)

    name: str
    division: Division
    current_points: int = 0
    wins: int = 0
    loses: int = 0
    draws: int = 0
    players: tuple[Player, ...] = ()

    @property
    def total_goals(self) -> int:
        """Sum of goals scored by the whole roster."""
        return sum(player.goals for player in self.players)

    @property
    def best_player(self) -> Player:
        """Top scorer; the first one listed wins a tie."""
        if not self.players:
            raise EmptyRosterError(f"Team {self.name} has no players")
        return max(self.players, key=lambda player: player.goals)

    @property
    def matches_played(self) -> int:
        return self.wins + self.draws + self.loses
