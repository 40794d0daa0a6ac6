"""Season statistics over a league's teams and players."""

from dataclasses import dataclass, field
from typing import Sequence

from src.errors import EmptyInputError, NoMatchError
from src.models.schemas import Division, Player, Team


@dataclass
class DivisionData:
    """Aggregated standing of one division."""
    division: Division
    teams: list[Team] = field(default_factory=list)
    total_points: int = 0
    total_wins: int = 0

    def add(self, team: Team) -> None:
        self.teams.append(team)
        self.total_points += team.current_points
        self.total_wins += team.wins

    def format_short(self) -> str:
        """Short format for display."""
        return (
            f"{self.division.value.title()}: "
            f"{self.total_points} pts | "
            f"{self.total_wins} W | "
            f"{len(self.teams)} teams"
        )


def get_all_teams_sorted(teams: Sequence[Team]) -> list[Team]:
    """Teams by points, highest first; goal total decides a tie."""
    return sorted(
        teams,
        key=lambda team: (team.current_points, team.total_goals),
        reverse=True,
    )


def get_all_players(teams: Sequence[Team]) -> list[Player]:
    """All players from every team, in team then roster order."""
    return [player for team in teams for player in team.players]


def get_team_with_longest_name(teams: Sequence[Team]) -> Team:
    """Team with the longest name. The first one wins a tie."""
    if not teams:
        raise EmptyInputError("No teams to compare")
    return max(teams, key=lambda team: len(team.name))


def get_top_teams_with_least_loses(teams: Sequence[Team], teams_number: int) -> list[Team]:
    """Top teams with the fewest lost matches.

    If the amount of lost matches is equal, the team with more current
    points goes first.

    Args:
        teams: Teams to rank
        teams_number: How many teams to select. Values above the team
            count return every team; zero or less returns none.

    Returns:
        Selected teams, fewest loses first
    """
    if teams_number <= 0:
        return []

    ranked = sorted(teams, key=lambda team: (team.loses, -team.current_points))
    return ranked[:teams_number]


def get_top_players_from_each_team(teams: Sequence[Team]) -> list[Player]:
    """Top scorer of each team, in team order.

    Raises EmptyRosterError when a team has no players.
    """
    return [team.best_player for team in teams]


def get_teams_with_goalless_players(teams: Sequence[Team]) -> list[Team]:
    """Teams having at least one player who never scored."""
    return [
        team for team in teams
        if any(player.goals == 0 for player in team.players)
    ]


def get_players_with_at_least_goals(teams: Sequence[Team], min_goals: int) -> list[Player]:
    """Players with given or higher number of goals scored.

    Args:
        teams: Teams to search
        min_goals: Minimal number of goals scored (any integer)

    Returns:
        Matching players in team then roster order
    """
    return [player for player in get_all_players(teams) if player.goals >= min_goals]


def get_most_talented_player_in_division(teams: Sequence[Team], division: Division) -> Player:
    """Player with the highest skill rate within a division."""
    division_teams = [team for team in teams if team.division == division]
    if not division_teams:
        raise NoMatchError(f"No teams in division {division.value}")

    players = get_all_players(division_teams)
    if not players:
        raise NoMatchError(f"No players in division {division.value}")

    return max(players, key=lambda player: player.skill_rate)


def summarize_divisions(teams: Sequence[Team]) -> list[DivisionData]:
    """Group teams by division and total their points and wins.

    Divisions are listed in the order they are first seen.
    """
    grouped: dict[Division, DivisionData] = {}

    for team in teams:
        data = grouped.get(team.division)
        if data is None:
            data = grouped[team.division] = DivisionData(division=team.division)
        data.add(team)

    return list(grouped.values())


def get_strongest_division(teams: Sequence[Team]) -> Division:
    """Division with the most combined points.

    If points are level, the division with more combined wins is stronger.
    On a full tie the division seen first is returned.
    """
    if not teams:
        raise EmptyInputError("No teams to group into divisions")

    strongest = max(
        summarize_divisions(teams),
        key=lambda data: (data.total_points, data.total_wins),
    )
    return strongest.division
