"""League statistics module."""

from src.errors import (
    EmptyInputError,
    EmptyRosterError,
    LeagueStatisticsError,
    NoMatchError,
)
from .league import (
    DivisionData,
    get_all_players,
    get_all_teams_sorted,
    get_most_talented_player_in_division,
    get_players_with_at_least_goals,
    get_strongest_division,
    get_team_with_longest_name,
    get_teams_with_goalless_players,
    get_top_players_from_each_team,
    get_top_teams_with_least_loses,
    summarize_divisions,
)

__all__ = [
    "DivisionData",
    "EmptyInputError",
    "EmptyRosterError",
    "LeagueStatisticsError",
    "NoMatchError",
    "get_all_players",
    "get_all_teams_sorted",
    "get_most_talented_player_in_division",
    "get_players_with_at_least_goals",
    "get_strongest_division",
    "get_team_with_longest_name",
    "get_teams_with_goalless_players",
    "get_top_players_from_each_team",
    "get_top_teams_with_least_loses",
    "summarize_divisions",
]
