"""Tests for season simulation."""

import pytest

from src.models.schemas import Division, Team
from src.season import SeasonSimulator, TeamRecord
from src.season.simulator import POINTS_FOR_DRAW, POINTS_FOR_WIN
from src.stats import get_all_players, summarize_divisions


def test_seeded_season_is_reproducible():
    """Same seed replays the same season."""
    first = SeasonSimulator(teams_per_division=3, players_per_team=5, seed=7).simulate_season()
    second = SeasonSimulator(teams_per_division=3, players_per_team=5, seed=7).simulate_season()

    assert first == second


def test_league_shape():
    simulator = SeasonSimulator(teams_per_division=3, players_per_team=5, seed=1)
    teams = simulator.simulate_season()

    assert len(teams) == 3 * len(Division)
    assert all(isinstance(t, Team) for t in teams)
    assert all(len(t.players) == 5 for t in teams)
    assert len({t.name for t in teams}) == len(teams), "Team names should be unique"
    assert [d.division for d in summarize_divisions(teams)] == list(Division)
    assert all(1 <= p.skill_rate <= 100 for p in get_all_players(teams))


def test_standings_bookkeeping():
    """Every match produces exactly one win and one loss, or two draws."""
    simulator = SeasonSimulator(teams_per_division=2, players_per_team=4, rounds=2, seed=3)
    teams = simulator.simulate_season()

    matches_per_team = (len(teams) - 1) * 2
    assert len(simulator.results) == len(teams) * (len(teams) - 1)

    for team in teams:
        assert team.matches_played == matches_per_team
        assert team.current_points == team.wins * POINTS_FOR_WIN + team.draws * POINTS_FOR_DRAW

    assert sum(t.wins for t in teams) == sum(t.loses for t in teams)
    assert sum(t.draws for t in teams) % 2 == 0


def test_player_goals_match_results():
    simulator = SeasonSimulator(teams_per_division=2, players_per_team=4, seed=11)
    teams = simulator.simulate_season()

    match_goals = sum(r.home_goals + r.away_goals for r in simulator.results)
    assert sum(t.total_goals for t in teams) == match_goals


def test_play_match_updates_tallies():
    simulator = SeasonSimulator(teams_per_division=1, players_per_team=3, seed=5)
    home, away = simulator.create_league()[:2]

    result = simulator.play_match(home, away)

    assert home.wins + home.draws + home.loses == 1
    assert away.wins + away.draws + away.loses == 1
    assert sum(p.goals for p in home.players) == result.home_goals
    assert sum(p.goals for p in away.players) == result.away_goals
    if result.is_draw:
        assert home.draws == away.draws == 1
    assert result.format_short().startswith(home.name)


def test_team_record_freezes_into_team():
    record = TeamRecord(name="Vienna Titans", division=Division.CENTRAL, wins=2, draws=1, loses=1)

    team = record.to_team()

    assert team.current_points == 7
    assert team.division == Division.CENTRAL
    assert team.players == ()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"teams_per_division": 0},
        {"players_per_team": 0},
        {"rounds": 0},
        {"teams_per_division": 1000},
    ],
)
def test_invalid_sizes_rejected(kwargs):
    with pytest.raises(ValueError):
        SeasonSimulator(**kwargs)
