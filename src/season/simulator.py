"""Season simulation producing completed-season league data."""

import random
from dataclasses import dataclass, field
from itertools import combinations, product
from typing import Optional

from src.models.schemas import Division, Player, Team


# Standings points
POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1

# Match model
SCORING_CHANCES = 10  # attempts per side per match
AVG_GOALS_PER_SIDE = 1.4
HOME_ADVANTAGE = 1.1  # multiplier on the home side's expected goals

CITIES = [
    "Amsterdam", "Barcelona", "Budapest", "Dublin", "Krakow", "Lisbon",
    "Madrid", "Milan", "Porto", "Prague", "Vienna", "Warsaw",
]
NICKNAMES = [
    "Eagles", "Falcons", "Lions", "Rangers", "Rovers", "Sharks",
    "Titans", "United", "Wanderers", "Wolves",
]
FIRST_NAMES = [
    "Adam", "Bruno", "Carlos", "Daniel", "Erik", "Filip", "Hugo", "Igor",
    "Jakub", "Luca", "Marek", "Nico", "Oscar", "Pavel", "Tomas", "Viktor",
]
LAST_NAMES = [
    "Almeida", "Berg", "Costa", "Dvorak", "Fischer", "Horvat", "Jansen",
    "Kowalski", "Lindqvist", "Moreau", "Novak", "Rossi", "Silva", "Varga",
]


@dataclass
class PlayerRecord:
    """Player tally while the season is in progress."""
    name: str
    skill_rate: float
    goals: int = 0

    def to_player(self) -> Player:
        return Player(name=self.name, goals=self.goals, skill_rate=self.skill_rate)


@dataclass
class TeamRecord:
    """Team tally while the season is in progress."""
    name: str
    division: Division
    players: list[PlayerRecord] = field(default_factory=list)
    wins: int = 0
    draws: int = 0
    loses: int = 0

    @property
    def current_points(self) -> int:
        return self.wins * POINTS_FOR_WIN + self.draws * POINTS_FOR_DRAW

    @property
    def avg_skill(self) -> float:
        if not self.players:
            return 0.0
        return sum(p.skill_rate for p in self.players) / len(self.players)

    def to_team(self) -> Team:
        """Freeze the tally into a completed-season Team."""
        return Team(
            name=self.name,
            division=self.division,
            current_points=self.current_points,
            wins=self.wins,
            draws=self.draws,
            loses=self.loses,
            players=[p.to_player() for p in self.players],
        )


@dataclass
class MatchResult:
    """Outcome of a single fixture."""
    home: str
    away: str
    home_goals: int = 0
    away_goals: int = 0

    @property
    def is_draw(self) -> bool:
        return self.home_goals == self.away_goals

    def format_short(self) -> str:
        """Short format for display."""
        return f"{self.home} {self.home_goals}-{self.away_goals} {self.away}"


class SeasonSimulator:
    """Builds a league and plays every fixture of one season."""

    def __init__(
        self,
        teams_per_division: int = 4,
        players_per_team: int = 8,
        rounds: int = 2,
        seed: Optional[int] = None,
    ):
        if teams_per_division < 1:
            raise ValueError("teams_per_division must be at least 1")
        if players_per_team < 1:
            raise ValueError("players_per_team must be at least 1")
        if rounds < 1:
            raise ValueError("rounds must be at least 1")

        team_count = teams_per_division * len(Division)
        if team_count > len(CITIES) * len(NICKNAMES):
            raise ValueError(f"Cannot name {team_count} distinct teams")

        self.teams_per_division = teams_per_division
        self.players_per_team = players_per_team
        self.rounds = rounds
        self.rng = random.Random(seed)
        self.results: list[MatchResult] = []

    def create_league(self) -> list[TeamRecord]:
        """Create every division's teams with fresh rosters."""
        names = self.rng.sample(
            [f"{city} {nickname}" for city, nickname in product(CITIES, NICKNAMES)],
            self.teams_per_division * len(Division),
        )

        records = []
        for index, name in enumerate(names):
            division = list(Division)[index // self.teams_per_division]
            records.append(TeamRecord(
                name=name,
                division=division,
                players=[self._create_player() for _ in range(self.players_per_team)],
            ))
        return records

    def play_match(self, home: TeamRecord, away: TeamRecord) -> MatchResult:
        """Play one fixture and update both tallies."""
        result = MatchResult(home=home.name, away=away.name)

        total_skill = home.avg_skill + away.avg_skill
        home_share = home.avg_skill / total_skill if total_skill > 0 else 0.5

        # Expected goals split by relative skill, home side gets a bump
        home_expected = 2 * AVG_GOALS_PER_SIDE * home_share * HOME_ADVANTAGE
        away_expected = 2 * AVG_GOALS_PER_SIDE * (1 - home_share)

        result.home_goals = self._score(home, home_expected)
        result.away_goals = self._score(away, away_expected)

        if result.is_draw:
            home.draws += 1
            away.draws += 1
        elif result.home_goals > result.away_goals:
            home.wins += 1
            away.loses += 1
        else:
            away.wins += 1
            home.loses += 1

        self.results.append(result)
        return result

    def simulate_season(self) -> list[Team]:
        """Play a full round robin and return the final teams."""
        records = self.create_league()
        self.results = []

        for round_number in range(self.rounds):
            for first, second in combinations(records, 2):
                # Alternate home side each round
                if round_number % 2 == 0:
                    self.play_match(first, second)
                else:
                    self.play_match(second, first)

        return [record.to_team() for record in records]

    def _create_player(self) -> PlayerRecord:
        name = f"{self.rng.choice(FIRST_NAMES)} {self.rng.choice(LAST_NAMES)}"
        return PlayerRecord(name=name, skill_rate=float(self.rng.randint(1, 100)))

    def _score(self, team: TeamRecord, expected_goals: float) -> int:
        """Roll scoring chances; credit each goal to a skill-weighted player."""
        chance = min(expected_goals / SCORING_CHANCES, 1.0)
        goals = sum(1 for _ in range(SCORING_CHANCES) if self.rng.random() < chance)

        weights = [p.skill_rate for p in team.players]
        for _ in range(goals):
            scorer = self.rng.choices(team.players, weights=weights)[0]
            scorer.goals += 1

        return goals
