"""League Statistics - Main Entry Point."""

from typing import Callable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config import get_settings
from src.models.schemas import Division, Player, Team
from src.season import SeasonSimulator
from src.stats import (
    LeagueStatisticsError,
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
from src.utils import export_standings_to_csv


console = Console()


def display_standings(teams: list[Team]):
    """Display the league table."""
    table = Table(title="Final Standings")

    table.add_column("#", style="dim")
    table.add_column("Team", style="cyan")
    table.add_column("Division", style="blue")
    table.add_column("Pts", style="green")
    table.add_column("W-D-L", style="white")
    table.add_column("Goals", style="yellow")

    for rank, team in enumerate(get_all_teams_sorted(teams), start=1):
        table.add_row(
            str(rank),
            team.name,
            team.division.value.title(),
            str(team.current_points),
            f"{team.wins}-{team.draws}-{team.loses}",
            str(team.total_goals),
        )

    console.print(table)


def display_divisions(teams: list[Team]):
    """Display combined points and wins per division."""
    table = Table(title="Divisions")

    table.add_column("Division", style="blue")
    table.add_column("Teams", style="white")
    table.add_column("Points", style="green")
    table.add_column("Wins", style="yellow")

    for data in summarize_divisions(teams):
        table.add_row(
            data.division.value.title(),
            str(len(data.teams)),
            str(data.total_points),
            str(data.total_wins),
        )

    console.print()
    console.print(table)


def display_players(title: str, players: list[Player]):
    """Display a list of players."""
    table = Table(title=title)

    table.add_column("Player", style="cyan")
    table.add_column("Goals", style="green")
    table.add_column("Skill", style="magenta")

    for player in players:
        table.add_row(player.name, str(player.goals), f"{player.skill_rate:.0f}")

    console.print()
    console.print(table)


def describe_strongest_division(teams: list[Team]) -> str:
    """Strongest division with its combined totals."""
    strongest = get_strongest_division(teams)
    data = next(d for d in summarize_divisions(teams) if d.division == strongest)
    return data.format_short()


def format_talent(player: Player) -> str:
    return f"{player.name} (skill {player.skill_rate:.0f})"


def report_section(title: str, query: Callable[[], str]):
    """Print one statistic, reporting query failures instead of aborting."""
    try:
        value = query()
    except LeagueStatisticsError as e:
        console.print(f"[red]{title}: {e}[/red]")
        return
    console.print(f"[bold]{title}:[/bold] {value}")


def main():
    """Simulate a season and print its statistics."""
    settings = get_settings()

    console.print("[bold blue]League Statistics[/bold blue]")

    simulator = SeasonSimulator(
        teams_per_division=settings.teams_per_division,
        players_per_team=settings.players_per_team,
        rounds=settings.season_rounds,
        seed=settings.season_seed,
    )

    console.print("[yellow]Simulating season...[/yellow]")
    teams = simulator.simulate_season()
    console.print(f"Played {len(simulator.results)} matches between {len(teams)} teams\n")

    # Season summary
    players = get_all_players(teams)
    total_goals = sum(p.goals for p in players)
    console.print(Panel.fit(
        f"[bold]Teams:[/bold] {len(teams)}\n"
        f"[bold]Players:[/bold] {len(players)}\n"
        f"[bold]Matches:[/bold] {len(simulator.results)}\n"
        f"[bold]Goals:[/bold] {total_goals}",
        title="Season Summary",
        border_style="blue",
    ))

    display_standings(teams)
    display_divisions(teams)

    console.print()
    report_section(
        "Strongest division",
        lambda: describe_strongest_division(teams),
    )
    report_section(
        "Longest team name",
        lambda: get_team_with_longest_name(teams).name,
    )
    report_section(
        f"Top {settings.top_teams_count} by fewest loses",
        lambda: ", ".join(
            f"{t.name} ({t.loses} L, {t.current_points} pts)"
            for t in get_top_teams_with_least_loses(teams, settings.top_teams_count)
        ),
    )
    report_section(
        "Teams with goalless players",
        lambda: ", ".join(t.name for t in get_teams_with_goalless_players(teams)) or "none",
    )

    for division in Division:
        report_section(
            f"Most talented in {division.value.title()}",
            lambda division=division: format_talent(
                get_most_talented_player_in_division(teams, division)
            ),
        )

    try:
        display_players("Top Scorer per Team", get_top_players_from_each_team(teams))
    except LeagueStatisticsError as e:
        console.print(f"[red]Top scorers unavailable: {e}[/red]")

    display_players(
        f"Players with {settings.min_goals}+ Goals",
        get_players_with_at_least_goals(teams, settings.min_goals),
    )

    if settings.export_csv:
        csv_path = export_standings_to_csv(teams, settings.output_dir)
        console.print(f"\n[green]Standings exported to: {csv_path}[/green]")


if __name__ == "__main__":
    main()
