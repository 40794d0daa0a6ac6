"""Export utilities for saving season standings."""

from datetime import datetime
from pathlib import Path
from typing import Sequence

import pandas as pd

from src.models.schemas import Team
from src.stats import get_all_teams_sorted


def export_standings_to_csv(
    teams: Sequence[Team],
    output_dir: str = "output",
) -> Path:
    """Export ranked standings to a CSV file.

    Args:
        teams: Teams of the completed season
        output_dir: Directory to save the CSV file

    Returns:
        Path to the created CSV file
    """
    # Create output directory if it doesn't exist
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    # Build data for DataFrame
    data = []
    for rank, team in enumerate(get_all_teams_sorted(teams), start=1):
        data.append({
            "rank": rank,
            "team": team.name,
            "division": team.division.value,
            "points": team.current_points,
            "wins": team.wins,
            "draws": team.draws,
            "loses": team.loses,
            "goals": team.total_goals,
            "best_player": team.best_player.name if team.players else "",
        })

    # Create DataFrame
    df = pd.DataFrame(data)

    # Generate filename with timestamp
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    filename = output_path / f"standings_{timestamp}.csv"

    # Save to CSV
    df.to_csv(filename, index=False)

    return filename
