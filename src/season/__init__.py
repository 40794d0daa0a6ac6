"""Season simulation module."""

from .simulator import MatchResult, SeasonSimulator, TeamRecord

__all__ = [
    "MatchResult",
    "SeasonSimulator",
    "TeamRecord",
]
