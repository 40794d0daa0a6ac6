"""Pydantic models for data structures."""

from .schemas import (
    Division,
    Player,
    Team,
)

__all__ = [
    "Division",
    "Player",
    "Team",
]
