"""Utility functions."""

from .export import export_standings_to_csv

__all__ = [
    "export_standings_to_csv",
]
