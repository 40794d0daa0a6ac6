"""Errors raised by league statistics queries."""


class LeagueStatisticsError(Exception):
    """Base class for statistics failures."""


class EmptyInputError(LeagueStatisticsError, ValueError):
    """Operation needs at least one team or player and got none."""


class EmptyRosterError(EmptyInputError):
    """Team has no players to pick from."""


class NoMatchError(LeagueStatisticsError, LookupError):
    """Lookup found no qualifying element."""
