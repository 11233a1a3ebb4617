# tennis_league/errors.py


class TennisLeagueError(Exception):
    """Base class for errors raised by the Tennis League service."""


class ConfigurationError(TennisLeagueError):
    """Raised when configuration is missing, malformed or unusable."""
