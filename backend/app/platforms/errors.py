"""
Exceptions raised by season data providers.
"""


class LeagueNotFoundError(Exception):
    """Raised when a league cannot be found."""
    pass


class LeaguePrivateError(Exception):
    """Raised when a league is private and cannot be accessed."""
    pass


class PlatformError(Exception):
    """Raised when there's an error communicating with the platform."""
    pass


# Failures a caller may recover from by treating the data as absent
PROVIDER_ERRORS = (LeagueNotFoundError, LeaguePrivateError, PlatformError)
