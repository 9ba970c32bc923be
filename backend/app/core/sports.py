"""
Sports the providers can read, and how each one names its seasons.
"""

from enum import Enum
from datetime import datetime


class Sport(str, Enum):
    """Supported fantasy sports."""
    FOOTBALL = "football"
    BASKETBALL = "basketball"
    BASEBALL = "baseball"
    HOCKEY = "hockey"


# ESPN game codes used in the league URL
ESPN_SPORT_CODES = {
    Sport.FOOTBALL: "ffl",
    Sport.BASKETBALL: "fba",
    Sport.BASEBALL: "flb",
    Sport.HOCKEY: "fhl",
}

# Sleeper only runs head-to-head leagues for these two
SLEEPER_SPORT_CODES = {
    Sport.FOOTBALL: "nfl",
    Sport.BASKETBALL: "nba",
}

# (opening month, closing month, named for the year the season ends in)
SEASON_CALENDAR = {
    Sport.FOOTBALL: (9, 2, False),
    Sport.BASKETBALL: (10, 6, True),
    Sport.HOCKEY: (10, 6, True),
    Sport.BASEBALL: (3, 10, False),
}


def get_current_season(sport: Sport, now: datetime = None) -> int:
    """
    Season year a provider should be asked for.

    A football league in January is still the previous year's season. A
    basketball league in November belongs to next year's season. Baseball
    always uses the calendar year.
    """
    if now is None:
        now = datetime.now()

    opens, closes, named_for_end_year = SEASON_CALENDAR[sport]
    spans_new_year = opens > closes

    start_year = now.year
    if spans_new_year and now.month <= closes:
        start_year -= 1

    if spans_new_year and named_for_end_year:
        return start_year + 1
    return start_year
