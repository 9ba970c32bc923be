"""
Pydantic schemas for API responses.
"""

from typing import List, Optional, Union
from pydantic import BaseModel, Field


class RankedStandingResponse(BaseModel):
    """A team's record with standings and power positions."""
    team_id: Union[int, str]
    name: Optional[str] = None
    wins: int
    losses: int
    ties: int
    points_for: float
    points_against: float
    record: str
    games_played: int
    points_per_game: float
    win_pct: float
    standing_rank: int
    power_rank: int


class PlayoffProbabilityResponse(BaseModel):
    """Playoff qualification estimate."""
    probability: int = Field(..., ge=0, le=100)
    current_rank: int
    playoff_slot_count: int
    weeks_remaining: int
    status: str  # "IN" or "OUT"
    method: str  # "final", "simulation" or "heuristic"


class StandingsResponse(BaseModel):
    """Standings, power rankings and playoff odds for one team."""
    league_id: str
    platform: str
    target_team_id: Union[int, str]
    current_week: int
    standings: List[RankedStandingResponse]
    power_rankings: List[RankedStandingResponse]
    playoff_probability: PlayoffProbabilityResponse
    skipped_weeks: List[int] = []
