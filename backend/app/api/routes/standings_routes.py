"""
Standings and playoff probability API routes.
"""

import logging
import random
from typing import Optional
from fastapi import APIRouter, HTTPException, Query, status

from ..schemas import StandingsResponse
from ...platforms import get_provider, LeagueNotFoundError, LeaguePrivateError, PlatformError
from ...simulator import TargetTeamNotFoundError, compute_standings_and_probability
from ...core.config import MAX_SIMULATION_ITERATIONS, SIMULATION_ITERATIONS
from ...core.sports import Sport

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/leagues", tags=["standings"])


@router.get("/{league_id}/standings", response_model=StandingsResponse)
async def get_standings(
    league_id: str,
    team_id: str,
    platform: str = "sleeper",
    sport: str = "football",
    season: Optional[int] = None,
    iterations: int = Query(SIMULATION_ITERATIONS, ge=1, le=MAX_SIMULATION_ITERATIONS),
    seed: Optional[int] = None
) -> StandingsResponse:
    """
    Get standings, power rankings, and a team's playoff probability.

    Pass `seed` to make the simulation reproducible.
    """
    try:
        sport_enum = Sport(sport.lower())
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid sport: {sport}. Supported: football, basketball, baseball, hockey"
        )

    try:
        provider = get_provider(platform, sport_enum, season=season)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        target_team_id = provider.normalize_team_id(team_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid team id for {provider.platform_name}: {team_id}"
        )

    rng = random.Random(seed) if seed is not None else None

    try:
        report = await compute_standings_and_probability(
            provider, league_id, target_team_id, iterations=iterations, rng=rng
        )
    except TargetTeamNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except LeagueNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"League {league_id} not found"
        )
    except LeaguePrivateError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="This league is private and cannot be read."
        )
    except PlatformError as e:
        logger.error("Platform error for league %s: %s", league_id, e)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    data = report.to_dict()
    return StandingsResponse(league_id=league_id, platform=provider.platform_name, **data)
