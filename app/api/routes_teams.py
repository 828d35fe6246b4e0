# app/api/routes_teams.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.deps import get_team_id
from app.schemas.statistics import StatisticsView
from app.schemas.team import Team
from app.services.api_football import get_league_teams, load_team_statistics

router = APIRouter(prefix="/api/teams", tags=["teams"])


@router.get("", response_model=List[Team])
def league_teams():
    """
    Teams of the configured league season. Empty when API-Football is unreachable.
    """
    return [Team(**t) for t in get_league_teams()]


@router.get("/{team_id}/statistics", response_model=StatisticsView)
async def team_statistics(tid: int = Depends(get_team_id)):
    """
    Display-ready season statistics for one team.
    """
    state = await load_team_statistics(tid)
    if state.status != "loaded" or state.view is None:
        raise HTTPException(status_code=502, detail=state.message or "Could not load team statistics")
    return state.view
