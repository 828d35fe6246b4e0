from __future__ import annotations
from typing import List, Optional

from app.core.config import settings
from app.core.logging import get_logger
from app.services.api_football.client import ApiFootballError, api_football_get
from app.services.api_football.parsers import parse_teams

logger = get_logger(__name__)

FAKE_TEAMS: List[dict] = [
    {"id": 1137, "name": "Atletico Nacional", "country": "Colombia", "founded": 1947,
     "logo_url": "https://media.api-sports.io/football/teams/1137.png"},
    {"id": 1135, "name": "Millonarios", "country": "Colombia", "founded": 1946,
     "logo_url": "https://media.api-sports.io/football/teams/1135.png"},
    {"id": 1139, "name": "America de Cali", "country": "Colombia", "founded": None,
     "logo_url": None},
]


def get_league_teams(league_id: Optional[int] = None, season: Optional[int] = None) -> List[dict]:
    """
    Team roster for a league season, in API order. Any upstream failure is
    logged and degrades to an empty list.
    """
    league = league_id if league_id is not None else settings.LEAGUE_ID
    yr = season if season is not None else settings.SEASON

    if settings.API_FOOTBALL_FAKE_MODE:
        return [dict(t) for t in FAKE_TEAMS]

    try:
        payload = api_football_get("/teams", {"league": league, "season": yr})
    except ApiFootballError as e:
        logger.error("teams_fetch_failed", league=league, season=yr, error=str(e), status_code=e.status_code)
        return []

    teams = parse_teams(payload)
    logger.info("teams_fetched", count=len(teams), league=league, season=yr)
    return teams
