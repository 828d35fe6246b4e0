"""
Server-rendered screens: the team grid and the team statistics dashboard.
"""
from __future__ import annotations

import os

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from starlette.templating import Jinja2Templates

from app.core.config import settings
from app.schemas.statistics import StatisticsState
from app.schemas.team import Team
from app.services.api_football import get_league_teams, load_team_statistics

router = APIRouter(tags=["pages"])

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
templates = Jinja2Templates(directory=TEMPLATES_DIR)


def _ctx(**kwargs):
    ctx = {"app_name": settings.APP_NAME, "season": settings.SEASON}
    ctx.update(kwargs)
    return ctx


@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    teams = [Team(**t) for t in get_league_teams()]
    return templates.TemplateResponse(request, "home.html", _ctx(teams=teams))


def _stats_page(request: Request, state: StatisticsState):
    if state.status == "loaded":
        status_code = 200
    elif state.team_id is None:
        # bad or missing route parameter, never reached the API
        status_code = 400
    else:
        status_code = 502
    return templates.TemplateResponse(
        request, "team_stats.html", _ctx(state=state, view=state.view), status_code=status_code
    )


@router.get("/team-stats/{team_id}", response_class=HTMLResponse)
async def team_stats(request: Request, team_id: str):
    return _stats_page(request, await load_team_statistics(team_id))


# the id only ever comes from the path; query strings are ignored here
@router.get("/team-stats", response_class=HTMLResponse)
@router.get("/team-stats/", response_class=HTMLResponse, include_in_schema=False)
async def team_stats_missing(request: Request):
    return _stats_page(request, await load_team_statistics(None))
