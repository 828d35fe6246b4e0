"""
API-Football service package: HTTP client, payload parsers, roster loader and
statistics fetcher.
"""

from .client import ApiFootballError, api_football_get
from .parsers import parse_team, parse_teams, response_list, response_object
from .teams import get_league_teams
from .statistics import (
    NO_TEAM_MESSAGE,
    StatisticsLoad,
    load_team_statistics,
    parse_team_id,
)
