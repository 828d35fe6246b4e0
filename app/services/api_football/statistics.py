from __future__ import annotations
from typing import Any, Optional

from starlette.concurrency import run_in_threadpool

from app.core.config import settings
from app.core.logging import get_logger
from app.schemas.statistics import StatisticsState
from app.services.api_football.client import ApiFootballError, api_football_get
from app.services.api_football.parsers import response_object
from app.services.stats_view import build_statistics_view

logger = get_logger(__name__)

NO_TEAM_MESSAGE = "No team was specified in the URL"

FAKE_STATISTICS: dict = {
    "league": {"id": 239, "name": "Primera A", "country": "Colombia", "season": 2023,
               "logo": "https://media.api-sports.io/football/leagues/239.png"},
    "team": {"id": 1137, "name": "Atletico Nacional",
             "logo": "https://media.api-sports.io/football/teams/1137.png"},
    "form": "WWDLWDWWLW",
    "fixtures": {
        "played": {"home": 10, "away": 10, "total": 20},
        "wins": {"home": 7, "away": 4, "total": 11},
        "draws": {"home": 2, "away": 3, "total": 5},
        "loses": {"home": 1, "away": 3, "total": 4},
    },
    "goals": {
        "for": {
            "total": {"home": 18, "away": 12, "total": 30},
            "average": {"home": "1.8", "away": "1.2", "total": "1.5"},
            "minute": {"0-15": {"total": 4, "percentage": "13.33%"},
                       "76-90": {"total": 9, "percentage": "30.00%"},
                       "91-105": {"total": None, "percentage": None}},
        },
        "against": {
            "total": {"home": 7, "away": 11, "total": 18},
            "average": {"home": "0.7", "away": "1.1", "total": "0.9"},
            "minute": {"46-60": {"total": 6, "percentage": "33.33%"}},
        },
    },
    "biggest": {"wins": {"home": "4-0", "away": "1-3"}, "loses": {"home": None, "away": "2-0"}},
    "clean_sheet": {"home": 5, "away": 2, "total": 7},
    "penalty": {"scored": {"total": 4, "percentage": "80.00%"},
                "missed": {"total": 1, "percentage": "20.00%"}, "total": 5},
    "lineups": [{"formation": "4-2-3-1", "played": 14}, {"formation": "4-3-3", "played": 6}],
    "cards": {"yellow": {"31-45": {"total": 8, "percentage": "25.81%"}},
              "red": {"76-90": {"total": 1, "percentage": "100.00%"}}},
}


def parse_team_id(raw: Any) -> Optional[int]:
    """Route value -> int team id, or None when it is not an integer."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return None


class StatisticsLoad:
    """
    One fetch lifecycle for a team's season statistics.

    ``loading`` is the initial state; it settles exactly once into ``loaded``
    or ``failed``. There is no way back to ``loading``: a new screen load
    means a new ``StatisticsLoad``.
    """

    def __init__(self, team_id: Any, *, league_id: Optional[int] = None, season: Optional[int] = None):
        self.raw_team_id = team_id
        self.league_id = league_id if league_id is not None else settings.LEAGUE_ID
        self.season = season if season is not None else settings.SEASON
        self.state = StatisticsState(status="loading", team_id=parse_team_id(team_id))

    @property
    def settled(self) -> bool:
        return self.state.status != "loading"

    def _require_loading(self, target: str) -> None:
        if self.settled:
            raise RuntimeError(f"Illegal transition {self.state.status} -> {target}")

    def resolve(self, stats: Any) -> StatisticsState:
        self._require_loading("loaded")
        self.state = StatisticsState(
            status="loaded",
            team_id=self.state.team_id,
            view=build_statistics_view(stats, self.season),
        )
        return self.state

    def fail(self, message: str) -> StatisticsState:
        self._require_loading("failed")
        self.state = StatisticsState(status="failed", team_id=self.state.team_id, message=message)
        return self.state

    def _fetch(self, team_id: int) -> dict:
        if settings.API_FOOTBALL_FAKE_MODE:
            return dict(FAKE_STATISTICS)
        payload = api_football_get(
            "/teams/statistics",
            {"league": self.league_id, "season": self.season, "team": team_id},
        )
        return response_object(payload)

    async def run(self) -> StatisticsState:
        """Issue the single request (off the event loop) and settle the state."""
        if self.settled:
            return self.state

        raw = self.raw_team_id
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            logger.error("statistics_missing_team_id")
            return self.fail(NO_TEAM_MESSAGE)

        team_id = self.state.team_id
        if team_id is None:
            logger.error("statistics_invalid_team_id", raw=repr(raw))
            return self.fail(f"Invalid team identifier: {raw!r}")

        logger.info("statistics_loading", team=team_id, league=self.league_id, season=self.season)
        try:
            stats = await run_in_threadpool(self._fetch, team_id)
        except ApiFootballError as e:
            logger.error("statistics_fetch_failed", team=team_id, error=str(e), status_code=e.status_code)
            detail = f" (HTTP {e.status_code})" if e.status_code else ""
            return self.fail(f"Could not load team statistics{detail}")
        except Exception:
            logger.exception("statistics_fetch_crashed", team=team_id)
            return self.fail("Could not load team statistics")

        return self.resolve(stats)


async def load_team_statistics(team_id: Any) -> StatisticsState:
    return await StatisticsLoad(team_id).run()
