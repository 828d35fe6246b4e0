from __future__ import annotations
from enum import Enum
from typing import List, Literal, Optional
from pydantic import BaseModel


class OutcomeKind(str, Enum):
    WIN = "win"
    DRAW = "draw"
    LOSS = "loss"
    UNKNOWN = "unknown"


class FormBadge(BaseModel):
    character: str
    outcome_kind: OutcomeKind
    display_label: str


class LeagueHeader(BaseModel):
    name: str = "Unknown league"
    country: str = "Unknown country"
    season: int
    logo_url: Optional[str] = None


class TeamHeader(BaseModel):
    name: str = "Unknown team"
    logo_url: Optional[str] = None


class SplitCount(BaseModel):
    home: int = 0
    away: int = 0
    total: int = 0


class FixturesSummary(BaseModel):
    played: SplitCount
    wins: SplitCount
    draws: SplitCount
    losses: SplitCount
    win_percentage: str = "0%"


class MinuteBucket(BaseModel):
    minute: str                 # e.g. "0-15", "76-90"
    count: int
    percentage: str = "0%"      # as reported by the API, e.g. "12.50%"


class GoalsSummary(BaseModel):
    goals_for: int = 0
    goals_against: int = 0
    average_for: str = "0"
    average_against: str = "0"
    differential: int = 0
    for_by_minute: List[MinuteBucket] = []
    against_by_minute: List[MinuteBucket] = []


class CleanSheets(BaseModel):
    home: int = 0
    away: int = 0
    total: int = 0


class Penalties(BaseModel):
    scored: int = 0
    missed: int = 0
    total: int = 0
    success_rate: str = "0%"


class FormationUsage(BaseModel):
    formation: str
    played: int = 0
    percentage: str = "0%"      # of fixtures played


class CardBuckets(BaseModel):
    yellow: List[MinuteBucket] = []
    red: List[MinuteBucket] = []


class BiggestResults(BaseModel):
    win_home: str = "N/A"
    win_away: str = "N/A"
    loss_home: str = "N/A"
    loss_away: str = "N/A"


class StatisticsView(BaseModel):
    league: LeagueHeader
    team: TeamHeader
    form: List[FormBadge] = []
    fixtures: FixturesSummary
    goals: GoalsSummary
    clean_sheets: CleanSheets
    penalties: Penalties
    formations: List[FormationUsage] = []
    cards: CardBuckets
    biggest: BiggestResults


StatusType = Literal["loading", "loaded", "failed"]


class StatisticsState(BaseModel):
    status: StatusType = "loading"
    team_id: Optional[int] = None
    view: Optional[StatisticsView] = None     # only when loaded
    message: Optional[str] = None             # only when failed
