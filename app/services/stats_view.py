"""
View-model derivation for the team statistics dashboard.

Every accessor here is total: it takes the raw ``response`` object of
``/teams/statistics`` (any shape, including ``{}`` or ``None``) and returns a
display value, falling back to a fixed default when the field or any parent
is missing. Templates never touch the raw payload.
"""
from __future__ import annotations
import math
from typing import Any, List, Optional

from app.core.config import settings
from app.schemas.statistics import (
    BiggestResults,
    CardBuckets,
    CleanSheets,
    FixturesSummary,
    FormationUsage,
    FormBadge,
    GoalsSummary,
    LeagueHeader,
    MinuteBucket,
    OutcomeKind,
    Penalties,
    SplitCount,
    StatisticsView,
    TeamHeader,
)
from app.services.api_football.parsers import _coalesce_str, _get, _maybe_int

FORM_LIMIT = 10

_OUTCOMES = {
    "W": (OutcomeKind.WIN, "Win"),
    "D": (OutcomeKind.DRAW, "Draw"),
    "L": (OutcomeKind.LOSS, "Loss"),
}


# ---------------- Small utils ----------------
def _count(v: Any) -> int:
    n = _maybe_int(v)
    return n if n is not None else 0

def _as_number(v: Any) -> Optional[float]:
    if v is None or isinstance(v, bool):
        return None
    try:
        n = float(v) if isinstance(v, (int, float)) else float(str(v).strip())
    except (ValueError, OverflowError):
        return None
    return n if math.isfinite(n) else None


# ---------------- Form ----------------
def decode_form(form: Any) -> List[FormBadge]:
    """One badge per character, input order. Empty/absent/non-string -> []."""
    if not isinstance(form, str) or not form:
        return []
    out: List[FormBadge] = []
    for ch in form:
        kind, label = _OUTCOMES.get(ch, (OutcomeKind.UNKNOWN, "Unknown"))
        out.append(FormBadge(character=ch, outcome_kind=kind, display_label=label))
    return out

def recent_form(form: Any, limit: int = FORM_LIMIT) -> List[FormBadge]:
    # first `limit` entries as the API orders them; no reversal
    return decode_form(form)[:limit]


# ---------------- Arithmetic ----------------
def percentage(part: Any, total: Any) -> str:
    """
    ``"0%"`` when total is zero/absent/non-numeric, else part/total*100
    rounded half-up to an integer (same as JavaScript's Math.round).
    """
    t = _as_number(total)
    if not t:
        return "0%"
    p = _as_number(part) or 0.0
    ratio = p / t * 100
    if not math.isfinite(ratio):
        return "0%"
    return f"{math.floor(ratio + 0.5)}%"

def goals_for_total(stats: Any) -> int:
    """goals.for.total.total, default 0."""
    return _count(_get(stats, "goals", "for", "total", "total"))

def goals_against_total(stats: Any) -> int:
    """goals.against.total.total, default 0."""
    return _count(_get(stats, "goals", "against", "total", "total"))

def goal_differential(stats: Any) -> int:
    return goals_for_total(stats) - goals_against_total(stats)


# ---------------- Sections ----------------
def league_header(stats: Any, season: Optional[int] = None) -> LeagueHeader:
    """league.* with "Unknown ..." fallbacks; season falls back to the configured one."""
    league = _get(stats, "league")
    return LeagueHeader(
        name=_coalesce_str(_get(league, "name")) or "Unknown league",
        country=_coalesce_str(_get(league, "country")) or "Unknown country",
        season=_maybe_int(_get(league, "season")) or (season if season is not None else settings.SEASON),
        logo_url=_coalesce_str(_get(league, "logo")),
    )

def team_header(stats: Any) -> TeamHeader:
    team = _get(stats, "team")
    return TeamHeader(
        name=_coalesce_str(_get(team, "name")) or "Unknown team",
        logo_url=_coalesce_str(_get(team, "logo")),
    )

def _split(node: Any) -> SplitCount:
    return SplitCount(
        home=_count(_get(node, "home")),
        away=_count(_get(node, "away")),
        total=_count(_get(node, "total")),
    )

def fixtures_played_total(stats: Any) -> int:
    return _count(_get(stats, "fixtures", "played", "total"))

def fixtures_summary(stats: Any) -> FixturesSummary:
    """fixtures.{played,wins,draws,loses}.{home,away,total}; every count defaults to 0."""
    fx = _get(stats, "fixtures")
    played = _split(_get(fx, "played"))
    wins = _split(_get(fx, "wins"))
    return FixturesSummary(
        played=played,
        wins=wins,
        draws=_split(_get(fx, "draws")),
        losses=_split(_get(fx, "loses")),  # API spelling
        win_percentage=percentage(wins.total, played.total),
    )

def minute_buckets(node: Any) -> List[MinuteBucket]:
    """
    ``{"0-15": {"total": 3, "percentage": "10.00%"}, ...}`` -> buckets in API
    order. Buckets with a zero or missing count are dropped.
    """
    if not isinstance(node, dict):
        return []
    out: List[MinuteBucket] = []
    for minute, data in node.items():
        n = _count(_get(data, "total"))
        if n <= 0:
            continue
        out.append(MinuteBucket(
            minute=str(minute),
            count=n,
            percentage=_coalesce_str(_get(data, "percentage")) or "0%",
        ))
    return out

def _average(stats: Any, side: str) -> str:
    # API sends averages as strings ("1.4"); keep them as display text
    v = _get(stats, "goals", side, "average", "total")
    if v is None or (isinstance(v, str) and not v.strip()):
        return "0"
    return str(v).strip()

def goals_summary(stats: Any) -> GoalsSummary:
    return GoalsSummary(
        goals_for=goals_for_total(stats),
        goals_against=goals_against_total(stats),
        average_for=_average(stats, "for"),
        average_against=_average(stats, "against"),
        differential=goal_differential(stats),
        for_by_minute=minute_buckets(_get(stats, "goals", "for", "minute")),
        against_by_minute=minute_buckets(_get(stats, "goals", "against", "minute")),
    )

def clean_sheets(stats: Any) -> CleanSheets:
    cs = _get(stats, "clean_sheet")
    return CleanSheets(
        home=_count(_get(cs, "home")),
        away=_count(_get(cs, "away")),
        total=_count(_get(cs, "total")),
    )

def penalties(stats: Any) -> Penalties:
    """penalty.scored/missed/total; success rate is the API's scored percentage or "0%"."""
    pen = _get(stats, "penalty")
    return Penalties(
        scored=_count(_get(pen, "scored", "total")),
        missed=_count(_get(pen, "missed", "total")),
        total=_count(_get(pen, "total")),
        success_rate=_coalesce_str(_get(pen, "scored", "percentage")) or "0%",
    )

def formations(stats: Any) -> List[FormationUsage]:
    """lineups[] with each formation's share of fixtures played. Anything but a list -> []."""
    lineups = _get(stats, "lineups")
    if not isinstance(lineups, list):
        return []
    played_total = fixtures_played_total(stats)
    out: List[FormationUsage] = []
    for lineup in lineups:
        if not isinstance(lineup, dict):
            continue
        played = _count(lineup.get("played"))
        out.append(FormationUsage(
            formation=_coalesce_str(lineup.get("formation")) or "N/A",
            played=played,
            percentage=percentage(played, played_total),
        ))
    return out

def card_buckets(stats: Any) -> CardBuckets:
    return CardBuckets(
        yellow=minute_buckets(_get(stats, "cards", "yellow")),
        red=minute_buckets(_get(stats, "cards", "red")),
    )

def biggest_results(stats: Any) -> BiggestResults:
    big = _get(stats, "biggest")
    return BiggestResults(
        win_home=_coalesce_str(_get(big, "wins", "home")) or "N/A",
        win_away=_coalesce_str(_get(big, "wins", "away")) or "N/A",
        loss_home=_coalesce_str(_get(big, "loses", "home")) or "N/A",
        loss_away=_coalesce_str(_get(big, "loses", "away")) or "N/A",
    )


# ---------------- Whole view ----------------
def build_statistics_view(stats: Any, season: Optional[int] = None) -> StatisticsView:
    """Compose every section. Never raises on missing fields; non-dict input is treated as ``{}``."""
    if not isinstance(stats, dict):
        stats = {}
    return StatisticsView(
        league=league_header(stats, season),
        team=team_header(stats),
        form=recent_form(_get(stats, "form")),
        fixtures=fixtures_summary(stats),
        goals=goals_summary(stats),
        clean_sheets=clean_sheets(stats),
        penalties=penalties(stats),
        formations=formations(stats),
        cards=card_buckets(stats),
        biggest=biggest_results(stats),
    )
